"""Ingredient and recipe persistence tests."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from src.domain.ingredient import Ingredient
from src.domain.recipe import RecipeBuilder, RecipeIngredientLine
from src.models.enums import IngredientCategory, MealType
from src.models.ingredient import IngredientRow
from src.models.recipe import RecipeStepRow
from src.services.exceptions import PersistenceError
from src.services.ingredient_repository import IngredientRepository
from src.services.recipe_repository import RecipeRepository


@pytest.mark.parametrize(
    "category,code",
    (
        (IngredientCategory.VEGETABLE, 1),
        (IngredientCategory.FRUIT, 2),
        (IngredientCategory.SEED, 3),
        (IngredientCategory.DAIRY, 4),
        (IngredientCategory.MEAT, 5),
        (IngredientCategory.FISH, 6),
        (IngredientCategory.OTHER, 7),
    ),
)
def test_category_codes(category, code):
    """Test the stored code of every category and back."""
    assert category.to_code() == code
    assert IngredientCategory.from_code(code) == category


@pytest.mark.parametrize("code", (0, 8, 99, -1, None))
def test_unknown_category_code_reads_as_other(code):
    assert IngredientCategory.from_code(code) == IngredientCategory.OTHER


@pytest.mark.parametrize("code", (0, 6, None))
def test_unknown_meal_type_code_reads_as_breakfast(code):
    assert MealType.from_code(code) == MealType.BREAKFAST


def test_meal_type_codes():
    """Test meal types map to 1..5 in order."""
    assert [m.to_code() for m in MealType] == [1, 2, 3, 4, 5]


# --- Ingredients ---


def test_insert_and_get_ingredient(db):
    """Test an inserted ingredient gets an id and reads back."""
    repo = IngredientRepository(db)

    stored = repo.insert(Ingredient(name="Carrot", category=IngredientCategory.VEGETABLE))

    assert stored.id > 0
    fetched = repo.get_by_id(stored.id)
    assert fetched.name == "Carrot"
    assert fetched.category == IngredientCategory.VEGETABLE


def test_insert_keeps_given_id(db):
    repo = IngredientRepository(db)

    stored = repo.insert(Ingredient(name="Corn", category=IngredientCategory.VEGETABLE, id=42))

    assert stored.id == 42
    assert repo.get_by_id(42).name == "Corn"


def test_insert_duplicate_id_fails(db):
    """Test a failed insert raises a persistence error and rolls back."""
    repo = IngredientRepository(db)
    repo.insert(Ingredient(name="Corn", id=5))
    db.expunge_all()

    with pytest.raises(PersistenceError):
        repo.insert(Ingredient(name="Other corn", id=5))

    assert [i.name for i in repo.get_all()] == ["Corn"]


def test_get_missing_ingredient(db):
    """Test reads of missing rows return empty results."""
    repo = IngredientRepository(db)

    assert repo.get_by_id(1) is None
    assert repo.get_all() == []


def test_get_all_ingredients(db):
    repo = IngredientRepository(db)
    repo.insert(Ingredient(name="Corn", category=IngredientCategory.VEGETABLE))
    repo.insert(Ingredient(name="Milk", category=IngredientCategory.DAIRY))

    ingredients = repo.get_all()

    assert [i.name for i in ingredients] == ["Corn", "Milk"]


def test_update_ingredient(db):
    repo = IngredientRepository(db)
    stored = repo.insert(Ingredient(name="Corn", category=IngredientCategory.VEGETABLE))

    stored.name = "Sweetcorn"
    stored.category = IngredientCategory.SEED
    assert repo.update(stored) is True

    fetched = repo.get_by_id(stored.id)
    assert fetched.name == "Sweetcorn"
    assert fetched.category == IngredientCategory.SEED


def test_update_missing_ingredient(db):
    repo = IngredientRepository(db)
    assert repo.update(Ingredient(name="Ghost", id=9)) is False


def test_delete_ingredient(db):
    repo = IngredientRepository(db)
    stored = repo.insert(Ingredient(name="Corn"))

    assert repo.delete(stored) is True
    assert repo.get_by_id(stored.id) is None
    assert repo.delete(stored) is False


def test_unknown_stored_code_reads_as_other(db):
    """Test a row with an unrecognized code comes back as Other."""
    db.add(IngredientRow(id=3, name="Mystery", food_type=42))
    db.commit()

    fetched = IngredientRepository(db).get_by_id(3)

    assert fetched.category == IngredientCategory.OTHER


def test_create_schema(db):
    """Test creating the schema on an existing database keeps the rows."""
    repo = IngredientRepository(db)
    repo.insert(Ingredient(name="Corn"))

    repo.create_schema()

    assert len(repo.get_all()) == 1


def test_read_failure_raises_persistence_error():
    """Test a failing read surfaces as a persistence error."""
    session = MagicMock()
    session.query.side_effect = OperationalError("SELECT", {}, Exception("no such table"))

    with pytest.raises(PersistenceError):
        IngredientRepository(session).get_all()


def test_write_failure_rolls_back():
    """Test a failing commit is rolled back and raised as a persistence error."""
    session = MagicMock()
    session.commit.side_effect = OperationalError("INSERT", {}, Exception("disk I/O error"))

    with pytest.raises(PersistenceError):
        IngredientRepository(session).insert(Ingredient(name="Corn"))

    session.rollback.assert_called_once()


# --- Recipes ---


def build_stew():
    return (
        RecipeBuilder("Stew")
        .with_meal_type(MealType.DINNER)
        .with_lines(
            [
                RecipeIngredientLine(name="Carrot", quantity=100, ingredient_id=1),
                RecipeIngredientLine(name="Beef", quantity=300),
            ]
        )
        .with_steps(["Chop", "Brown the beef", "Simmer"])
        .build()
    )


def test_insert_and_get_recipe(db):
    """Test a recipe reads back with lines and steps in order."""
    repo = RecipeRepository(db)

    stored = repo.insert(build_stew())

    fetched = repo.get_by_id(stored.id)
    assert fetched.name == "Stew"
    assert fetched.meal_type == MealType.DINNER
    assert [(item.name, item.quantity, item.ingredient_id) for item in fetched.lines] == [
        ("Carrot", 100, 1),
        ("Beef", 300, None),
    ]
    assert fetched.steps == ("Chop", "Brown the beef", "Simmer")


def test_recipe_without_steps(db):
    repo = RecipeRepository(db)

    stored = repo.insert(RecipeBuilder("Toast").build())

    assert repo.get_by_id(stored.id).steps == ()


def test_update_recipe(db):
    """Test mutations of a fetched recipe are saved by update."""
    repo = RecipeRepository(db)
    stored = repo.insert(build_stew())

    recipe = repo.get_by_id(stored.id)
    recipe.add_line(RecipeIngredientLine(name="Carrot", quantity=50))
    recipe.remove_line(RecipeIngredientLine(name="Beef"))
    recipe.remove_step(1)
    assert repo.update(recipe) is True

    fetched = repo.get_by_id(stored.id)
    assert [(item.name, item.quantity) for item in fetched.lines] == [("Carrot", 150)]
    assert fetched.steps == ("Chop", "Simmer")


def test_update_missing_recipe(db):
    repo = RecipeRepository(db)
    assert repo.update(RecipeBuilder("Ghost").with_id(99).build()) is False


def test_delete_recipe(db):
    repo = RecipeRepository(db)
    stored = repo.insert(build_stew())

    assert repo.delete(stored.id) is True
    assert repo.get_by_id(stored.id) is None
    assert repo.delete(stored.id) is False


def test_get_all_recipes_sorted_by_name(db):
    repo = RecipeRepository(db)
    repo.insert(RecipeBuilder("Stew").build())
    repo.insert(RecipeBuilder("Porridge").build())

    assert [r.name for r in repo.get_all()] == ["Porridge", "Stew"]


@pytest.mark.parametrize(
    "steps",
    (
        ["Chop onion\nthen carrots", "Boil"],
        [""],
        ["", "Serve", "  "],
    ),
)
def test_steps_survive_round_trip(db, steps):
    """Test steps read back exactly as written, one per stored step."""
    repo = RecipeRepository(db)

    stored = repo.insert(RecipeBuilder("Soup").with_steps(steps).build())

    assert stored.steps == tuple(steps)
    db.expire_all()
    assert repo.get_by_id(stored.id).steps == tuple(steps)


def test_updated_steps_survive_round_trip(db):
    repo = RecipeRepository(db)
    recipe = repo.insert(RecipeBuilder("Soup").with_steps(["A"]).build())

    recipe.add_step("Chop\nfry")
    recipe.add_step("")
    repo.update(recipe)
    db.expire_all()

    fetched = repo.get_by_id(recipe.id)
    assert fetched.steps == ("A", "Chop\nfry", "")
    fetched.remove_step(1)
    repo.update(fetched)
    assert repo.get_by_id(recipe.id).steps == ("A", "")


def test_delete_recipe_removes_steps(db):
    repo = RecipeRepository(db)
    stored = repo.insert(build_stew())

    repo.delete(stored.id)

    assert db.query(RecipeStepRow).count() == 0


@pytest.mark.parametrize(
    "call",
    (
        lambda repo: repo.get_by_id(1),
        lambda repo: repo.get_all(),
        lambda repo: repo.update(RecipeBuilder("Stew").with_id(1).build()),
        lambda repo: repo.delete(1),
    ),
)
def test_recipe_read_failure_raises_persistence_error(call):
    """Test a failing recipe read surfaces as a persistence error."""
    session = MagicMock()
    session.get.side_effect = OperationalError("SELECT", {}, Exception("no such table"))
    session.query.side_effect = OperationalError("SELECT", {}, Exception("no such table"))

    with pytest.raises(PersistenceError):
        call(RecipeRepository(session))


def test_recipe_write_failure_rolls_back():
    session = MagicMock()
    session.commit.side_effect = OperationalError("INSERT", {}, Exception("disk I/O error"))

    with pytest.raises(PersistenceError):
        RecipeRepository(session).insert(build_stew())

    session.rollback.assert_called_once()
