"""Persistence of recipes in the ``recipes``, ``recipe_ingredients`` and ``recipe_steps`` tables."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.domain.recipe import Recipe, RecipeBuilder, RecipeIngredientLine
from src.models.enums import MealType
from src.models.recipe import RecipeIngredientRow, RecipeRow, RecipeStepRow
from src.services.exceptions import PersistenceError

logger = logging.getLogger(__name__)


def row_to_recipe(row: RecipeRow) -> Recipe:
    """Convert a stored recipe; unknown meal type codes read back as Breakfast."""
    lines = [
        RecipeIngredientLine(name=ing.name, quantity=ing.quantity, ingredient_id=ing.ingredient_id)
        for ing in row.ingredients
    ]
    return (
        RecipeBuilder(row.name)
        .with_meal_type(MealType.from_code(row.meal_type))
        .with_lines(lines)
        .with_steps(step.text for step in row.steps)
        .with_id(row.id)
        .build()
    )


def _line_rows(recipe: Recipe) -> list[RecipeIngredientRow]:
    return [
        RecipeIngredientRow(
            position=position,
            name=line.name,
            quantity=line.quantity,
            ingredient_id=line.ingredient_id,
        )
        for position, line in enumerate(recipe.lines)
    ]


def _step_rows(recipe: Recipe) -> list[RecipeStepRow]:
    return [RecipeStepRow(position=position, text=text) for position, text in enumerate(recipe.steps)]


class RecipeRepository:
    """Maps recipes to and from rows using an open session."""

    def __init__(self, db: Session):
        self.db = db

    def insert(self, recipe: Recipe) -> Recipe:
        """Insert a recipe and return it with the id the database assigned.

        The recipe's own id is ignored.
        """
        row = RecipeRow(name=recipe.name, meal_type=recipe.meal_type.to_code())
        row.ingredients.extend(_line_rows(recipe))
        row.steps.extend(_step_rows(recipe))
        self.db.add(row)
        self._commit(f"inserting recipe '{recipe.name}'")
        self.db.refresh(row)
        logger.info(f"Inserted recipe '{row.name}' with id {row.id}")
        return row_to_recipe(row)

    def update(self, recipe: Recipe) -> bool:
        """Replace the stored state of ``recipe``. Returns False when it is not stored."""
        row = self._get_row(recipe.id)
        if row is None:
            logger.info(f"No stored recipe with id {recipe.id} to update")
            return False
        row.name = recipe.name
        row.meal_type = recipe.meal_type.to_code()
        row.ingredients = _line_rows(recipe)
        row.steps = _step_rows(recipe)
        self._commit(f"updating recipe {recipe.id}")
        return True

    def delete(self, recipe_id: int) -> bool:
        """Delete a stored recipe with its lines and steps. Returns False when it was not stored."""
        row = self._get_row(recipe_id)
        if row is None:
            logger.info(f"No stored recipe with id {recipe_id} to delete")
            return False
        self.db.delete(row)
        self._commit(f"deleting recipe {recipe_id}")
        return True

    def get_by_id(self, recipe_id: int) -> Recipe | None:
        row = self._get_row(recipe_id)
        if row is None:
            return None
        return self._to_recipe(row)

    def get_all(self) -> list[Recipe]:
        """All stored recipes ordered by name."""
        try:
            rows = self.db.query(RecipeRow).order_by(RecipeRow.name).all()
            return [row_to_recipe(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error(f"Error reading recipes: {e}")
            raise PersistenceError("Failed reading recipes") from e

    def _get_row(self, recipe_id: int) -> RecipeRow | None:
        try:
            return self.db.get(RecipeRow, recipe_id)
        except SQLAlchemyError as e:
            logger.error(f"Error reading recipe {recipe_id}: {e}")
            raise PersistenceError(f"Failed reading recipe {recipe_id}") from e

    def _to_recipe(self, row: RecipeRow) -> Recipe:
        # Lines and steps load lazily, so reading them can fail too
        try:
            return row_to_recipe(row)
        except SQLAlchemyError as e:
            logger.error(f"Error reading recipe {row.id}: {e}")
            raise PersistenceError(f"Failed reading recipe {row.id}") from e

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error {action}: {e}")
            raise PersistenceError(f"Failed {action}") from e
