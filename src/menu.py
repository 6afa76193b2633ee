"""Interactive text menu over an in-memory recipe store."""

import logging
from collections.abc import Callable

from sqlalchemy.orm import Session

from src.domain.ingredient import Ingredient
from src.domain.recipe import RecipeBuilder, RecipeIngredientLine
from src.models.enums import IngredientCategory, MealType
from src.services.exceptions import RecipeBookError
from src.services.ingredient_import import import_ingredients
from src.services.ingredient_repository import IngredientRepository
from src.services.recipe_store import RecipeStore

logger = logging.getLogger(__name__)

SEPARATOR = "*" * 33

MAIN_MENU = [
    "Ingredient menu",
    "Recipe menu",
    "Shopping list",
    "Import ingredients from file",
    "Save ingredients to database",
    "Load ingredients from database",
    "Exit",
]

INGREDIENT_MENU = [
    "Add an ingredient",
    "Remove an ingredient",
    "List all ingredients",
    "Back",
]

RECIPE_MENU = [
    "Add a recipe",
    "Add an ingredient to a recipe",
    "Remove an ingredient from a recipe",
    "Add a step to a recipe",
    "Remove a step from a recipe",
    "Remove a recipe",
    "List all recipes",
    "Back",
]

CATEGORIES = list(IngredientCategory)
MEAL_TYPES = list(MealType)


class Menu:
    """Numbered text menus reading from ``input_func`` and writing to ``output``.

    Invalid choices re-prompt. End of input leaves the menu as if Exit had
    been chosen.
    """

    def __init__(
        self,
        store: RecipeStore,
        session_factory: Callable[[], Session] | None = None,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self.store = store
        self.session_factory = session_factory
        self.input = input_func
        self.output = output

    def run(self) -> None:
        self.output("Welcome to the Recipe Generator!")
        try:
            self._main_loop()
        except EOFError:
            logger.info("Input closed, leaving menu")
        self.output("Goodbye!")

    def _main_loop(self) -> None:
        actions = {
            1: self.ingredient_menu,
            2: self.recipe_menu,
            3: self.show_shopping_list,
            4: self.import_from_file,
            5: self.save_ingredients,
            6: self.load_ingredients,
        }
        while True:
            choice = self._choose("Main menu", MAIN_MENU)
            if choice == len(MAIN_MENU):
                return
            actions[choice]()

    # --- Input helpers ---

    def _show_options(self, title: str, options: list[str]) -> None:
        self.output(SEPARATOR)
        self.output(title)
        for number, option in enumerate(options, start=1):
            self.output(f"{number}. {option}")

    def _choose(self, title: str, options: list[str]) -> int:
        self._show_options(title, options)
        return self._read_int("> ", 1, len(options))

    def _read_int(self, prompt: str, low: int | None = None, high: int | None = None) -> int:
        while True:
            raw = self.input(prompt).strip()
            try:
                value = int(raw)
            except ValueError:
                self.output("Please enter a number")
                continue
            if (low is not None and value < low) or (high is not None and value > high):
                self.output(f"Please enter a number between {low} and {high}")
                continue
            return value

    def _read_text(self, prompt: str) -> str:
        while True:
            text = self.input(prompt).strip()
            if text:
                return text
            self.output("Please enter a value")

    # --- Ingredients ---

    def ingredient_menu(self) -> None:
        actions = {1: self.add_ingredient, 2: self.remove_ingredient, 3: self.list_ingredients}
        while True:
            choice = self._choose("Ingredient menu", INGREDIENT_MENU)
            if choice == len(INGREDIENT_MENU):
                return
            actions[choice]()

    def add_ingredient(self) -> None:
        name = self._read_text("Name of the ingredient: ")
        self._show_options("Type of the ingredient", [c.value for c in CATEGORIES])
        category = CATEGORIES[self._read_int("> ", 1, len(CATEGORIES)) - 1]
        ingredient = self.store.add_ingredient(Ingredient(name=name, category=category))
        self.output(f"Added {ingredient.name} with id {ingredient.id}")

    def remove_ingredient(self) -> None:
        ingredient_id = self._read_int("ID of the ingredient: ")
        removed = self.store.remove_indigent(ingredient_id)
        if removed is None:
            self.output(f"No ingredient with id {ingredient_id}")
        else:
            self.output(f"Removed {removed.name}")

    def list_ingredients(self) -> None:
        ingredients = sorted(self.store.get_all_indigents(), key=lambda i: i.id)
        if not ingredients:
            self.output("No ingredients yet")
        for ingredient in ingredients:
            self.output(f"{ingredient.id}: {ingredient.name} ({ingredient.category.value})")

    # --- Recipes ---

    def recipe_menu(self) -> None:
        actions = {
            1: self.add_recipe,
            2: self.add_recipe_line,
            3: self.remove_recipe_line,
            4: self.add_recipe_step,
            5: self.remove_recipe_step,
            6: self.remove_recipe,
            7: self.list_recipes,
        }
        while True:
            choice = self._choose("Recipe menu", RECIPE_MENU)
            if choice == len(RECIPE_MENU):
                return
            actions[choice]()

    def add_recipe(self) -> None:
        name = self._read_text("Name of the recipe: ")
        self._show_options("Meal type", [m.value for m in MEAL_TYPES])
        meal_type = MEAL_TYPES[self._read_int("> ", 1, len(MEAL_TYPES)) - 1]
        recipe = self.store.add_recipe(RecipeBuilder(name).with_meal_type(meal_type).build())
        self.output(f"Added recipe {recipe.name} with id {recipe.id}")

    def _read_recipe(self):
        recipe_id = self._read_int("ID of the recipe: ")
        recipe = self.store.get_recipe_by_id(recipe_id)
        if recipe is None:
            self.output(f"No recipe with id {recipe_id}")
        return recipe

    def add_recipe_line(self) -> None:
        recipe = self._read_recipe()
        if recipe is None:
            return
        name = self._read_text("Name of the ingredient: ")
        quantity = self._read_int("Amount in grams: ", 0)
        known = self.store.get_ingredient_by_name(name)
        line = RecipeIngredientLine(
            name=name, quantity=quantity, ingredient_id=known.id if known else None
        )
        recipe.add_line(line)
        self.output(f"{recipe.name} now has {len(recipe.lines)} ingredient(s)")

    def remove_recipe_line(self) -> None:
        recipe = self._read_recipe()
        if recipe is None:
            return
        name = self._read_text("Name of the ingredient: ")
        recipe.remove_line(RecipeIngredientLine(name=name))
        self.output(f"{recipe.name} now has {len(recipe.lines)} ingredient(s)")

    def add_recipe_step(self) -> None:
        recipe = self._read_recipe()
        if recipe is None:
            return
        recipe.add_step(self._read_text("Step: "))
        self.output(f"{recipe.name} now has {len(recipe.steps)} step(s)")

    def remove_recipe_step(self) -> None:
        recipe = self._read_recipe()
        if recipe is None:
            return
        number = self._read_int("Number of the step: ")
        recipe.remove_step(number - 1)
        self.output(f"{recipe.name} now has {len(recipe.steps)} step(s)")

    def remove_recipe(self) -> None:
        recipe_id = self._read_int("ID of the recipe: ")
        removed = self.store.remove_recipe(recipe_id)
        if removed is None:
            self.output(f"No recipe with id {recipe_id}")
        else:
            self.output(f"Removed recipe {removed.name}")

    def list_recipes(self) -> None:
        recipes = sorted(self.store.get_all_recipes(), key=lambda r: r.id)
        if not recipes:
            self.output("No recipes yet")
        for recipe in recipes:
            self.output(f"{recipe.id}: {recipe.name} ({recipe.meal_type.value})")
            for line in recipe.lines:
                self.output(f"  - {line.name} ({line.quantity} g)")
            for number, step in enumerate(recipe.steps, start=1):
                self.output(f"  {number}. {step}")

    # --- Shopping list, import and persistence ---

    def show_shopping_list(self) -> None:
        lines = self.store.shopping_list()
        if not lines:
            self.output("Shopping list is empty")
        for line in lines:
            self.output(f"{line.name}: {line.quantity} g")

    def import_from_file(self) -> None:
        path = self._read_text("Path of the file: ")
        try:
            ingredients = import_ingredients(path)
        except RecipeBookError as e:
            self.output(f"Import failed: {e}")
            return
        self.store.add_ingredients(ingredients)
        self.output(f"Imported {len(ingredients)} ingredient(s)")

    def save_ingredients(self) -> None:
        if self.session_factory is None:
            self.output("No database configured")
            return
        try:
            with self.session_factory() as db:
                repo = IngredientRepository(db)
                for ingredient in self.store.get_all_indigents():
                    if not repo.update(ingredient):
                        repo.insert(ingredient)
        except RecipeBookError as e:
            self.output(f"Saving failed: {e}")
            return
        self.output(f"Saved {self.store.ingredient_count} ingredient(s)")

    def load_ingredients(self) -> None:
        if self.session_factory is None:
            self.output("No database configured")
            return
        try:
            with self.session_factory() as db:
                ingredients = IngredientRepository(db).get_all()
        except RecipeBookError as e:
            self.output(f"Loading failed: {e}")
            return
        self.store.add_ingredients(ingredients)
        self.output(f"Loaded {len(ingredients)} ingredient(s)")
