"""In-memory store owning all recipes and ingredients."""

import logging
from collections.abc import Iterable

from src.domain.ingredient import Ingredient
from src.domain.recipe import Recipe, RecipeIngredientLine

logger = logging.getLogger(__name__)


def merge_lines(recipes: Iterable[Recipe]) -> list[RecipeIngredientLine]:
    """Ingredient lines of all ``recipes``, quantities summed per name, in first-seen order."""
    merged: list[RecipeIngredientLine] = []
    for recipe in recipes:
        for line in recipe.lines:
            for existing in merged:
                if existing == line:
                    existing.quantity += line.quantity
                    break
            else:
                merged.append(line)
    return merged


class RecipeStore:
    """Owns recipes and ingredients and hands out their ids.

    Each collection has its own counter that only moves forward, so an id
    freed by a removal is never handed out again. Not thread-safe.
    """

    def __init__(self):
        self._recipes: dict[int, Recipe] = {}
        self._ingredients: dict[int, Ingredient] = {}
        self._last_recipe_id = 0
        self._last_ingredient_id = 0

    @property
    def recipe_count(self) -> int:
        return len(self._recipes)

    @property
    def ingredient_count(self) -> int:
        return len(self._ingredients)

    # --- Recipes ---

    def add_recipe(self, recipe: Recipe) -> Recipe:
        """Store a copy of ``recipe`` under a newly assigned id.

        Any id already set on ``recipe`` is ignored. Returns the stored copy.
        """
        self._last_recipe_id += 1
        stored = recipe.to_builder().with_id(self._last_recipe_id).build()
        self._recipes[stored.id] = stored
        logger.info(f"Added recipe '{stored.name}' with id {stored.id}")
        return stored

    def get_recipe_by_id(self, recipe_id: int) -> Recipe | None:
        return self._recipes.get(recipe_id)

    def get_recipe_by_name(self, name: str) -> Recipe | None:
        """First recipe called ``name``, or None."""
        for recipe in self._recipes.values():
            if recipe.name == name:
                return recipe
        return None

    def get_all_recipes(self) -> list[Recipe]:
        return list(self._recipes.values())

    def remove_recipe(self, recipe_id: int) -> Recipe | None:
        recipe = self._recipes.pop(recipe_id, None)
        if recipe is None:
            logger.info(f"No recipe with id {recipe_id} to remove")
        else:
            logger.info(f"Removed recipe '{recipe.name}' with id {recipe_id}")
        return recipe

    # --- Ingredients ---

    def add_ingredient(self, ingredient: Ingredient) -> Ingredient:
        """Store an ingredient.

        An ingredient that already has an id is stored under that id,
        replacing whatever was there. One without an id gets the next free
        one. Returns the stored ingredient.
        """
        if ingredient.has_id:
            stored = ingredient
            if stored.id in self._ingredients:
                logger.warning(f"Replacing ingredient with id {stored.id}")
            self._last_ingredient_id = max(self._last_ingredient_id, stored.id)
        else:
            self._last_ingredient_id += 1
            stored = ingredient.with_id(self._last_ingredient_id)
        self._ingredients[stored.id] = stored
        logger.info(f"Added ingredient '{stored.name}' with id {stored.id}")
        return stored

    def add_ingredients(self, ingredients: Iterable[Ingredient]) -> list[Ingredient]:
        return [self.add_ingredient(ingredient) for ingredient in ingredients]

    def get_ingredient(self, ingredient_id: int) -> Ingredient | None:
        return self._ingredients.get(ingredient_id)

    def get_ingredient_by_name(self, name: str) -> Ingredient | None:
        """First ingredient called ``name``, or None."""
        for ingredient in self._ingredients.values():
            if ingredient.name == name:
                return ingredient
        return None

    def get_all_indigents(self) -> list[Ingredient]:
        return list(self._ingredients.values())

    def remove_indigent(self, ingredient_id: int) -> Ingredient | None:
        ingredient = self._ingredients.pop(ingredient_id, None)
        if ingredient is None:
            logger.info(f"No ingredient with id {ingredient_id} to remove")
        else:
            logger.info(f"Removed ingredient '{ingredient.name}' with id {ingredient_id}")
        return ingredient

    # --- Shopping list ---

    def shopping_list(self, recipe_ids: Iterable[int] | None = None) -> list[RecipeIngredientLine]:
        """Ingredient lines of the given recipes (default all), merged by name.

        Unknown recipe ids are skipped.
        """
        if recipe_ids is None:
            recipes = self.get_all_recipes()
        else:
            recipes = []
            for recipe_id in recipe_ids:
                recipe = self.get_recipe_by_id(recipe_id)
                if recipe is None:
                    logger.warning(f"Skipping unknown recipe id {recipe_id} in shopping list")
                    continue
                recipes.append(recipe)

        return merge_lines(recipes)
