"""In-memory recipe book domain."""

from src.domain.ingredient import Ingredient
from src.domain.recipe import Recipe, RecipeBuilder, RecipeIngredientLine

__all__ = [
    "Ingredient",
    "Recipe",
    "RecipeBuilder",
    "RecipeIngredientLine",
]
