"""SQLAlchemy models."""

from src.models.ingredient import IngredientRow
from src.models.recipe import RecipeIngredientRow, RecipeRow, RecipeStepRow

__all__ = [
    "IngredientRow",
    "RecipeRow",
    "RecipeIngredientRow",
    "RecipeStepRow",
]
