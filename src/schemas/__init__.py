"""Pydantic schemas for API requests and responses."""

from src.schemas.ingredient import IngredientCreate, IngredientResponse, IngredientUpdate
from src.schemas.recipe import (
    RecipeCreate,
    RecipeIngredientCreate,
    RecipeIngredientResponse,
    RecipeListResponse,
    RecipeResponse,
    ShoppingListRequest,
    ShoppingListResponse,
    StepCreate,
)

__all__ = [
    "IngredientCreate",
    "IngredientUpdate",
    "IngredientResponse",
    "RecipeCreate",
    "RecipeIngredientCreate",
    "RecipeIngredientResponse",
    "RecipeListResponse",
    "RecipeResponse",
    "ShoppingListRequest",
    "ShoppingListResponse",
    "StepCreate",
]
