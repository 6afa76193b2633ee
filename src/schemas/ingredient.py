"""Ingredient schemas."""

from pydantic import BaseModel, ConfigDict, Field

from src.models.enums import IngredientCategory


class IngredientCreate(BaseModel):
    """Create an ingredient."""

    name: str = Field(..., min_length=1, max_length=255)
    category: IngredientCategory = IngredientCategory.OTHER


class IngredientUpdate(BaseModel):
    """Update an ingredient."""

    name: str | None = Field(None, min_length=1, max_length=255)
    category: IngredientCategory | None = None


class IngredientResponse(BaseModel):
    """Ingredient response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: IngredientCategory
