"""Ingredient ("indigent") value type."""

from pydantic import BaseModel, ConfigDict, Field

from src.models.enums import IngredientCategory

UNASSIGNED_ID = 0


class Ingredient(BaseModel):
    """A named food ingredient with a dietary category.

    The id is 0 until a store or the database assigns one, and cannot be
    reassigned afterwards. Two ingredients are equal when their ids match.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(..., max_length=255)
    category: IngredientCategory = IngredientCategory.OTHER
    id: int = Field(default=UNASSIGNED_ID, ge=0, frozen=True)

    @property
    def has_id(self) -> bool:
        """Check if the ingredient has been given a real id."""
        return self.id != UNASSIGNED_ID

    def with_id(self, ingredient_id: int) -> "Ingredient":
        """Copy of this ingredient carrying ``ingredient_id``."""
        return Ingredient(name=self.name, category=self.category, id=ingredient_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.id == other.id
