"""Recipe schemas."""

from pydantic import BaseModel, Field

from src.models.enums import MealType

# --- Recipe Ingredient ---


class RecipeIngredientCreate(BaseModel):
    """Add an ingredient line to a recipe."""

    name: str = Field(..., min_length=1, max_length=255)
    quantity: int = Field(0, ge=0)  # grams
    ingredient_id: int | None = Field(None, ge=1)


class RecipeIngredientResponse(BaseModel):
    """Recipe ingredient line response."""

    name: str
    quantity: int
    ingredient_id: int | None


# --- Recipe ---


class RecipeCreate(BaseModel):
    """Create a new recipe."""

    name: str = Field(..., min_length=1, max_length=255)
    meal_type: MealType = MealType.BREAKFAST
    ingredients: list[RecipeIngredientCreate] = []
    steps: list[str] = []


class StepCreate(BaseModel):
    """Append a preparation step."""

    text: str = Field(..., min_length=1, max_length=2000)


class RecipeResponse(BaseModel):
    """Recipe response with ingredient lines and steps."""

    id: int
    name: str
    meal_type: MealType
    ingredients: list[RecipeIngredientResponse]
    steps: list[str]


class RecipeListResponse(BaseModel):
    """Recipe list item (without ingredients and steps)."""

    id: int
    name: str
    meal_type: MealType
    ingredient_count: int
    step_count: int


# --- Shopping List ---


class ShoppingListRequest(BaseModel):
    """Recipes to build a shopping list for; all recipes when omitted."""

    recipe_ids: list[int] | None = None


class ShoppingListResponse(BaseModel):
    """Ingredient lines merged across recipes."""

    ingredients: list[RecipeIngredientResponse]
