"""Enums for model fields and their integer storage codes."""

from enum import Enum


class IngredientCategory(str, Enum):
    """Dietary category of an ingredient."""

    VEGETABLE = "Vegetable"
    FRUIT = "Fruit"
    SEED = "Seed"
    DAIRY = "Dairy"
    MEAT = "Meat"
    FISH = "Fish"
    OTHER = "Other"

    def to_code(self) -> int:
        """Integer code stored in the ``food_type`` column."""
        return _CATEGORY_TO_CODE.get(self, OTHER_CATEGORY_CODE)

    @classmethod
    def from_code(cls, code: int | None) -> "IngredientCategory":
        """Map a stored code back to a category; unknown codes become Other."""
        return _CODE_TO_CATEGORY.get(code, cls.OTHER)

    @classmethod
    def from_name(cls, name: str) -> "IngredientCategory":
        """Match a category by its exact (case-sensitive) name; unknown names become Other."""
        return _NAME_TO_CATEGORY.get(name, cls.OTHER)


class MealType(str, Enum):
    """Meal a recipe is meant for."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"
    DESSERT = "Dessert"

    def to_code(self) -> int:
        """Integer code stored in the ``meal_type`` column."""
        return _MEAL_TYPE_TO_CODE.get(self, 1)

    @classmethod
    def from_code(cls, code: int | None) -> "MealType":
        """Map a stored code back to a meal type; unknown codes become Breakfast."""
        return _CODE_TO_MEAL_TYPE.get(code, cls.BREAKFAST)


OTHER_CATEGORY_CODE = 7

_CATEGORY_TO_CODE = {
    IngredientCategory.VEGETABLE: 1,
    IngredientCategory.FRUIT: 2,
    IngredientCategory.SEED: 3,
    IngredientCategory.DAIRY: 4,
    IngredientCategory.MEAT: 5,
    IngredientCategory.FISH: 6,
    IngredientCategory.OTHER: OTHER_CATEGORY_CODE,
}
_CODE_TO_CATEGORY = {code: category for category, code in _CATEGORY_TO_CODE.items()}
_NAME_TO_CATEGORY = {category.value: category for category in IngredientCategory}

_MEAL_TYPE_TO_CODE = {
    MealType.BREAKFAST: 1,
    MealType.LUNCH: 2,
    MealType.DINNER: 3,
    MealType.SNACK: 4,
    MealType.DESSERT: 5,
}
_CODE_TO_MEAL_TYPE = {code: meal_type for meal_type, code in _MEAL_TYPE_TO_CODE.items()}
