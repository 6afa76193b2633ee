"""FastAPI dependencies for repositories."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from src.database import get_db
from src.services.ingredient_repository import IngredientRepository
from src.services.recipe_repository import RecipeRepository


def get_ingredient_repository(db: Annotated[Session, Depends(get_db)]) -> IngredientRepository:
    return IngredientRepository(db)


def get_recipe_repository(db: Annotated[Session, Depends(get_db)]) -> RecipeRepository:
    return RecipeRepository(db)
