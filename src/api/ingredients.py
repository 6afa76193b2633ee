"""Ingredient API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_ingredient_repository
from src.domain.ingredient import Ingredient
from src.schemas.ingredient import IngredientCreate, IngredientResponse, IngredientUpdate
from src.services.ingredient_repository import IngredientRepository

router = APIRouter(prefix="/api/v1/ingredients", tags=["ingredients"])

Repository = Annotated[IngredientRepository, Depends(get_ingredient_repository)]


def get_stored_ingredient(repo: IngredientRepository, ingredient_id: int) -> Ingredient:
    """Get a stored ingredient or fail with 404."""
    ingredient = repo.get_by_id(ingredient_id)
    if ingredient is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ingredient not found")
    return ingredient


@router.get("", response_model=list[IngredientResponse])
def list_ingredients(repo: Repository):
    """List all stored ingredients."""
    return repo.get_all()


@router.post("", response_model=IngredientResponse, status_code=status.HTTP_201_CREATED)
def create_ingredient(ingredient_data: IngredientCreate, repo: Repository):
    """Create a new ingredient."""
    return repo.insert(Ingredient(name=ingredient_data.name, category=ingredient_data.category))


@router.get("/{ingredient_id}", response_model=IngredientResponse)
def get_ingredient(ingredient_id: int, repo: Repository):
    """Get a specific ingredient."""
    return get_stored_ingredient(repo, ingredient_id)


@router.patch("/{ingredient_id}", response_model=IngredientResponse)
def update_ingredient(ingredient_id: int, ingredient_data: IngredientUpdate, repo: Repository):
    """Rename or recategorize an ingredient."""
    ingredient = get_stored_ingredient(repo, ingredient_id)

    update_data = ingredient_data.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(ingredient, field, value)

    repo.update(ingredient)
    return ingredient


@router.delete("/{ingredient_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_ingredient(ingredient_id: int, repo: Repository):
    """Delete an ingredient. Recipes keep their lines that name it."""
    ingredient = get_stored_ingredient(repo, ingredient_id)
    repo.delete(ingredient)
