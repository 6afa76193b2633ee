"""Recipe API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_recipe_repository
from src.domain.recipe import Recipe, RecipeBuilder, RecipeIngredientLine
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
from src.services.recipe_repository import RecipeRepository
from src.services.recipe_store import merge_lines

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])

Repository = Annotated[RecipeRepository, Depends(get_recipe_repository)]


def get_stored_recipe(repo: RecipeRepository, recipe_id: int) -> Recipe:
    """Get a stored recipe or fail with 404."""
    recipe = repo.get_by_id(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
    return recipe


def to_line_response(line: RecipeIngredientLine) -> RecipeIngredientResponse:
    return RecipeIngredientResponse(
        name=line.name, quantity=line.quantity, ingredient_id=line.ingredient_id
    )


def to_response(recipe: Recipe) -> RecipeResponse:
    return RecipeResponse(
        id=recipe.id,
        name=recipe.name,
        meal_type=recipe.meal_type,
        ingredients=[to_line_response(line) for line in recipe.lines],
        steps=list(recipe.steps),
    )


def to_line(line_data: RecipeIngredientCreate) -> RecipeIngredientLine:
    return RecipeIngredientLine(
        name=line_data.name, quantity=line_data.quantity, ingredient_id=line_data.ingredient_id
    )


# --- Static routes first (before /{recipe_id}) ---


@router.get("", response_model=list[RecipeListResponse])
def list_recipes(repo: Repository):
    """List all recipes."""
    return [
        RecipeListResponse(
            id=recipe.id,
            name=recipe.name,
            meal_type=recipe.meal_type,
            ingredient_count=len(recipe.lines),
            step_count=len(recipe.steps),
        )
        for recipe in repo.get_all()
    ]


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(recipe_data: RecipeCreate, repo: Repository):
    """Create a new recipe. Ingredient lines with the same name are merged."""
    recipe = (
        RecipeBuilder(recipe_data.name)
        .with_meal_type(recipe_data.meal_type)
        .with_lines(to_line(line_data) for line_data in recipe_data.ingredients)
        .with_steps(recipe_data.steps)
        .build()
    )
    return to_response(repo.insert(recipe))


@router.post("/shopping-list", response_model=ShoppingListResponse)
def shopping_list(request: ShoppingListRequest, repo: Repository):
    """Merge the ingredient lines of the given recipes (all when omitted)."""
    if request.recipe_ids is None:
        recipes = repo.get_all()
    else:
        recipes = [get_stored_recipe(repo, recipe_id) for recipe_id in request.recipe_ids]
    return ShoppingListResponse(
        ingredients=[to_line_response(line) for line in merge_lines(recipes)]
    )


# --- Single recipe routes ---


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(recipe_id: int, repo: Repository):
    """Get a specific recipe."""
    return to_response(get_stored_recipe(repo, recipe_id))


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recipe(recipe_id: int, repo: Repository):
    """Delete a recipe."""
    if not repo.delete(recipe_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")


@router.post("/{recipe_id}/ingredients", response_model=RecipeResponse)
def add_ingredient_line(recipe_id: int, line_data: RecipeIngredientCreate, repo: Repository):
    """Add an ingredient line; an existing line with the same name gets the quantity added."""
    recipe = get_stored_recipe(repo, recipe_id)
    recipe.add_line(to_line(line_data))
    repo.update(recipe)
    return to_response(recipe)


@router.delete("/{recipe_id}/ingredients/{name}", response_model=RecipeResponse)
def remove_ingredient_line(recipe_id: int, name: str, repo: Repository):
    """Remove the ingredient line called ``name``; unknown names change nothing."""
    recipe = get_stored_recipe(repo, recipe_id)
    recipe.remove_line(RecipeIngredientLine(name=name))
    repo.update(recipe)
    return to_response(recipe)


@router.post("/{recipe_id}/steps", response_model=RecipeResponse)
def add_step(recipe_id: int, step_data: StepCreate, repo: Repository):
    """Append a preparation step."""
    recipe = get_stored_recipe(repo, recipe_id)
    recipe.add_step(step_data.text)
    repo.update(recipe)
    return to_response(recipe)


@router.delete("/{recipe_id}/steps/{index}", response_model=RecipeResponse)
def remove_step(recipe_id: int, index: int, repo: Repository):
    """Remove the step at ``index`` (0-based); out-of-range indexes change nothing."""
    recipe = get_stored_recipe(repo, recipe_id)
    recipe.remove_step(index)
    repo.update(recipe)
    return to_response(recipe)
