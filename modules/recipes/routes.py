"""
Recipe API endpoints.

Reads accept an optional session: anonymous callers see what a public-tier
user sees. Recipes the caller may not view answer 404.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user, get_optional_user
from api.dependencies import get_recipe_service
from api.models import MessageResponse
from shared.models import AuthenticatedUser

from .interfaces import IRecipeService
from .models import (
    Collaborator,
    CollaboratorCreate,
    CollaboratorUpdate,
    Recipe,
    RecipeCreate,
    RecipeIngredient,
    RecipeIngredientCreate,
    RecipeIngredientUpdate,
    RecipeUpdate,
)

router = APIRouter()


@router.get("", response_model=list[Recipe])
def list_recipes(
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: IRecipeService = Depends(get_recipe_service),
) -> list[Recipe]:
    """List the recipes visible to the caller."""
    return service.list_recipes(user)


@router.get("/search/{term}", response_model=list[Recipe])
def search_recipes(
    term: str,
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: IRecipeService = Depends(get_recipe_service),
) -> list[Recipe]:
    """
    Search recipes by title or ingredient name.

    Matching is a case-insensitive substring match; each recipe appears at
    most once.
    """
    return service.search_recipes(term, user)


@router.get("/{recipe_id}", response_model=Recipe)
def get_recipe(
    recipe_id: int,
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: IRecipeService = Depends(get_recipe_service),
) -> Recipe:
    return service.get_recipe(recipe_id, user)


@router.post("", response_model=Recipe, status_code=201)
def create_recipe(
    request: RecipeCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IRecipeService = Depends(get_recipe_service),
) -> Recipe:
    """Create a recipe authored by the caller."""
    return service.create_recipe(request, user)


@router.put("/{recipe_id}", response_model=Recipe)
def update_recipe(
    recipe_id: int,
    request: RecipeUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IRecipeService = Depends(get_recipe_service),
) -> Recipe:
    """
    Update a recipe.

    Allowed for the author and for secondary authors with can_modify.
    """
    return service.update_recipe(recipe_id, request, user)


@router.delete("/{recipe_id}", response_model=MessageResponse)
def delete_recipe(
    recipe_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IRecipeService = Depends(get_recipe_service),
) -> MessageResponse:
    """Delete a recipe. Only the primary author may do this."""
    service.delete_recipe(recipe_id, user)
    return MessageResponse(message="Recipe deleted")


# Ingredient links


@router.get("/{recipe_id}/ingredients", response_model=list[RecipeIngredient])
def list_recipe_ingredients(
    recipe_id: int,
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: IRecipeService = Depends(get_recipe_service),
) -> list[RecipeIngredient]:
    return service.list_recipe_ingredients(recipe_id, user)


@router.post("/{recipe_id}/ingredients", response_model=RecipeIngredient, status_code=201)
def add_recipe_ingredient(
    recipe_id: int,
    request: RecipeIngredientCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IRecipeService = Depends(get_recipe_service),
) -> RecipeIngredient:
    """
    Link an ingredient to a recipe.

    Returns 409 if the ingredient is already linked.
    """
    return service.add_recipe_ingredient(recipe_id, request, user)


@router.put("/{recipe_id}/ingredients/{ingredient_id}", response_model=RecipeIngredient)
def update_recipe_ingredient(
    recipe_id: int,
    ingredient_id: int,
    request: RecipeIngredientUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IRecipeService = Depends(get_recipe_service),
) -> RecipeIngredient:
    return service.update_recipe_ingredient(recipe_id, ingredient_id, request, user)


@router.delete("/{recipe_id}/ingredients/{ingredient_id}", response_model=MessageResponse)
def remove_recipe_ingredient(
    recipe_id: int,
    ingredient_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IRecipeService = Depends(get_recipe_service),
) -> MessageResponse:
    service.remove_recipe_ingredient(recipe_id, ingredient_id, user)
    return MessageResponse(message="Ingredient removed from recipe")


# Secondary authors


@router.get("/{recipe_id}/authors", response_model=list[Collaborator])
def list_collaborators(
    recipe_id: int,
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: IRecipeService = Depends(get_recipe_service),
) -> list[Collaborator]:
    return service.list_collaborators(recipe_id, user)


@router.post("/{recipe_id}/authors", response_model=Collaborator, status_code=201)
def add_collaborator(
    recipe_id: int,
    request: CollaboratorCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IRecipeService = Depends(get_recipe_service),
) -> Collaborator:
    """
    Add a secondary author. Primary author only.

    Returns 409 if the user is already a secondary author.
    """
    return service.add_collaborator(recipe_id, request, user)


@router.put("/{recipe_id}/authors/{user_id}", response_model=Collaborator)
def update_collaborator(
    recipe_id: int,
    user_id: int,
    request: CollaboratorUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IRecipeService = Depends(get_recipe_service),
) -> Collaborator:
    return service.update_collaborator(recipe_id, user_id, request, user)


@router.delete("/{recipe_id}/authors/{user_id}", response_model=MessageResponse)
def remove_collaborator(
    recipe_id: int,
    user_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IRecipeService = Depends(get_recipe_service),
) -> MessageResponse:
    service.remove_collaborator(recipe_id, user_id, user)
    return MessageResponse(message="Secondary author removed")
