"""
Category and ingredient API endpoints.

Anyone may read the catalog; writes require a session.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_catalog_service
from api.models import MessageResponse
from shared.models import AuthenticatedUser

from .interfaces import ICatalogService
from .models import (
    Category,
    CategoryCreate,
    CategoryUpdate,
    Ingredient,
    IngredientCreate,
    IngredientUpdate,
)
from .exceptions import CategoryNotFoundError, IngredientNotFoundError

categories_router = APIRouter()
ingredients_router = APIRouter()


@categories_router.get("", response_model=list[Category])
def list_categories(service: ICatalogService = Depends(get_catalog_service)) -> list[Category]:
    return service.list_categories()


@categories_router.get("/{category_id}", response_model=Category)
def get_category(
    category_id: int,
    service: ICatalogService = Depends(get_catalog_service),
) -> Category:
    category = service.get_category(category_id)
    if category is None:
        raise CategoryNotFoundError(category_id)
    return category


@categories_router.post("", response_model=Category, status_code=201)
def create_category(
    request: CategoryCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICatalogService = Depends(get_catalog_service),
) -> Category:
    return service.create_category(request)


@categories_router.put("/{category_id}", response_model=Category)
def update_category(
    category_id: int,
    request: CategoryUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICatalogService = Depends(get_catalog_service),
) -> Category:
    return service.update_category(category_id, request)


@categories_router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(
    category_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICatalogService = Depends(get_catalog_service),
) -> MessageResponse:
    """
    Delete a category.

    Returns 409 while recipes still belong to it.
    """
    service.delete_category(category_id)
    return MessageResponse(message="Category deleted")


@ingredients_router.get("", response_model=list[Ingredient])
def list_ingredients(service: ICatalogService = Depends(get_catalog_service)) -> list[Ingredient]:
    return service.list_ingredients()


@ingredients_router.get("/{ingredient_id}", response_model=Ingredient)
def get_ingredient(
    ingredient_id: int,
    service: ICatalogService = Depends(get_catalog_service),
) -> Ingredient:
    ingredient = service.get_ingredient(ingredient_id)
    if ingredient is None:
        raise IngredientNotFoundError(ingredient_id)
    return ingredient


@ingredients_router.post("", response_model=Ingredient, status_code=201)
def create_ingredient(
    request: IngredientCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICatalogService = Depends(get_catalog_service),
) -> Ingredient:
    return service.create_ingredient(request)


@ingredients_router.put("/{ingredient_id}", response_model=Ingredient)
def update_ingredient(
    ingredient_id: int,
    request: IngredientUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICatalogService = Depends(get_catalog_service),
) -> Ingredient:
    return service.update_ingredient(ingredient_id, request)


@ingredients_router.delete("/{ingredient_id}", response_model=MessageResponse)
def delete_ingredient(
    ingredient_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICatalogService = Depends(get_catalog_service),
) -> MessageResponse:
    """Delete an ingredient and remove it from every recipe."""
    service.delete_ingredient(ingredient_id)
    return MessageResponse(message="Ingredient deleted")
