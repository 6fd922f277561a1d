"""
Catalog service implementation.
"""

import logging
from typing import Optional

from shared.models import changed_fields

from .interfaces import ICatalogService
from .models import (
    Category,
    CategoryCreate,
    CategoryUpdate,
    Ingredient,
    IngredientCreate,
    IngredientUpdate,
)
from .repository import CategoryRepository, IngredientRepository
from .exceptions import CategoryNotFoundError, IngredientNotFoundError

logger = logging.getLogger(__name__)


class CatalogService(ICatalogService):
    """
    Category and ingredient management.

    Implements ICatalogService protocol.
    """

    def __init__(self, categories: CategoryRepository, ingredients: IngredientRepository):
        self._categories = categories
        self._ingredients = ingredients

    # Categories

    def list_categories(self) -> list[Category]:
        return self._categories.list_all()

    def get_category(self, category_id: int) -> Optional[Category]:
        return self._categories.get(category_id)

    def create_category(self, request: CategoryCreate) -> Category:
        return self._categories.create(request.model_dump())

    def update_category(self, category_id: int, request: CategoryUpdate) -> Category:
        category = self._categories.update(category_id, changed_fields(request))
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category

    def delete_category(self, category_id: int) -> None:
        if not self._categories.delete(category_id):
            raise CategoryNotFoundError(category_id)
        logger.info("Deleted category %s", category_id)

    # Ingredients

    def list_ingredients(self) -> list[Ingredient]:
        return self._ingredients.list_all()

    def get_ingredient(self, ingredient_id: int) -> Optional[Ingredient]:
        return self._ingredients.get(ingredient_id)

    def create_ingredient(self, request: IngredientCreate) -> Ingredient:
        return self._ingredients.create(request.model_dump())

    def update_ingredient(self, ingredient_id: int, request: IngredientUpdate) -> Ingredient:
        changes = changed_fields(request, nullable=("unit",))
        ingredient = self._ingredients.update(ingredient_id, changes)
        if ingredient is None:
            raise IngredientNotFoundError(ingredient_id)
        return ingredient

    def delete_ingredient(self, ingredient_id: int) -> None:
        if not self._ingredients.delete(ingredient_id):
            raise IngredientNotFoundError(ingredient_id)
        logger.info("Deleted ingredient %s", ingredient_id)
