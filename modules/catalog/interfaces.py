"""
Catalog module interface definitions.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    Category,
    CategoryCreate,
    CategoryUpdate,
    Ingredient,
    IngredientCreate,
    IngredientUpdate,
)


@runtime_checkable
class ICatalogService(Protocol):
    """
    Interface for category and ingredient management.

    Reads are open to anyone; the routes require a session for writes.
    """

    def list_categories(self) -> list[Category]:
        ...

    def get_category(self, category_id: int) -> Optional[Category]:
        ...

    def create_category(self, request: CategoryCreate) -> Category:
        ...

    def update_category(self, category_id: int, request: CategoryUpdate) -> Category:
        """
        Raises:
            CategoryNotFoundError: If the category doesn't exist
        """
        ...

    def delete_category(self, category_id: int) -> None:
        """
        Raises:
            CategoryNotFoundError: If the category doesn't exist
            CategoryInUseError: If recipes still reference it
        """
        ...

    def list_ingredients(self) -> list[Ingredient]:
        ...

    def get_ingredient(self, ingredient_id: int) -> Optional[Ingredient]:
        ...

    def create_ingredient(self, request: IngredientCreate) -> Ingredient:
        ...

    def update_ingredient(self, ingredient_id: int, request: IngredientUpdate) -> Ingredient:
        """
        Raises:
            IngredientNotFoundError: If the ingredient doesn't exist
        """
        ...

    def delete_ingredient(self, ingredient_id: int) -> None:
        """
        Delete an ingredient and its links to recipes.

        Raises:
            IngredientNotFoundError: If the ingredient doesn't exist
        """
        ...
