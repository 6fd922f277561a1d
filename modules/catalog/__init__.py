"""
Catalog module.

Categories and ingredients: the lookup tables recipes point at.
"""

from .interfaces import ICatalogService
from .models import (
    Category,
    CategoryCreate,
    CategoryUpdate,
    Ingredient,
    IngredientCreate,
    IngredientUpdate,
)
from .exceptions import (
    CategoryNotFoundError,
    CategoryInUseError,
    IngredientNotFoundError,
)

__all__ = [
    "ICatalogService",
    "Category",
    "CategoryCreate",
    "CategoryUpdate",
    "Ingredient",
    "IngredientCreate",
    "IngredientUpdate",
    "CategoryNotFoundError",
    "CategoryInUseError",
    "IngredientNotFoundError",
]
