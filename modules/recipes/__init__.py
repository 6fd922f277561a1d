"""
Recipes module.

Recipes, their secondary authors and ingredient links, plus the
authorization policy that decides who may view, modify or delete them.

Public API:
- IRecipeService: Interface for recipe operations
- policy: can_view / can_modify / can_delete
- Recipe, RecipeCreate, RecipeUpdate, Collaborator, RecipeIngredient...: Models
- Recipe exceptions: RecipeNotFoundError, RecipeAccessDeniedError, etc.
"""

from . import policy
from .interfaces import IRecipeService
from .models import (
    AuthorRole,
    Recipe,
    RecipeCreate,
    RecipeUpdate,
    Collaborator,
    CollaboratorCreate,
    CollaboratorUpdate,
    RecipeIngredient,
    RecipeIngredientCreate,
    RecipeIngredientUpdate,
)
from .exceptions import (
    RecipeNotFoundError,
    RecipeAccessDeniedError,
    InvalidReferenceError,
    AuthorAsCollaboratorError,
    DuplicateCollaboratorError,
    CollaboratorNotFoundError,
    DuplicateIngredientLinkError,
    RecipeIngredientNotFoundError,
)

__all__ = [
    "policy",
    "IRecipeService",
    # Models
    "AuthorRole",
    "Recipe",
    "RecipeCreate",
    "RecipeUpdate",
    "Collaborator",
    "CollaboratorCreate",
    "CollaboratorUpdate",
    "RecipeIngredient",
    "RecipeIngredientCreate",
    "RecipeIngredientUpdate",
    # Exceptions
    "RecipeNotFoundError",
    "RecipeAccessDeniedError",
    "InvalidReferenceError",
    "AuthorAsCollaboratorError",
    "DuplicateCollaboratorError",
    "CollaboratorNotFoundError",
    "DuplicateIngredientLinkError",
    "RecipeIngredientNotFoundError",
]
