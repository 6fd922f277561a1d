"""
Recipes module data models.

A recipe carries two independent visibility flags: is_public and
is_premium. Secondary authors (collaborators or guests) and ingredient
links hang off a recipe and are managed through the same module.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

# Numeric(6, 2) columns
MONEY = {"ge": 0, "max_digits": 6, "decimal_places": 2}


class AuthorRole(str, Enum):
    """Role of a secondary author on a recipe."""

    COLLABORATOR = "collaborator"
    GUEST = "guest"


class RecipeCreate(BaseModel):
    """
    Request to create a recipe.

    The author is always the user behind the session.
    """

    title: str = Field(..., min_length=1, max_length=150, description="Recipe title")
    description: Optional[str] = Field(None, description="Free-text description")
    prep_time: Optional[int] = Field(None, ge=0, description="Preparation time in minutes")
    cost: Optional[Decimal] = Field(None, description="Estimated cost", **MONEY)
    is_public: bool = Field(default=True, description="Listed for everyone")
    is_premium: bool = Field(default=False, description="Restricted to premium viewers")
    category_id: int = Field(..., description="Category the recipe belongs to")


class RecipeUpdate(BaseModel):
    """
    Partial update of a recipe.

    description, prep_time and cost may be cleared with an explicit null.
    """

    title: Optional[str] = Field(None, min_length=1, max_length=150)
    description: Optional[str] = None
    prep_time: Optional[int] = Field(None, ge=0)
    cost: Optional[Decimal] = Field(None, **MONEY)
    is_public: Optional[bool] = None
    is_premium: Optional[bool] = None
    category_id: Optional[int] = None


RECIPE_NULLABLE_FIELDS = ("description", "prep_time", "cost")


class Recipe(BaseModel):
    """A recipe joined with its category and author names."""

    id: int
    title: str
    description: Optional[str] = None
    prep_time: Optional[int] = None
    cost: Optional[Decimal] = None
    is_public: bool
    is_premium: bool
    category_id: int
    category_name: str
    author_id: int
    author_name: str
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None


class CollaboratorCreate(BaseModel):
    """Request to add a secondary author."""

    user_id: int = Field(..., description="User to add")
    role: AuthorRole = Field(default=AuthorRole.COLLABORATOR)
    can_modify: bool = Field(default=False, description="May edit the recipe")


class CollaboratorUpdate(BaseModel):
    role: Optional[AuthorRole] = None
    can_modify: Optional[bool] = None


class Collaborator(BaseModel):
    """A secondary author of a recipe."""

    recipe_id: int
    user_id: int
    user_name: Optional[str] = None
    role: AuthorRole = AuthorRole.COLLABORATOR
    can_modify: bool = False
    invited_at: Optional[datetime] = None


class RecipeIngredientCreate(BaseModel):
    """Request to link an ingredient to a recipe."""

    ingredient_id: int = Field(..., description="Ingredient to link")
    quantity: Optional[Decimal] = Field(None, description="Amount in the ingredient's unit", **MONEY)


class RecipeIngredientUpdate(BaseModel):
    quantity: Optional[Decimal] = Field(None, **MONEY)


class RecipeIngredient(BaseModel):
    """An ingredient as used by one recipe."""

    recipe_id: int
    ingredient_id: int
    name: str
    unit: Optional[str] = None
    quantity: Optional[Decimal] = None
