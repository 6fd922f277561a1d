"""
Catalog module data models.

Categories and ingredients are flat lookup tables referenced by recipes.
"""

from typing import Optional

from pydantic import BaseModel, Field


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50, description="Category name")


class CategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=50)


class Category(BaseModel):
    id: int = Field(..., description="Category ID")
    name: str = Field(..., description="Category name")


class IngredientCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="Ingredient name")
    unit: Optional[str] = Field(None, max_length=20, description="Unit of measure, e.g. 'g' or 'pieza'")


class IngredientUpdate(BaseModel):
    """Partial update; an explicit null clears the unit."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    unit: Optional[str] = Field(None, max_length=20)


class Ingredient(BaseModel):
    id: int = Field(..., description="Ingredient ID")
    name: str = Field(..., description="Ingredient name")
    unit: Optional[str] = Field(None, description="Unit of measure")
