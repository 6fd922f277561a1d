"""
Ratings module data models.

Scores are plain integers here; the 1..5 range is enforced by the service
through modules.integrity so the error carries its own code.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class RatingCreate(BaseModel):
    """
    Request to rate a recipe.

    The rater is always the user behind the session.
    """

    recipe_id: int = Field(..., description="Recipe being rated")
    score: int = Field(..., description="Score from 1 to 5")
    comment: Optional[str] = Field(None, description="Optional review text")


class RatingUpdate(BaseModel):
    """Partial update; an explicit null clears the comment."""

    score: Optional[int] = None
    comment: Optional[str] = None


class Rating(BaseModel):
    id: int
    recipe_id: int
    user_id: int
    user_name: Optional[str] = Field(None, description="Rater's display name")
    score: int
    comment: Optional[str] = None
    rated_at: Optional[datetime] = None
