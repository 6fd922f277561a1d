"""
Steps module data models.
"""

from typing import Optional

from pydantic import BaseModel, Field


class StepCreate(BaseModel):
    """Request to add a step to a recipe."""

    recipe_id: int = Field(..., description="Recipe the step belongs to")
    step_number: int = Field(..., description="Position in the recipe, chosen by the caller")
    description: str = Field(..., min_length=1, description="What to do")


class StepUpdate(BaseModel):
    step_number: Optional[int] = None
    description: Optional[str] = Field(None, min_length=1)


class Step(BaseModel):
    id: int
    recipe_id: int
    step_number: int
    description: str
