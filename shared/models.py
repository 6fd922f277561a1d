"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from typing import Any, Iterable

from pydantic import BaseModel, Field

from .exceptions import ValidationError


class UserTier(str, Enum):
    """A user's access class."""

    PUBLIC = "public"
    PREMIUM = "premium"


class AuthenticatedUser(BaseModel):
    """
    Represents the user behind an active session.

    This model is resolved from the bearer session token and made available
    to route handlers via dependency injection. It is the minimal user info
    the authorization policy needs.
    """

    id: int = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="User's email address")
    tier: UserTier = Field(default=UserTier.PUBLIC, description="Access tier")
    session_id: str = Field(..., description="Session the request was made with")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }

    @property
    def is_premium(self) -> bool:
        return self.tier == UserTier.PREMIUM


def changed_fields(update: BaseModel, nullable: Iterable[str] = ()) -> dict[str, Any]:
    """
    Extract the fields a partial update actually sets.

    Fields absent from the request body are skipped. An explicit null is kept
    only for columns listed in ``nullable``; for every other column it is
    treated as "not provided".

    Raises:
        ValidationError: If the update sets nothing
    """
    allowed_null = set(nullable)
    data = update.model_dump(exclude_unset=True)
    changes = {k: v for k, v in data.items() if v is not None or k in allowed_null}
    if not changes:
        raise ValidationError("No fields to update", code="EMPTY_UPDATE")
    return changes
