"""
Users module data models.

The password only appears on input models; every output model omits it and
the password hash alike.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from shared.models import UserTier


class UserCreate(BaseModel):
    """Request to register a new user."""

    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    email: EmailStr = Field(..., description="Email address (unique)")
    password: str = Field(..., min_length=1, description="Plaintext password, hashed before storage")
    tier: UserTier = Field(default=UserTier.PUBLIC, description="Access tier")


class UserUpdate(BaseModel):
    """
    Partial update of a user.

    Omitted fields are left untouched. An omitted password keeps the stored
    hash as it is; an empty password is rejected.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=1)
    tier: Optional[UserTier] = None


class User(BaseModel):
    """A user as returned to callers."""

    id: int = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    tier: UserTier = Field(..., description="Access tier")
    registered_at: Optional[datetime] = Field(None, description="Registration time")
