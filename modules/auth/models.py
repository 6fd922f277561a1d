"""
Authentication module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SessionState(str, Enum):
    """Lifecycle of a login session. CLOSED is terminal."""

    ACTIVE = "active"
    CLOSED = "closed"


class Session(BaseModel):
    """A login session record."""

    id: str = Field(..., description="Opaque session token")
    user_id: int = Field(..., description="Owning user")
    started_at: datetime = Field(..., description="Login time")
    ended_at: Optional[datetime] = Field(None, description="Logout time, null while active")

    @property
    def state(self) -> SessionState:
        return SessionState.ACTIVE if self.ended_at is None else SessionState.CLOSED


class UserCredentials(BaseModel):
    """Stored credentials looked up during login. Never returned by the API."""

    user_id: int
    password_hash: str


class LoginRequest(BaseModel):
    """Request to start a session."""

    email: str = Field(..., min_length=1, description="Account email")
    password: str = Field(..., min_length=1, description="Plaintext password")


class LoginResponse(BaseModel):
    """Result of a successful login."""

    session_id: str = Field(..., description="Bearer token for later requests")
    user_id: int = Field(..., description="Logged-in user")
    message: str = "Session started"


class LogoutRequest(BaseModel):
    """Request to close a session."""

    session_id: str = Field(..., min_length=1, description="Session to close")
