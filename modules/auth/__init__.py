"""
Authentication module.

Handles login/logout against the sessions table, password hashing, and
resolution of bearer session tokens to users.

Public API:
- ISessionService: Interface for session operations
- PasswordHasher: bcrypt wrapper used by login and by the users module
- Session, SessionState, LoginRequest, LoginResponse, LogoutRequest: Models
- Auth exceptions: InvalidCredentialsError, SessionNotFoundError, etc.
"""

from .interfaces import ISessionService
from .passwords import PasswordHasher
from .models import (
    Session,
    SessionState,
    LoginRequest,
    LoginResponse,
    LogoutRequest,
)
from .exceptions import (
    InvalidCredentialsError,
    MissingSessionError,
    InvalidSessionError,
    SessionNotFoundError,
)

__all__ = [
    # Interface
    "ISessionService",
    "PasswordHasher",
    # Models
    "Session",
    "SessionState",
    "LoginRequest",
    "LoginResponse",
    "LogoutRequest",
    # Exceptions
    "InvalidCredentialsError",
    "MissingSessionError",
    "InvalidSessionError",
    "SessionNotFoundError",
]
