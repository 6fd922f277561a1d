"""
Users module.

Handles account registration, profile reads and updates, and deletion.
Password hashes never leave this module's repository.

Public API:
- IUserService: Interface for user operations
- User, UserCreate, UserUpdate: Data models
- User exceptions: UserNotFoundError, EmailAlreadyRegisteredError, ...
"""

from .interfaces import IUserService
from .models import User, UserCreate, UserUpdate
from .exceptions import (
    UserNotFoundError,
    EmailAlreadyRegisteredError,
    UserHasRecipesError,
    UserAccessDeniedError,
)

__all__ = [
    # Interface
    "IUserService",
    # Models
    "User",
    "UserCreate",
    "UserUpdate",
    # Exceptions
    "UserNotFoundError",
    "EmailAlreadyRegisteredError",
    "UserHasRecipesError",
    "UserAccessDeniedError",
]
