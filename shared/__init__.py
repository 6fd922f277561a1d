"""
Shared infrastructure for CookShare backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Engine factory owning the connection pool
- schema: Relational table declarations
- exceptions: Base exception classes
- repository: Base repository with storage error translation

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import create_db_engine, get_engine, reset_engine_cache
from .exceptions import (
    CookShareError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    StorageError,
)
from .models import AuthenticatedUser, UserTier

__all__ = [
    "Settings",
    "get_settings",
    "create_db_engine",
    "get_engine",
    "reset_engine_cache",
    "CookShareError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "StorageError",
    "AuthenticatedUser",
    "UserTier",
]
