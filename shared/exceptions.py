"""
Base exception classes for the CookShare backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application: the API
layer maps each base class to one HTTP status code.
"""

from typing import Optional, Any


class CookShareError(Exception):
    """
    Base exception for all CookShare errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(CookShareError):
    """Resource not found."""

    pass


class ValidationError(CookShareError):
    """Input validation failed."""

    pass


class ConflictError(CookShareError):
    """A write would duplicate a unique or composite key."""

    pass


class AuthenticationError(CookShareError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(CookShareError):
    """Authorization failed (insufficient permissions)."""

    pass


class ExternalServiceError(CookShareError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class StorageError(ExternalServiceError):
    """
    The relational store failed (connectivity, pool exhaustion, or an
    unclassified constraint violation).

    The message is deliberately generic; the underlying engine error is
    logged server-side and never attached to the exception details.
    """

    def __init__(self, message: str = "A storage error occurred"):
        super().__init__(message, service="database", code="STORAGE_ERROR")
