"""API models package."""

from .common import MessageResponse
from .errors import ErrorResponse, ValidationErrorResponse

__all__ = [
    "MessageResponse",
    "ErrorResponse",
    "ValidationErrorResponse",
]
