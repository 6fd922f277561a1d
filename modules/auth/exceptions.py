"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, NotFoundError


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when login fails.

    Unknown email and wrong password produce this same error so callers
    cannot probe which accounts exist.
    """

    def __init__(self):
        super().__init__("Invalid credentials", code="INVALID_CREDENTIALS")


class MissingSessionError(AuthenticationError):
    """Raised when no session token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_SESSION")


class InvalidSessionError(AuthenticationError):
    """Raised when a session token is unknown or the session was closed."""

    def __init__(self, message: str = "Session is invalid or closed"):
        super().__init__(message, code="INVALID_SESSION")


class SessionNotFoundError(NotFoundError):
    """
    Raised when logging out a session that is not active.

    A session that never existed and one that is already closed are
    reported identically.
    """

    def __init__(self, session_id: str):
        super().__init__(
            "Session does not exist or is already closed",
            code="SESSION_NOT_FOUND",
        )
        self.session_id = session_id
