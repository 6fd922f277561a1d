"""
Authentication module interface.

Other modules should depend on ISessionService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import LoginResponse, Session


@runtime_checkable
class ISessionService(Protocol):
    """
    Interface for session operations.

    Sessions move NoSession -> Active -> Closed; Closed is terminal and a
    session never expires on its own.
    """

    def login(self, email: str, password: str) -> LoginResponse:
        """
        Verify credentials and open a new Active session.

        Args:
            email: Account email
            password: Plaintext password

        Returns:
            LoginResponse with the session token and user ID

        Raises:
            InvalidCredentialsError: If the email is unknown or the password
                does not match (indistinguishable)
        """
        ...

    def logout(self, session_id: str) -> Session:
        """
        Close an Active session.

        Args:
            session_id: Session token

        Returns:
            The closed session

        Raises:
            SessionNotFoundError: If the session is unknown or already closed
        """
        ...

    def authenticate(self, session_id: str) -> AuthenticatedUser:
        """
        Resolve the user behind an Active session.

        Raises:
            MissingSessionError: If no token is given
            InvalidSessionError: If the session is unknown or closed
        """
        ...
