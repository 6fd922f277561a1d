"""
Session service implementation.

Login verifies a password against the stored bcrypt hash and opens a
session row; logout closes it. The session token doubles as the bearer
credential for every authenticated request.
"""

import logging
import secrets
from typing import Optional

from shared.models import AuthenticatedUser

from .interfaces import ISessionService
from .models import LoginResponse, Session
from .passwords import PasswordHasher
from .repository import SessionRepository
from .exceptions import (
    InvalidCredentialsError,
    InvalidSessionError,
    MissingSessionError,
    SessionNotFoundError,
)

logger = logging.getLogger(__name__)


def new_session_id() -> str:
    """Generate an unguessable session token."""
    return secrets.token_urlsafe(32)


class SessionService(ISessionService):
    """
    Implementation of the session service.
    """

    def __init__(self, repository: SessionRepository, hasher: PasswordHasher):
        self._repo = repository
        self._hasher = hasher
        self._dummy_hash: Optional[str] = None

    def login(self, email: str, password: str) -> LoginResponse:
        """Verify credentials and open an Active session."""
        credentials = self._repo.find_credentials(email)
        if credentials is None:
            # Spend the same bcrypt work as a real comparison so response
            # time does not reveal whether the email exists.
            self._hasher.verify(password, self._get_dummy_hash())
            logger.info("Login refused")
            raise InvalidCredentialsError()

        if not self._hasher.verify(password, credentials.password_hash):
            logger.info("Login refused")
            raise InvalidCredentialsError()

        session = self._repo.create(new_session_id(), credentials.user_id)
        logger.info("User %s logged in", credentials.user_id)
        return LoginResponse(session_id=session.id, user_id=session.user_id)

    def logout(self, session_id: str) -> Session:
        """Close an Active session; anything else is reported as not found."""
        session = self._repo.close(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        logger.info("User %s logged out", session.user_id)
        return session

    def authenticate(self, session_id: str) -> AuthenticatedUser:
        """Resolve the user behind an Active session."""
        if not session_id:
            raise MissingSessionError()
        user = self._repo.get_active_user(session_id)
        if user is None:
            raise InvalidSessionError()
        return user

    def _get_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self._hasher.hash(secrets.token_hex(16))
        return self._dummy_hash
