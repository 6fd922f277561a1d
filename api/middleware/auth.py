"""
Session authentication middleware.

Resolves `Authorization: Bearer <session id>` to the user behind an active
session.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import InvalidSessionError, MissingSessionError
from modules.auth.interfaces import ISessionService
from shared.models import AuthenticatedUser

from ..dependencies import get_session_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    sessions: ISessionService = Depends(get_session_service),
) -> AuthenticatedUser:
    """
    Dependency that requires an active session.

    Use this for endpoints that require a logged-in user. A missing header
    raises MissingSessionError; an unknown or closed session raises
    InvalidSessionError. Both answer 401.

    Usage:
        @router.get("/protected")
        def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise MissingSessionError("Missing authorization header")

    return sessions.authenticate(credentials.credentials)


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    sessions: ISessionService = Depends(get_session_service),
) -> Optional[AuthenticatedUser]:
    """
    Dependency that optionally extracts user if authenticated.

    Use this for endpoints that work with or without authentication. A
    closed or unknown session is treated as anonymous.
    """
    if credentials is None:
        return None

    try:
        return sessions.authenticate(credentials.credentials)
    except (InvalidSessionError, MissingSessionError):
        return None


# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)
OptionalAuth = Depends(get_optional_user)
