"""
User service implementation.

Registration, profile updates and account deletion. Passwords are hashed
here before they reach the repository.
"""

import logging
from typing import Optional

from modules.auth.passwords import PasswordHasher
from shared.models import AuthenticatedUser, changed_fields

from .interfaces import IUserService
from .models import User, UserCreate, UserUpdate
from .repository import UserRepository
from .exceptions import (
    EmailAlreadyRegisteredError,
    UserAccessDeniedError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """
    User service backed by the relational store.

    Implements IUserService protocol.
    """

    def __init__(self, repository: UserRepository, hasher: PasswordHasher):
        self._repo = repository
        self._hasher = hasher

    def list_users(self) -> list[User]:
        return self._repo.list_all()

    def get_user(self, user_id: int) -> Optional[User]:
        return self._repo.get(user_id)

    def create_user(self, request: UserCreate) -> User:
        """Hash the password and store the new account."""
        if self._repo.email_taken(request.email):
            raise EmailAlreadyRegisteredError(request.email)

        data = {
            "name": request.name,
            "email": request.email,
            "password_hash": self._hasher.hash(request.password),
            "tier": request.tier.value,
        }
        user = self._repo.create(data)
        logger.info("Registered user %s (%s tier)", user.id, user.tier.value)
        return user

    def update_user(self, user_id: int, request: UserUpdate, actor: AuthenticatedUser) -> User:
        """Apply a partial update to the actor's own account."""
        self._ensure_self(user_id, actor)

        changes = changed_fields(request)
        password = changes.pop("password", None)
        if password is not None:
            changes["password_hash"] = self._hasher.hash(password)
        if "tier" in changes:
            changes["tier"] = changes["tier"].value
        if "email" in changes and self._repo.email_taken(changes["email"], exclude_id=user_id):
            raise EmailAlreadyRegisteredError(changes["email"])

        user = self._repo.update(user_id, changes)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def delete_user(self, user_id: int, actor: AuthenticatedUser) -> None:
        """Delete the actor's own account."""
        self._ensure_self(user_id, actor)
        if not self._repo.delete(user_id):
            raise UserNotFoundError(user_id)
        logger.info("Deleted user %s", user_id)

    def _ensure_self(self, user_id: int, actor: AuthenticatedUser) -> None:
        if actor.id != user_id:
            logger.info("User %s refused access to account %s", actor.id, user_id)
            raise UserAccessDeniedError(user_id, actor.id)
