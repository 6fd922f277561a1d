"""
Users module interface.

Other modules and the API layer should depend on IUserService, not the
concrete implementation.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import User, UserCreate, UserUpdate


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for user operations.
    """

    def list_users(self) -> list[User]:
        """List every user in registration order."""
        ...

    def get_user(self, user_id: int) -> Optional[User]:
        """
        Get a user by ID.

        Returns:
            User if found, None otherwise
        """
        ...

    def create_user(self, request: UserCreate) -> User:
        """
        Register a new user.

        Raises:
            EmailAlreadyRegisteredError: If the email is taken
        """
        ...

    def update_user(self, user_id: int, request: UserUpdate, actor: AuthenticatedUser) -> User:
        """
        Update the actor's own account.

        Raises:
            UserAccessDeniedError: If actor is not the user
            UserNotFoundError: If the user does not exist
            EmailAlreadyRegisteredError: If the new email is taken
            ValidationError: If the update sets nothing
        """
        ...

    def delete_user(self, user_id: int, actor: AuthenticatedUser) -> None:
        """
        Delete the actor's own account.

        Sessions, ratings, collaborations and subscriptions go with it.

        Raises:
            UserAccessDeniedError: If actor is not the user
            UserNotFoundError: If the user does not exist
            UserHasRecipesError: If the user still authors recipes
        """
        ...
