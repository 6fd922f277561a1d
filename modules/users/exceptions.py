"""
Users module exceptions.
"""

from shared.exceptions import NotFoundError, ConflictError, AuthorizationError


class UserNotFoundError(NotFoundError):
    """Raised when a user does not exist."""

    def __init__(self, user_id: int):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when an email is already used by another account."""

    def __init__(self, email: str):
        super().__init__(
            "Email is already registered",
            code="EMAIL_ALREADY_REGISTERED",
            details={"email": email},
        )


class UserHasRecipesError(ConflictError):
    """Raised when deleting a user who is still the primary author of recipes."""

    def __init__(self, user_id: int):
        super().__init__(
            f"User {user_id} is still the author of one or more recipes",
            code="USER_HAS_RECIPES",
            details={"user_id": user_id},
        )


class UserAccessDeniedError(AuthorizationError):
    """Raised when a user tries to change another user's account."""

    def __init__(self, user_id: int, actor_id: int):
        super().__init__(
            f"Access denied to user: {user_id}",
            code="USER_ACCESS_DENIED",
            details={"user_id": user_id, "actor_id": actor_id},
        )
