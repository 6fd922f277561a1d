"""
Recipes module exceptions.
"""

from shared.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


class RecipeNotFoundError(NotFoundError):
    """
    Raised when a recipe doesn't exist.

    Also raised when the caller may not view it, so hidden recipes are
    indistinguishable from missing ones.
    """

    def __init__(self, recipe_id: int):
        super().__init__(
            f"Recipe not found: {recipe_id}",
            code="RECIPE_NOT_FOUND",
            details={"recipe_id": recipe_id},
        )
        self.recipe_id = recipe_id


class RecipeAccessDeniedError(AuthorizationError):
    """Raised when a viewer may not modify or delete a recipe."""

    def __init__(self, recipe_id: int, action: str):
        super().__init__(
            f"Not allowed to {action} this recipe",
            code="RECIPE_ACCESS_DENIED",
            details={"recipe_id": recipe_id, "action": action},
        )
        self.recipe_id = recipe_id
        self.action = action


class InvalidReferenceError(ValidationError):
    """Raised when a write references a category, user or ingredient that doesn't exist."""

    def __init__(self, field: str, value: int):
        super().__init__(
            f"Referenced record does not exist: {field}={value}",
            code="INVALID_REFERENCE",
            details={"field": field, "value": value},
        )
        self.field = field
        self.value = value


class AuthorAsCollaboratorError(ValidationError):
    """Raised when the primary author is added as their own secondary author."""

    def __init__(self, recipe_id: int):
        super().__init__(
            "The recipe's author cannot be added as a secondary author",
            code="AUTHOR_AS_COLLABORATOR",
            details={"recipe_id": recipe_id},
        )


class DuplicateCollaboratorError(ConflictError):
    """Raised when the (recipe, user) pair already exists."""

    def __init__(self, recipe_id: int, user_id: int):
        super().__init__(
            "User is already a secondary author of this recipe",
            code="DUPLICATE_COLLABORATOR",
            details={"recipe_id": recipe_id, "user_id": user_id},
        )


class CollaboratorNotFoundError(NotFoundError):
    def __init__(self, recipe_id: int, user_id: int):
        super().__init__(
            "Secondary author not found",
            code="COLLABORATOR_NOT_FOUND",
            details={"recipe_id": recipe_id, "user_id": user_id},
        )


class DuplicateIngredientLinkError(ConflictError):
    """Raised when the (recipe, ingredient) pair already exists."""

    def __init__(self, recipe_id: int, ingredient_id: int):
        super().__init__(
            "Ingredient is already linked to this recipe",
            code="DUPLICATE_INGREDIENT_LINK",
            details={"recipe_id": recipe_id, "ingredient_id": ingredient_id},
        )


class RecipeIngredientNotFoundError(NotFoundError):
    def __init__(self, recipe_id: int, ingredient_id: int):
        super().__init__(
            "Ingredient is not linked to this recipe",
            code="RECIPE_INGREDIENT_NOT_FOUND",
            details={"recipe_id": recipe_id, "ingredient_id": ingredient_id},
        )
