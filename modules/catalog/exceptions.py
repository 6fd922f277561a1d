"""
Catalog module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError


class CategoryNotFoundError(NotFoundError):
    """Raised when a category doesn't exist."""

    def __init__(self, category_id: int):
        super().__init__(
            f"Category not found: {category_id}",
            code="CATEGORY_NOT_FOUND",
            details={"category_id": category_id},
        )
        self.category_id = category_id


class CategoryInUseError(ConflictError):
    """Raised when deleting a category that recipes still reference."""

    def __init__(self, category_id: int):
        super().__init__(
            "Category is still used by recipes",
            code="CATEGORY_IN_USE",
            details={"category_id": category_id},
        )
        self.category_id = category_id


class IngredientNotFoundError(NotFoundError):
    """Raised when an ingredient doesn't exist."""

    def __init__(self, ingredient_id: int):
        super().__init__(
            f"Ingredient not found: {ingredient_id}",
            code="INGREDIENT_NOT_FOUND",
            details={"ingredient_id": ingredient_id},
        )
        self.ingredient_id = ingredient_id
