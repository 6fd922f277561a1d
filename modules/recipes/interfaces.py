"""
Recipes module interface definitions.

Every operation takes the viewer (None for anonymous callers) so the
service can apply the authorization policy.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import (
    Collaborator,
    CollaboratorCreate,
    CollaboratorUpdate,
    Recipe,
    RecipeCreate,
    RecipeIngredient,
    RecipeIngredientCreate,
    RecipeIngredientUpdate,
    RecipeUpdate,
)


@runtime_checkable
class IRecipeService(Protocol):
    """
    Interface for recipe operations.

    Recipes the viewer may not see are reported as not found, never as
    forbidden.
    """

    def list_recipes(self, viewer: Optional[AuthenticatedUser]) -> list[Recipe]:
        """List the recipes visible to the viewer in insertion order."""
        ...

    def search_recipes(self, term: str, viewer: Optional[AuthenticatedUser]) -> list[Recipe]:
        """Search visible recipes by title or ingredient name."""
        ...

    def get_recipe(self, recipe_id: int, viewer: Optional[AuthenticatedUser]) -> Recipe:
        """
        Raises:
            RecipeNotFoundError: If missing or not visible to the viewer
        """
        ...

    def require_viewable(self, recipe_id: int, viewer: Optional[AuthenticatedUser]) -> Recipe:
        """Load a recipe for a child read (steps, ratings...)."""
        ...

    def require_modifiable(self, recipe_id: int, user: AuthenticatedUser) -> Recipe:
        """
        Load a recipe for a child write.

        Raises:
            RecipeNotFoundError: If missing or not visible
            RecipeAccessDeniedError: If the user may not modify it
        """
        ...

    def create_recipe(self, request: RecipeCreate, user: AuthenticatedUser) -> Recipe:
        ...

    def update_recipe(self, recipe_id: int, request: RecipeUpdate, user: AuthenticatedUser) -> Recipe:
        ...

    def delete_recipe(self, recipe_id: int, user: AuthenticatedUser) -> None:
        """
        Delete a recipe with its steps, ratings, links and secondary authors.

        Raises:
            RecipeAccessDeniedError: If the user is not the primary author
        """
        ...

    def list_collaborators(self, recipe_id: int, viewer: Optional[AuthenticatedUser]) -> list[Collaborator]:
        ...

    def add_collaborator(
        self, recipe_id: int, request: CollaboratorCreate, user: AuthenticatedUser
    ) -> Collaborator:
        """
        Raises:
            DuplicateCollaboratorError: If the user is already a secondary author
        """
        ...

    def update_collaborator(
        self, recipe_id: int, user_id: int, request: CollaboratorUpdate, user: AuthenticatedUser
    ) -> Collaborator:
        ...

    def remove_collaborator(self, recipe_id: int, user_id: int, user: AuthenticatedUser) -> None:
        ...

    def list_recipe_ingredients(
        self, recipe_id: int, viewer: Optional[AuthenticatedUser]
    ) -> list[RecipeIngredient]:
        ...

    def add_recipe_ingredient(
        self, recipe_id: int, request: RecipeIngredientCreate, user: AuthenticatedUser
    ) -> RecipeIngredient:
        """
        Raises:
            DuplicateIngredientLinkError: If the ingredient is already linked
        """
        ...

    def update_recipe_ingredient(
        self,
        recipe_id: int,
        ingredient_id: int,
        request: RecipeIngredientUpdate,
        user: AuthenticatedUser,
    ) -> RecipeIngredient:
        ...

    def remove_recipe_ingredient(
        self, recipe_id: int, ingredient_id: int, user: AuthenticatedUser
    ) -> None:
        ...
