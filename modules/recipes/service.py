"""
Recipe service implementation.

Loads recipes and their secondary authors, asks the policy, then writes.
Steps and ratings reuse require_viewable/require_modifiable so the same
rules guard child records.
"""

import logging
from typing import Optional

from shared.models import AuthenticatedUser, changed_fields

from . import policy
from .interfaces import IRecipeService
from .models import (
    RECIPE_NULLABLE_FIELDS,
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
from .repository import RecipeRepository
from .exceptions import (
    AuthorAsCollaboratorError,
    CollaboratorNotFoundError,
    RecipeAccessDeniedError,
    RecipeIngredientNotFoundError,
    RecipeNotFoundError,
)

logger = logging.getLogger(__name__)


class RecipeService(IRecipeService):
    """
    Recipe service with authorization enforcement.

    Implements IRecipeService protocol.
    """

    def __init__(self, repository: RecipeRepository):
        self._repo = repository

    # Reads

    def list_recipes(self, viewer: Optional[AuthenticatedUser]) -> list[Recipe]:
        return self._visible(self._repo.list_all(), viewer)

    def search_recipes(self, term: str, viewer: Optional[AuthenticatedUser]) -> list[Recipe]:
        return self._visible(self._repo.search(term), viewer)

    def get_recipe(self, recipe_id: int, viewer: Optional[AuthenticatedUser]) -> Recipe:
        recipe, _ = self._load_viewable(recipe_id, viewer)
        return recipe

    def require_viewable(self, recipe_id: int, viewer: Optional[AuthenticatedUser]) -> Recipe:
        recipe, _ = self._load_viewable(recipe_id, viewer)
        return recipe

    def require_modifiable(self, recipe_id: int, user: AuthenticatedUser) -> Recipe:
        recipe, collaborators = self._load_viewable(recipe_id, user)
        if not policy.can_modify(user, recipe, collaborators):
            self._deny(recipe_id, user, "modify")
        return recipe

    # Writes

    def create_recipe(self, request: RecipeCreate, user: AuthenticatedUser) -> Recipe:
        data = request.model_dump()
        data["author_id"] = user.id
        recipe = self._repo.create(data)
        logger.info("User %s created recipe %s", user.id, recipe.id)
        return recipe

    def update_recipe(self, recipe_id: int, request: RecipeUpdate, user: AuthenticatedUser) -> Recipe:
        changes = changed_fields(request, nullable=RECIPE_NULLABLE_FIELDS)
        self.require_modifiable(recipe_id, user)
        recipe = self._repo.update(recipe_id, changes)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)
        return recipe

    def delete_recipe(self, recipe_id: int, user: AuthenticatedUser) -> None:
        self._require_owner(recipe_id, user, "delete")
        if not self._repo.delete(recipe_id):
            raise RecipeNotFoundError(recipe_id)
        logger.info("User %s deleted recipe %s", user.id, recipe_id)

    # Secondary authors

    def list_collaborators(self, recipe_id: int, viewer: Optional[AuthenticatedUser]) -> list[Collaborator]:
        _, collaborators = self._load_viewable(recipe_id, viewer)
        return collaborators

    def add_collaborator(
        self, recipe_id: int, request: CollaboratorCreate, user: AuthenticatedUser
    ) -> Collaborator:
        recipe = self._require_owner(recipe_id, user, "manage authors of")
        if request.user_id == recipe.author_id:
            raise AuthorAsCollaboratorError(recipe_id)
        collaborator = self._repo.add_collaborator(recipe_id, request.model_dump(mode="json"))
        logger.info("User %s added to recipe %s as %s", request.user_id, recipe_id, collaborator.role.value)
        return collaborator

    def update_collaborator(
        self, recipe_id: int, user_id: int, request: CollaboratorUpdate, user: AuthenticatedUser
    ) -> Collaborator:
        changes = changed_fields(request)
        if "role" in changes:
            changes["role"] = changes["role"].value
        self._require_owner(recipe_id, user, "manage authors of")
        collaborator = self._repo.update_collaborator(recipe_id, user_id, changes)
        if collaborator is None:
            raise CollaboratorNotFoundError(recipe_id, user_id)
        return collaborator

    def remove_collaborator(self, recipe_id: int, user_id: int, user: AuthenticatedUser) -> None:
        self._require_owner(recipe_id, user, "manage authors of")
        if not self._repo.remove_collaborator(recipe_id, user_id):
            raise CollaboratorNotFoundError(recipe_id, user_id)

    # Ingredient links

    def list_recipe_ingredients(
        self, recipe_id: int, viewer: Optional[AuthenticatedUser]
    ) -> list[RecipeIngredient]:
        self._load_viewable(recipe_id, viewer)
        return self._repo.list_ingredients(recipe_id)

    def add_recipe_ingredient(
        self, recipe_id: int, request: RecipeIngredientCreate, user: AuthenticatedUser
    ) -> RecipeIngredient:
        self.require_modifiable(recipe_id, user)
        return self._repo.add_ingredient(recipe_id, request.model_dump())

    def update_recipe_ingredient(
        self,
        recipe_id: int,
        ingredient_id: int,
        request: RecipeIngredientUpdate,
        user: AuthenticatedUser,
    ) -> RecipeIngredient:
        changes = changed_fields(request, nullable=("quantity",))
        self.require_modifiable(recipe_id, user)
        link = self._repo.update_ingredient(recipe_id, ingredient_id, changes)
        if link is None:
            raise RecipeIngredientNotFoundError(recipe_id, ingredient_id)
        return link

    def remove_recipe_ingredient(
        self, recipe_id: int, ingredient_id: int, user: AuthenticatedUser
    ) -> None:
        self.require_modifiable(recipe_id, user)
        if not self._repo.remove_ingredient(recipe_id, ingredient_id):
            raise RecipeIngredientNotFoundError(recipe_id, ingredient_id)

    # Helpers

    def _visible(self, found: list[Recipe], viewer: Optional[AuthenticatedUser]) -> list[Recipe]:
        collaborators = self._repo.collaborators_for(r.id for r in found)
        return [r for r in found if policy.can_view(viewer, r, collaborators.get(r.id, []))]

    def _load_viewable(
        self, recipe_id: int, viewer: Optional[AuthenticatedUser]
    ) -> tuple[Recipe, list[Collaborator]]:
        recipe = self._repo.get(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)
        collaborators = self._repo.list_collaborators(recipe_id)
        if not policy.can_view(viewer, recipe, collaborators):
            raise RecipeNotFoundError(recipe_id)
        return recipe, collaborators

    def _require_owner(self, recipe_id: int, user: AuthenticatedUser, action: str) -> Recipe:
        recipe, _ = self._load_viewable(recipe_id, user)
        if not policy.can_delete(user, recipe):
            self._deny(recipe_id, user, action)
        return recipe

    def _deny(self, recipe_id: int, user: AuthenticatedUser, action: str) -> None:
        logger.info("User %s refused to %s recipe %s", user.id, action, recipe_id)
        raise RecipeAccessDeniedError(recipe_id, action)
