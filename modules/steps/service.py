"""
Step service implementation.
"""

import logging
from typing import Optional

from modules.recipes.interfaces import IRecipeService
from modules.recipes.exceptions import RecipeNotFoundError
from shared.models import AuthenticatedUser, changed_fields

from .interfaces import IStepService
from .models import Step, StepCreate, StepUpdate
from .repository import StepRepository
from .exceptions import StepNotFoundError

logger = logging.getLogger(__name__)


class StepService(IStepService):
    """
    Step service. Access is decided by the parent recipe.

    Implements IStepService protocol.
    """

    def __init__(self, repository: StepRepository, recipes: IRecipeService):
        self._repo = repository
        self._recipes = recipes

    def list_steps(self, recipe_id: int, viewer: Optional[AuthenticatedUser]) -> list[Step]:
        self._recipes.require_viewable(recipe_id, viewer)
        return self._repo.list_by_recipe(recipe_id)

    def get_step(self, step_id: int, viewer: Optional[AuthenticatedUser]) -> Step:
        return self._load(step_id, viewer)

    def create_step(self, request: StepCreate, user: AuthenticatedUser) -> Step:
        self._recipes.require_modifiable(request.recipe_id, user)
        step = self._repo.create(request.model_dump())
        logger.debug("Added step %s to recipe %s", step.step_number, step.recipe_id)
        return step

    def update_step(self, step_id: int, request: StepUpdate, user: AuthenticatedUser) -> Step:
        changes = changed_fields(request)
        step = self._load(step_id, user)
        self._recipes.require_modifiable(step.recipe_id, user)
        updated = self._repo.update(step, changes)
        if updated is None:
            raise StepNotFoundError(step_id)
        return updated

    def delete_step(self, step_id: int, user: AuthenticatedUser) -> None:
        step = self._load(step_id, user)
        self._recipes.require_modifiable(step.recipe_id, user)
        if not self._repo.delete(step):
            raise StepNotFoundError(step_id)

    def _load(self, step_id: int, viewer: Optional[AuthenticatedUser]) -> Step:
        """Fetch a step whose recipe the viewer can see."""
        step = self._repo.get(step_id)
        if step is None:
            raise StepNotFoundError(step_id)
        try:
            self._recipes.require_viewable(step.recipe_id, viewer)
        except RecipeNotFoundError:
            raise StepNotFoundError(step_id)
        return step
