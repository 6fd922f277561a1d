"""
Steps module interface definitions.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import Step, StepCreate, StepUpdate


@runtime_checkable
class IStepService(Protocol):
    """
    Interface for recipe step operations.

    Reading steps needs view access to the recipe; writing them needs
    modify access.
    """

    def list_steps(self, recipe_id: int, viewer: Optional[AuthenticatedUser]) -> list[Step]:
        """List a recipe's steps ordered by step number."""
        ...

    def get_step(self, step_id: int, viewer: Optional[AuthenticatedUser]) -> Step:
        ...

    def create_step(self, request: StepCreate, user: AuthenticatedUser) -> Step:
        ...

    def update_step(self, step_id: int, request: StepUpdate, user: AuthenticatedUser) -> Step:
        ...

    def delete_step(self, step_id: int, user: AuthenticatedUser) -> None:
        ...
