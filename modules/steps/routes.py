"""
Step API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user, get_optional_user
from api.dependencies import get_step_service
from api.models import MessageResponse
from shared.models import AuthenticatedUser

from .interfaces import IStepService
from .models import Step, StepCreate, StepUpdate

router = APIRouter()


@router.get("/recipe/{recipe_id}", response_model=list[Step])
def list_steps(
    recipe_id: int,
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: IStepService = Depends(get_step_service),
) -> list[Step]:
    """List a recipe's steps in step-number order."""
    return service.list_steps(recipe_id, user)


@router.get("/{step_id}", response_model=Step)
def get_step(
    step_id: int,
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: IStepService = Depends(get_step_service),
) -> Step:
    return service.get_step(step_id, user)


@router.post("", response_model=Step, status_code=201)
def create_step(
    request: StepCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IStepService = Depends(get_step_service),
) -> Step:
    """Add a step. Requires permission to modify the recipe."""
    return service.create_step(request, user)


@router.put("/{step_id}", response_model=Step)
def update_step(
    step_id: int,
    request: StepUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IStepService = Depends(get_step_service),
) -> Step:
    return service.update_step(step_id, request, user)


@router.delete("/{step_id}", response_model=MessageResponse)
def delete_step(
    step_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IStepService = Depends(get_step_service),
) -> MessageResponse:
    service.delete_step(step_id, user)
    return MessageResponse(message="Step deleted")
