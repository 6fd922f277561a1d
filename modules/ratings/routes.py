"""
Rating API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user, get_optional_user
from api.dependencies import get_rating_service
from api.models import MessageResponse
from shared.models import AuthenticatedUser

from .interfaces import IRatingService
from .models import Rating, RatingCreate, RatingUpdate

router = APIRouter()


@router.get("/recipe/{recipe_id}", response_model=list[Rating])
def list_ratings(
    recipe_id: int,
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: IRatingService = Depends(get_rating_service),
) -> list[Rating]:
    """List a recipe's ratings, newest first."""
    return service.list_ratings(recipe_id, user)


@router.get("/{rating_id}", response_model=Rating)
def get_rating(
    rating_id: int,
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: IRatingService = Depends(get_rating_service),
) -> Rating:
    return service.get_rating(rating_id, user)


@router.post("", response_model=Rating, status_code=201)
def create_rating(
    request: RatingCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IRatingService = Depends(get_rating_service),
) -> Rating:
    """
    Rate a recipe as the current user.

    Returns 400 if the score is outside 1..5.
    """
    return service.create_rating(request, user)


@router.put("/{rating_id}", response_model=Rating)
def update_rating(
    rating_id: int,
    request: RatingUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IRatingService = Depends(get_rating_service),
) -> Rating:
    return service.update_rating(rating_id, request, user)


@router.delete("/{rating_id}", response_model=MessageResponse)
def delete_rating(
    rating_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IRatingService = Depends(get_rating_service),
) -> MessageResponse:
    service.delete_rating(rating_id, user)
    return MessageResponse(message="Rating deleted")
