"""
Rating service implementation.

Anyone who can view a recipe may rate it. Only the rater may change or
remove a rating afterwards.
"""

import logging
from typing import Optional

from modules.integrity import check_rating_score
from modules.recipes.interfaces import IRecipeService
from modules.recipes.exceptions import RecipeNotFoundError
from shared.models import AuthenticatedUser, changed_fields

from .interfaces import IRatingService
from .models import Rating, RatingCreate, RatingUpdate
from .repository import RatingRepository
from .exceptions import RatingAccessDeniedError, RatingNotFoundError

logger = logging.getLogger(__name__)


class RatingService(IRatingService):
    """
    Rating service.

    Implements IRatingService protocol.
    """

    def __init__(self, repository: RatingRepository, recipes: IRecipeService):
        self._repo = repository
        self._recipes = recipes

    def list_ratings(self, recipe_id: int, viewer: Optional[AuthenticatedUser]) -> list[Rating]:
        self._recipes.require_viewable(recipe_id, viewer)
        return self._repo.list_by_recipe(recipe_id)

    def get_rating(self, rating_id: int, viewer: Optional[AuthenticatedUser]) -> Rating:
        return self._load(rating_id, viewer)

    def create_rating(self, request: RatingCreate, user: AuthenticatedUser) -> Rating:
        check_rating_score(request.score)
        self._recipes.require_viewable(request.recipe_id, user)
        rating = self._repo.create({**request.model_dump(), "user_id": user.id})
        logger.info("User %s rated recipe %s with %s", user.id, rating.recipe_id, rating.score)
        return rating

    def update_rating(self, rating_id: int, request: RatingUpdate, user: AuthenticatedUser) -> Rating:
        changes = changed_fields(request, nullable=("comment",))
        if "score" in changes:
            check_rating_score(changes["score"])
        self._require_rater(rating_id, user)
        rating = self._repo.update(rating_id, changes)
        if rating is None:
            raise RatingNotFoundError(rating_id)
        return rating

    def delete_rating(self, rating_id: int, user: AuthenticatedUser) -> None:
        self._require_rater(rating_id, user)
        if not self._repo.delete(rating_id):
            raise RatingNotFoundError(rating_id)

    def _load(self, rating_id: int, viewer: Optional[AuthenticatedUser]) -> Rating:
        rating = self._repo.get(rating_id)
        if rating is None:
            raise RatingNotFoundError(rating_id)
        try:
            self._recipes.require_viewable(rating.recipe_id, viewer)
        except RecipeNotFoundError:
            raise RatingNotFoundError(rating_id)
        return rating

    def _require_rater(self, rating_id: int, user: AuthenticatedUser) -> Rating:
        rating = self._load(rating_id, user)
        if rating.user_id != user.id:
            logger.info("User %s refused to change rating %s", user.id, rating_id)
            raise RatingAccessDeniedError(rating_id, user.id)
        return rating
