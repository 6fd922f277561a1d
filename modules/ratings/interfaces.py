"""
Ratings module interface definitions.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import Rating, RatingCreate, RatingUpdate


@runtime_checkable
class IRatingService(Protocol):
    """
    Interface for recipe ratings.
    """

    def list_ratings(self, recipe_id: int, viewer: Optional[AuthenticatedUser]) -> list[Rating]:
        """List a recipe's ratings, newest first, with rater names."""
        ...

    def get_rating(self, rating_id: int, viewer: Optional[AuthenticatedUser]) -> Rating:
        ...

    def create_rating(self, request: RatingCreate, user: AuthenticatedUser) -> Rating:
        """
        Rate a recipe the user can view.

        Raises:
            InvalidScoreError: If the score is outside 1..5
            RecipeNotFoundError: If the recipe is missing or not visible
        """
        ...

    def update_rating(self, rating_id: int, request: RatingUpdate, user: AuthenticatedUser) -> Rating:
        """
        Raises:
            RatingAccessDeniedError: If the user is not the rater
        """
        ...

    def delete_rating(self, rating_id: int, user: AuthenticatedUser) -> None:
        ...
