"""
Ratings module exceptions.
"""

from shared.exceptions import AuthorizationError, NotFoundError


class RatingNotFoundError(NotFoundError):
    """Raised when a rating doesn't exist or its recipe is not visible."""

    def __init__(self, rating_id: int):
        super().__init__(
            f"Rating not found: {rating_id}",
            code="RATING_NOT_FOUND",
            details={"rating_id": rating_id},
        )
        self.rating_id = rating_id


class RatingAccessDeniedError(AuthorizationError):
    """Raised when someone other than the rater changes a rating."""

    def __init__(self, rating_id: int, user_id: int):
        super().__init__(
            "Only the rater may change this rating",
            code="RATING_ACCESS_DENIED",
            details={"rating_id": rating_id},
        )
        self.rating_id = rating_id
        self.user_id = user_id
