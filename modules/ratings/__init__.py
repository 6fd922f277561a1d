"""
Ratings module.

1..5 scores with optional comments, one row per rating.
"""

from .interfaces import IRatingService
from .models import Rating, RatingCreate, RatingUpdate
from .exceptions import RatingNotFoundError, RatingAccessDeniedError

__all__ = [
    "IRatingService",
    "Rating",
    "RatingCreate",
    "RatingUpdate",
    "RatingNotFoundError",
    "RatingAccessDeniedError",
]
