"""
Integrity rule exceptions.
"""

from datetime import datetime

from shared.exceptions import ValidationError


class InvalidScoreError(ValidationError):
    """Raised when a rating score falls outside the allowed range."""

    def __init__(self, score: int, minimum: int, maximum: int):
        super().__init__(
            f"Score must be between {minimum} and {maximum}, got {score}",
            code="INVALID_SCORE",
            details={"score": score, "min": minimum, "max": maximum},
        )


class InvalidSubscriptionPeriodError(ValidationError):
    """Raised when a subscription would end before it starts."""

    def __init__(self, starts_at: datetime, ends_at: datetime):
        super().__init__(
            "Subscription end must be after its start",
            code="INVALID_SUBSCRIPTION_PERIOD",
            details={"starts_at": starts_at.isoformat(), "ends_at": ends_at.isoformat()},
        )
