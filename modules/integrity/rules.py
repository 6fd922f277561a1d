"""
Integrity rules applied at the boundary of each write.

These are pure checks: they take already-parsed values and raise a
ValidationError subclass, so they can run before any storage round trip.
"""

from datetime import datetime, timezone

from .exceptions import InvalidScoreError, InvalidSubscriptionPeriodError

MIN_SCORE = 1
MAX_SCORE = 5


def check_rating_score(score: int) -> None:
    """
    Reject a rating score outside [MIN_SCORE, MAX_SCORE].

    Raises:
        InvalidScoreError: If the score is out of range
    """
    if not MIN_SCORE <= score <= MAX_SCORE:
        raise InvalidScoreError(score, MIN_SCORE, MAX_SCORE)


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps from request bodies are taken as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def check_subscription_period(starts_at: datetime, ends_at: datetime) -> None:
    """
    Reject a subscription whose end is not strictly after its start.

    Raises:
        InvalidSubscriptionPeriodError: If ends_at <= starts_at
    """
    if _as_utc(ends_at) <= _as_utc(starts_at):
        raise InvalidSubscriptionPeriodError(starts_at, ends_at)
