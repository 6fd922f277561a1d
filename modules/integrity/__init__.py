"""
Referential integrity rules.

Cross-entity checks enforced before a write reaches the store, independent
of whatever constraints the storage engine declares natively.

Public API:
- check_rating_score: 1 <= score <= 5
- check_subscription_period: ends_at strictly after starts_at
- Integrity exceptions: InvalidScoreError, InvalidSubscriptionPeriodError
"""

from .rules import (
    MIN_SCORE,
    MAX_SCORE,
    check_rating_score,
    check_subscription_period,
)
from .exceptions import InvalidScoreError, InvalidSubscriptionPeriodError

__all__ = [
    "MIN_SCORE",
    "MAX_SCORE",
    "check_rating_score",
    "check_subscription_period",
    "InvalidScoreError",
    "InvalidSubscriptionPeriodError",
]
