"""
Subscriptions module.

Paid subscription periods recorded per user.

Public API:
- ISubscriptionService: Interface for subscription records
- Subscription, SubscriptionCreate, SubscriptionUpdate: Models
- Subscription exceptions: SubscriptionNotFoundError, SubscriptionAccessDeniedError
"""

from .interfaces import ISubscriptionService
from .models import Subscription, SubscriptionCreate, SubscriptionUpdate
from .exceptions import SubscriptionNotFoundError, SubscriptionAccessDeniedError

__all__ = [
    "ISubscriptionService",
    "Subscription",
    "SubscriptionCreate",
    "SubscriptionUpdate",
    "SubscriptionNotFoundError",
    "SubscriptionAccessDeniedError",
]
