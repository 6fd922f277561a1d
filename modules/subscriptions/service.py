"""
Subscription service implementation.

Records paid periods. Whether a user is premium is decided by the user's
tier column alone; recording or removing a subscription never changes it.
"""

import logging
from datetime import datetime, timezone

from modules.integrity import check_subscription_period
from shared.models import AuthenticatedUser, changed_fields

from .interfaces import ISubscriptionService
from .models import Subscription, SubscriptionCreate, SubscriptionUpdate
from .repository import SubscriptionRepository
from .exceptions import SubscriptionAccessDeniedError, SubscriptionNotFoundError

logger = logging.getLogger(__name__)


class SubscriptionService(ISubscriptionService):
    """
    Owner-only subscription records.

    Implements ISubscriptionService protocol.
    """

    def __init__(self, repository: SubscriptionRepository):
        self._repo = repository

    def list_subscriptions(self, user_id: int, actor: AuthenticatedUser) -> list[Subscription]:
        self._ensure_owner(user_id, actor)
        return self._repo.list_by_user(user_id)

    def get_subscription(self, subscription_id: int, actor: AuthenticatedUser) -> Subscription:
        return self._load_own(subscription_id, actor)

    def create_subscription(self, request: SubscriptionCreate, actor: AuthenticatedUser) -> Subscription:
        starts_at = request.starts_at or datetime.now(timezone.utc)
        check_subscription_period(starts_at, request.ends_at)

        subscription = self._repo.create({
            "user_id": actor.id,
            "starts_at": starts_at,
            "ends_at": request.ends_at,
            "amount": request.amount,
        })
        logger.info("Recorded subscription %s for user %s", subscription.id, actor.id)
        return subscription

    def update_subscription(
        self, subscription_id: int, request: SubscriptionUpdate, actor: AuthenticatedUser
    ) -> Subscription:
        changes = changed_fields(request)
        current = self._load_own(subscription_id, actor)
        check_subscription_period(
            changes.get("starts_at", current.starts_at),
            changes.get("ends_at", current.ends_at),
        )
        subscription = self._repo.update(subscription_id, changes)
        if subscription is None:
            raise SubscriptionNotFoundError(subscription_id)
        return subscription

    def delete_subscription(self, subscription_id: int, actor: AuthenticatedUser) -> None:
        self._load_own(subscription_id, actor)
        if not self._repo.delete(subscription_id):
            raise SubscriptionNotFoundError(subscription_id)
        logger.info("Deleted subscription %s", subscription_id)

    def _load_own(self, subscription_id: int, actor: AuthenticatedUser) -> Subscription:
        subscription = self._repo.get(subscription_id)
        if subscription is None:
            raise SubscriptionNotFoundError(subscription_id)
        self._ensure_owner(subscription.user_id, actor)
        return subscription

    def _ensure_owner(self, owner_id: int, actor: AuthenticatedUser) -> None:
        if owner_id != actor.id:
            logger.info("User %s refused access to subscriptions of %s", actor.id, owner_id)
            raise SubscriptionAccessDeniedError(owner_id, actor.id)
