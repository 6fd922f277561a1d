"""
Subscriptions module interface definitions.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import Subscription, SubscriptionCreate, SubscriptionUpdate


@runtime_checkable
class ISubscriptionService(Protocol):
    """
    Interface for subscription records.

    Every operation is limited to the acting user's own subscriptions.
    """

    def list_subscriptions(self, user_id: int, actor: AuthenticatedUser) -> list[Subscription]:
        """
        Raises:
            SubscriptionAccessDeniedError: If user_id is not the actor
        """
        ...

    def get_subscription(self, subscription_id: int, actor: AuthenticatedUser) -> Subscription:
        ...

    def create_subscription(self, request: SubscriptionCreate, actor: AuthenticatedUser) -> Subscription:
        """
        Raises:
            InvalidSubscriptionPeriodError: If ends_at is not after starts_at
        """
        ...

    def update_subscription(
        self, subscription_id: int, request: SubscriptionUpdate, actor: AuthenticatedUser
    ) -> Subscription:
        """
        The period rule is checked against the merged start and end.
        """
        ...

    def delete_subscription(self, subscription_id: int, actor: AuthenticatedUser) -> None:
        ...
