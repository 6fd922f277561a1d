"""
Subscriptions module exceptions.
"""

from shared.exceptions import AuthorizationError, NotFoundError


class SubscriptionNotFoundError(NotFoundError):
    """Raised when a subscription doesn't exist."""

    def __init__(self, subscription_id: int):
        super().__init__(
            f"Subscription not found: {subscription_id}",
            code="SUBSCRIPTION_NOT_FOUND",
            details={"subscription_id": subscription_id},
        )
        self.subscription_id = subscription_id


class SubscriptionAccessDeniedError(AuthorizationError):
    """Raised when a user touches another user's subscriptions."""

    def __init__(self, owner_id: int, actor_id: int):
        super().__init__(
            "Subscriptions are only visible to their owner",
            code="SUBSCRIPTION_ACCESS_DENIED",
        )
        self.owner_id = owner_id
        self.actor_id = actor_id
