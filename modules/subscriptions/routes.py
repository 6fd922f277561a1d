"""
Subscription API endpoints.

Every endpoint requires a session and only reaches the caller's own
subscriptions.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_subscription_service
from api.models import MessageResponse
from shared.models import AuthenticatedUser

from .interfaces import ISubscriptionService
from .models import Subscription, SubscriptionCreate, SubscriptionUpdate

router = APIRouter()


@router.get("/user/{user_id}", response_model=list[Subscription])
def list_subscriptions(
    user_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISubscriptionService = Depends(get_subscription_service),
) -> list[Subscription]:
    return service.list_subscriptions(user_id, user)


@router.get("/{subscription_id}", response_model=Subscription)
def get_subscription(
    subscription_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISubscriptionService = Depends(get_subscription_service),
) -> Subscription:
    return service.get_subscription(subscription_id, user)


@router.post("", response_model=Subscription, status_code=201)
def create_subscription(
    request: SubscriptionCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISubscriptionService = Depends(get_subscription_service),
) -> Subscription:
    """
    Record a subscription for the current user.

    Returns 400 if ends_at is not after starts_at.
    """
    return service.create_subscription(request, user)


@router.put("/{subscription_id}", response_model=Subscription)
def update_subscription(
    subscription_id: int,
    request: SubscriptionUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISubscriptionService = Depends(get_subscription_service),
) -> Subscription:
    return service.update_subscription(subscription_id, request, user)


@router.delete("/{subscription_id}", response_model=MessageResponse)
def delete_subscription(
    subscription_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISubscriptionService = Depends(get_subscription_service),
) -> MessageResponse:
    service.delete_subscription(subscription_id, user)
    return MessageResponse(message="Subscription deleted")
