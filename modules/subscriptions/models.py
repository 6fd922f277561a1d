"""
Subscriptions module data models.

A subscription is a paid period recorded against a user. Recording one
does not change the user's tier.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class SubscriptionCreate(BaseModel):
    """
    Request to record a subscription for the current user.

    starts_at defaults to now.
    """

    starts_at: Optional[datetime] = Field(None, description="Period start (default: now)")
    ends_at: datetime = Field(..., description="Period end, strictly after the start")
    amount: Decimal = Field(..., ge=0, max_digits=6, decimal_places=2, description="Amount paid")


class SubscriptionUpdate(BaseModel):
    starts_at: Optional[datetime] = None
    ends_at: Optional[datetime] = None
    amount: Optional[Decimal] = Field(None, ge=0, max_digits=6, decimal_places=2)


class Subscription(BaseModel):
    id: int = Field(..., description="Subscription ID")
    user_id: int = Field(..., description="Subscriber")
    starts_at: datetime
    ends_at: datetime
    amount: Decimal
