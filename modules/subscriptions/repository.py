"""
Subscription repository for database access.
"""

from typing import Optional, Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import RowMapping

from shared.repository import BaseRepository
from shared.schema import subscriptions
from .models import Subscription


class SubscriptionRepository(BaseRepository[Subscription]):
    """Repository for the subscriptions table."""

    def list_by_user(self, user_id: int) -> list[Subscription]:
        with self._connect() as conn:
            rows = conn.execute(
                select(subscriptions)
                .where(subscriptions.c.user_id == user_id)
                .order_by(subscriptions.c.id)
            ).mappings().all()
        return [self._map_to_subscription(r) for r in rows]

    def get(self, subscription_id: int) -> Optional[Subscription]:
        with self._connect() as conn:
            row = conn.execute(
                select(subscriptions).where(subscriptions.c.id == subscription_id)
            ).mappings().first()
        return self._map_to_subscription(row) if row else None

    def create(self, data: dict[str, Any]) -> Subscription:
        with self._connect() as conn:
            result = conn.execute(insert(subscriptions).values(**data))
            subscription_id = result.inserted_primary_key[0]
            row = conn.execute(
                select(subscriptions).where(subscriptions.c.id == subscription_id)
            ).mappings().one()
        return self._map_to_subscription(row)

    def update(self, subscription_id: int, changes: dict[str, Any]) -> Optional[Subscription]:
        with self._connect() as conn:
            result = conn.execute(
                update(subscriptions)
                .where(subscriptions.c.id == subscription_id)
                .values(**changes)
            )
            if result.rowcount == 0:
                return None
            row = conn.execute(
                select(subscriptions).where(subscriptions.c.id == subscription_id)
            ).mappings().one()
        return self._map_to_subscription(row)

    def delete(self, subscription_id: int) -> bool:
        with self._connect() as conn:
            result = conn.execute(
                delete(subscriptions).where(subscriptions.c.id == subscription_id)
            )
        return result.rowcount > 0

    def _map_to_subscription(self, row: RowMapping) -> Subscription:
        return Subscription(
            id=row["id"],
            user_id=row["user_id"],
            starts_at=row["starts_at"],
            ends_at=row["ends_at"],
            amount=row["amount"],
        )
