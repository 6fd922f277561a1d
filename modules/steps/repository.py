"""
Step repository for database access.

Step writes bump the parent recipe's modified_at in the same transaction.
"""

from typing import Optional, Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import RowMapping

from modules.recipes.repository import touch_recipe
from shared.repository import BaseRepository
from shared.schema import steps
from .models import Step


class StepRepository(BaseRepository[Step]):
    """Repository for the steps table."""

    def list_by_recipe(self, recipe_id: int) -> list[Step]:
        """Steps of one recipe, by step number then insertion."""
        with self._connect() as conn:
            rows = conn.execute(
                select(steps)
                .where(steps.c.recipe_id == recipe_id)
                .order_by(steps.c.step_number, steps.c.id)
            ).mappings().all()
        return [self._map_to_step(r) for r in rows]

    def get(self, step_id: int) -> Optional[Step]:
        with self._connect() as conn:
            row = conn.execute(select(steps).where(steps.c.id == step_id)).mappings().first()
        return self._map_to_step(row) if row else None

    def create(self, data: dict[str, Any]) -> Step:
        with self._connect() as conn:
            result = conn.execute(insert(steps).values(**data))
            step_id = result.inserted_primary_key[0]
            touch_recipe(conn, data["recipe_id"])
        return Step(id=step_id, **data)

    def update(self, step: Step, changes: dict[str, Any]) -> Optional[Step]:
        """
        Apply a partial update.

        Returns:
            Updated Step, or None if the row disappeared.
        """
        with self._connect() as conn:
            result = conn.execute(update(steps).where(steps.c.id == step.id).values(**changes))
            if result.rowcount == 0:
                return None
            touch_recipe(conn, step.recipe_id)
            row = conn.execute(select(steps).where(steps.c.id == step.id)).mappings().one()
        return self._map_to_step(row)

    def delete(self, step: Step) -> bool:
        with self._connect() as conn:
            result = conn.execute(delete(steps).where(steps.c.id == step.id))
            if result.rowcount == 0:
                return False
            touch_recipe(conn, step.recipe_id)
        return True

    def _map_to_step(self, row: RowMapping) -> Step:
        return Step(
            id=row["id"],
            recipe_id=row["recipe_id"],
            step_number=row["step_number"],
            description=row["description"],
        )
