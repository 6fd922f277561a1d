"""
Rating repository for database access.
"""

from datetime import datetime, timezone
from typing import Optional, Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import RowMapping
from sqlalchemy.exc import IntegrityError
from sqlalchemy.sql import Select

from shared.repository import BaseRepository
from shared.schema import ratings, users
from .models import Rating


class RatingRepository(BaseRepository[Rating]):
    """
    Repository for the ratings table.

    Projections join the rater's name.
    """

    def list_by_recipe(self, recipe_id: int) -> list[Rating]:
        """Ratings of one recipe, newest first."""
        with self._connect() as conn:
            rows = conn.execute(
                self._rating_query()
                .where(ratings.c.recipe_id == recipe_id)
                .order_by(ratings.c.rated_at.desc(), ratings.c.id.desc())
            ).mappings().all()
        return [self._map_to_rating(r) for r in rows]

    def get(self, rating_id: int) -> Optional[Rating]:
        with self._connect() as conn:
            row = conn.execute(
                self._rating_query().where(ratings.c.id == rating_id)
            ).mappings().first()
        return self._map_to_rating(row) if row else None

    def create(self, data: dict[str, Any]) -> Rating:
        values = {**data, "rated_at": datetime.now(timezone.utc)}
        try:
            with self._connect() as conn:
                result = conn.execute(insert(ratings).values(**values))
                rating_id = result.inserted_primary_key[0]
                row = conn.execute(
                    self._rating_query().where(ratings.c.id == rating_id)
                ).mappings().one()
        except IntegrityError as e:
            # score range and foreign keys are checked before the insert
            raise self._unclassified(e) from e
        return self._map_to_rating(row)

    def update(self, rating_id: int, changes: dict[str, Any]) -> Optional[Rating]:
        with self._connect() as conn:
            result = conn.execute(
                update(ratings).where(ratings.c.id == rating_id).values(**changes)
            )
            if result.rowcount == 0:
                return None
            row = conn.execute(
                self._rating_query().where(ratings.c.id == rating_id)
            ).mappings().one()
        return self._map_to_rating(row)

    def delete(self, rating_id: int) -> bool:
        with self._connect() as conn:
            result = conn.execute(delete(ratings).where(ratings.c.id == rating_id))
        return result.rowcount > 0

    def _rating_query(self) -> Select:
        return select(ratings, users.c.name.label("user_name")).select_from(
            ratings.join(users, ratings.c.user_id == users.c.id)
        )

    def _map_to_rating(self, row: RowMapping) -> Rating:
        return Rating(
            id=row["id"],
            recipe_id=row["recipe_id"],
            user_id=row["user_id"],
            user_name=row["user_name"],
            score=row["score"],
            comment=row["comment"],
            rated_at=row["rated_at"],
        )
