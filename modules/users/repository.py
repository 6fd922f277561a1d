"""
User repository for database access.

Encapsulates all queries against the users table. The password_hash column
is written here but never selected into a User model.
"""

from datetime import datetime, timezone
from typing import Optional, Any

from sqlalchemy import delete, exists, func, insert, select, update
from sqlalchemy.engine import RowMapping
from sqlalchemy.exc import IntegrityError

from shared.repository import BaseRepository
from shared.schema import recipes, users
from .exceptions import EmailAlreadyRegisteredError, UserHasRecipesError
from .models import User

# Every projection of a user leaves the hash out
_USER_COLUMNS = (
    users.c.id,
    users.c.name,
    users.c.email,
    users.c.tier,
    users.c.registered_at,
)


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    All methods return Pydantic models with proper mapping from database rows.
    """

    def list_all(self) -> list[User]:
        """List all users ordered by insertion."""
        with self._connect() as conn:
            rows = conn.execute(select(*_USER_COLUMNS).order_by(users.c.id)).mappings().all()
        return [self._map_to_user(r) for r in rows]

    def get(self, user_id: int) -> Optional[User]:
        """
        Get a user by ID.

        Returns:
            User, or None if no row matches.
        """
        with self._connect() as conn:
            row = conn.execute(
                select(*_USER_COLUMNS).where(users.c.id == user_id)
            ).mappings().first()
        return self._map_to_user(row) if row else None

    def email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether another account already uses an email, ignoring case."""
        condition = func.lower(users.c.email) == func.lower(email)
        if exclude_id is not None:
            condition = condition & (users.c.id != exclude_id)
        with self._connect() as conn:
            return bool(conn.execute(select(exists().where(condition))).scalar())

    def create(self, data: dict[str, Any]) -> User:
        """
        Create a user record.

        Args:
            data: Column values including password_hash (already hashed).

        Returns:
            Created User.

        Raises:
            EmailAlreadyRegisteredError: If the unique email constraint fires.
        """
        values = {"registered_at": datetime.now(timezone.utc), **data}
        try:
            with self._connect() as conn:
                result = conn.execute(insert(users).values(**values))
                user_id = result.inserted_primary_key[0]
                row = conn.execute(
                    select(*_USER_COLUMNS).where(users.c.id == user_id)
                ).mappings().one()
        except IntegrityError as e:
            raise EmailAlreadyRegisteredError(data.get("email", "")) from e
        return self._map_to_user(row)

    def update(self, user_id: int, changes: dict[str, Any]) -> Optional[User]:
        """
        Apply a partial update.

        Args:
            user_id: The user ID.
            changes: Column values to set. A password_hash key is only
                present when a new password was supplied.

        Returns:
            Updated User, or None if no row matches.
        """
        try:
            with self._connect() as conn:
                result = conn.execute(
                    update(users).where(users.c.id == user_id).values(**changes)
                )
                if result.rowcount == 0:
                    return None
                row = conn.execute(
                    select(*_USER_COLUMNS).where(users.c.id == user_id)
                ).mappings().one()
        except IntegrityError as e:
            raise EmailAlreadyRegisteredError(changes.get("email", "")) from e
        return self._map_to_user(row)

    def delete(self, user_id: int) -> bool:
        """
        Delete a user.

        Sessions, collaborations, ratings and subscriptions are removed via
        CASCADE. Recipes authored by the user block the delete.

        Returns:
            True if a row was deleted, False if none matched.

        Raises:
            UserHasRecipesError: If the user still authors recipes.
        """
        try:
            with self._connect() as conn:
                authored = conn.execute(
                    select(exists().where(recipes.c.author_id == user_id))
                ).scalar()
                if authored:
                    raise UserHasRecipesError(user_id)
                result = conn.execute(delete(users).where(users.c.id == user_id))
        except IntegrityError as e:
            raise UserHasRecipesError(user_id) from e
        return result.rowcount > 0

    def _map_to_user(self, row: RowMapping) -> User:
        """Map database row to User model."""
        return User(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            tier=row["tier"],
            registered_at=row["registered_at"],
        )
