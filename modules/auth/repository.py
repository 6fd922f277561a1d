"""
Session repository for database access.

Encapsulates queries for the sessions table and the credential lookup used
by login.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import func, insert, select, update
from sqlalchemy.engine import RowMapping

from shared.models import AuthenticatedUser
from shared.repository import BaseRepository
from shared.schema import sessions, users
from .models import Session, UserCredentials


class SessionRepository(BaseRepository[Session]):
    """
    Repository for session data access.

    Closing a session is a single conditional UPDATE, so an already closed
    session is never rewritten.
    """

    def find_credentials(self, email: str) -> Optional[UserCredentials]:
        """
        Look up the stored hash for an email.

        Returns:
            UserCredentials, or None if no account uses the email.
        """
        with self._connect() as conn:
            row = conn.execute(
                select(users.c.id, users.c.password_hash).where(
                    func.lower(users.c.email) == func.lower(email)
                )
            ).mappings().first()
        if row is None:
            return None
        return UserCredentials(user_id=row["id"], password_hash=row["password_hash"])

    def create(self, session_id: str, user_id: int) -> Session:
        """Insert a new Active session."""
        now = datetime.now(timezone.utc)
        with self._connect() as conn:
            conn.execute(
                insert(sessions).values(id=session_id, user_id=user_id, started_at=now)
            )
        return Session(id=session_id, user_id=user_id, started_at=now)

    def get(self, session_id: str) -> Optional[Session]:
        """
        Get a session by ID.

        Returns:
            Session, or None if not found.
        """
        with self._connect() as conn:
            row = conn.execute(
                select(sessions).where(sessions.c.id == session_id)
            ).mappings().first()
        return self._map_to_session(row) if row else None

    def close(self, session_id: str) -> Optional[Session]:
        """
        Stamp the end time of an Active session.

        Returns:
            The closed Session, or None if the session is unknown or was
            already closed.
        """
        with self._connect() as conn:
            result = conn.execute(
                update(sessions)
                .where(sessions.c.id == session_id, sessions.c.ended_at.is_(None))
                .values(ended_at=datetime.now(timezone.utc))
            )
            if result.rowcount == 0:
                return None
            row = conn.execute(
                select(sessions).where(sessions.c.id == session_id)
            ).mappings().one()
        return self._map_to_session(row)

    def get_active_user(self, session_id: str) -> Optional[AuthenticatedUser]:
        """
        Resolve the user behind an Active session.

        Returns:
            AuthenticatedUser, or None if the session is unknown or closed.
        """
        query = (
            select(users.c.id, users.c.name, users.c.email, users.c.tier)
            .select_from(sessions.join(users, sessions.c.user_id == users.c.id))
            .where(sessions.c.id == session_id, sessions.c.ended_at.is_(None))
        )
        with self._connect() as conn:
            row = conn.execute(query).mappings().first()
        if row is None:
            return None
        return AuthenticatedUser(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            tier=row["tier"],
            session_id=session_id,
        )

    def _map_to_session(self, row: RowMapping) -> Session:
        """Map database row to Session model."""
        return Session(
            id=row["id"],
            user_id=row["user_id"],
            started_at=row["started_at"],
            ended_at=row["ended_at"],
        )
