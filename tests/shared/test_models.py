"""Tests for shared/models.py."""

from typing import Optional

import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from shared.exceptions import ValidationError
from shared.models import AuthenticatedUser, UserTier, changed_fields


class TestAuthenticatedUser:
    def test_create(self):
        user = AuthenticatedUser(id=1, name="Ana", email="ana@example.com", session_id="abc")
        assert user.tier == UserTier.PUBLIC
        assert user.is_premium is False

    def test_premium(self):
        user = AuthenticatedUser(
            id=1, name="Ana", email="ana@example.com", tier="premium", session_id="abc"
        )
        assert user.tier == UserTier.PREMIUM
        assert user.is_premium is True

    def test_is_immutable(self):
        user = AuthenticatedUser(id=1, name="Ana", email="ana@example.com", session_id="abc")
        with pytest.raises(PydanticValidationError):
            user.id = 2

    def test_rejects_unknown_tier(self):
        with pytest.raises(PydanticValidationError):
            AuthenticatedUser(id=1, name="Ana", email="a@example.com", tier="gold", session_id="x")


class _Update(BaseModel):
    name: Optional[str] = None
    note: Optional[str] = None


class TestChangedFields:
    def test_skips_unset_fields(self):
        assert changed_fields(_Update(name="x")) == {"name": "x"}

    def test_explicit_null_ignored_unless_nullable(self):
        update = _Update(name="x", note=None)
        assert changed_fields(update) == {"name": "x"}
        assert changed_fields(update, nullable=("note",)) == {"name": "x", "note": None}

    def test_empty_update_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            changed_fields(_Update())
        assert exc_info.value.code == "EMPTY_UPDATE"
