"""
Tests for session authentication middleware.
"""

from typing import Optional

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from api.errors import register_error_handlers
from api.middleware.auth import get_current_user, get_optional_user
from shared.models import AuthenticatedUser
from tests.conftest import MELANI_ID


@pytest.fixture
def probe(container) -> TestClient:
    """App exposing one required and one optional endpoint."""
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/required")
    def required(user: AuthenticatedUser = Depends(get_current_user)):
        return {"user_id": user.id, "tier": user.tier.value}

    @app.get("/optional")
    def optional(user: Optional[AuthenticatedUser] = Depends(get_optional_user)):
        return {"user_id": user.id if user else None}

    return TestClient(app)


def session_of(headers: dict[str, str]) -> str:
    return headers["Authorization"].removeprefix("Bearer ")


class TestGetCurrentUser:
    def test_active_session(self, probe, melani_headers):
        response = probe.get("/required", headers=melani_headers)
        assert response.status_code == 200
        assert response.json() == {"user_id": MELANI_ID, "tier": "public"}

    def test_missing_header(self, probe):
        response = probe.get("/required")
        assert response.status_code == 401
        assert response.json()["error"] == "MISSING_SESSION"
        assert response.headers["www-authenticate"] == "Bearer"

    def test_non_bearer_scheme(self, probe):
        response = probe.get("/required", headers={"Authorization": "Basic abc"})
        assert response.status_code == 401

    def test_unknown_session(self, probe):
        response = probe.get("/required", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_SESSION"

    def test_closed_session(self, probe, client, melani_headers):
        client.post("/api/sessions/logout", json={"session_id": session_of(melani_headers)})
        response = probe.get("/required", headers=melani_headers)
        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_SESSION"


class TestGetOptionalUser:
    def test_anonymous(self, probe):
        assert probe.get("/optional").json() == {"user_id": None}

    def test_active_session(self, probe, melani_headers):
        assert probe.get("/optional", headers=melani_headers).json() == {"user_id": MELANI_ID}

    def test_closed_session_is_anonymous(self, probe, client, melani_headers):
        client.post("/api/sessions/logout", json={"session_id": session_of(melani_headers)})
        response = probe.get("/optional", headers=melani_headers)
        assert response.status_code == 200
        assert response.json() == {"user_id": None}
