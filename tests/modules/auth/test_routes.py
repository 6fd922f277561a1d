"""
Tests for session API endpoints.
"""

from tests.conftest import MELANI_ID, TEST_PASSWORD


class TestLogin:
    """Tests for POST /api/sessions/login"""

    def test_success(self, client):
        response = client.post(
            "/api/sessions/login",
            json={"email": "melani@example.com", "password": TEST_PASSWORD},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["user_id"] == MELANI_ID
        assert data["session_id"]

    def test_wrong_password(self, client):
        response = client.post(
            "/api/sessions/login",
            json={"email": "melani@example.com", "password": "wrong"},
        )
        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_CREDENTIALS"
        assert response.headers["www-authenticate"] == "Bearer"

    def test_unknown_email_same_body(self, client):
        wrong_password = client.post(
            "/api/sessions/login",
            json={"email": "melani@example.com", "password": "wrong"},
        )
        unknown_email = client.post(
            "/api/sessions/login",
            json={"email": "nobody@example.com", "password": "wrong"},
        )
        assert unknown_email.status_code == 401
        assert unknown_email.json() == wrong_password.json()

    def test_missing_password_400(self, client):
        response = client.post("/api/sessions/login", json={"email": "melani@example.com"})
        assert response.status_code == 400


class TestLogout:
    """Tests for POST /api/sessions/logout"""

    def test_logout_then_session_rejected(self, client, melani_headers):
        session_id = melani_headers["Authorization"].removeprefix("Bearer ")
        response = client.post("/api/sessions/logout", json={"session_id": session_id})
        assert response.status_code == 200
        assert response.json() == {"message": "Session closed"}

        response = client.get("/api/users/me", headers=melani_headers)
        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_SESSION"

    def test_double_logout_404(self, client, melani_headers):
        session_id = melani_headers["Authorization"].removeprefix("Bearer ")
        client.post("/api/sessions/logout", json={"session_id": session_id})
        response = client.post("/api/sessions/logout", json={"session_id": session_id})
        assert response.status_code == 404
        assert response.json()["error"] == "SESSION_NOT_FOUND"
