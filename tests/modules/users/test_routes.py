"""
Tests for user API endpoints.
"""

from tests.conftest import CARLOS_ID, FATIMA_ID, MELANI_ID


class TestReadUsers:
    def test_list_hides_password_hash(self, client):
        response = client.get("/api/users")
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 3
        for user in data:
            assert "password_hash" not in user
            assert "password" not in user

    def test_get_user(self, client):
        response = client.get(f"/api/users/{FATIMA_ID}")
        assert response.status_code == 200
        assert response.json()["tier"] == "premium"

    def test_get_missing_user(self, client):
        response = client.get("/api/users/999")
        assert response.status_code == 404
        assert response.json()["error"] == "USER_NOT_FOUND"

    def test_me(self, client, carlos_headers):
        response = client.get("/api/users/me", headers=carlos_headers)
        assert response.status_code == 200
        assert response.json()["id"] == CARLOS_ID

    def test_me_requires_session(self, client):
        response = client.get("/api/users/me")
        assert response.status_code == 401


class TestRegister:
    """Tests for POST /api/users"""

    def test_register(self, client):
        response = client.post(
            "/api/users",
            json={"name": "Ana", "email": "ana@example.com", "password": "pw"},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["tier"] == "public"
        assert "password_hash" not in data

        login = client.post("/api/sessions/login", json={"email": "ana@example.com", "password": "pw"})
        assert login.status_code == 201

    def test_login_with_registered_mixed_case_email(self, client):
        response = client.post(
            "/api/users",
            json={"name": "Ana", "email": "Ana@Example.COM", "password": "pw"},
        )
        assert response.status_code == 201

        for email in ("Ana@Example.COM", "ana@example.com"):
            login = client.post("/api/sessions/login", json={"email": email, "password": "pw"})
            assert login.status_code == 201, email
            assert login.json()["user_id"] == response.json()["id"]

    def test_duplicate_email_differing_in_case_409(self, client):
        response = client.post(
            "/api/users",
            json={"name": "Otra", "email": "Melani@Example.com", "password": "pw"},
        )
        assert response.status_code == 409
        assert response.json()["error"] == "EMAIL_ALREADY_REGISTERED"

    def test_duplicate_email_409(self, client):
        response = client.post(
            "/api/users",
            json={"name": "Otra", "email": "melani@example.com", "password": "pw"},
        )
        assert response.status_code == 409
        assert response.json()["error"] == "EMAIL_ALREADY_REGISTERED"

    def test_invalid_email_400(self, client):
        response = client.post(
            "/api/users",
            json={"name": "Ana", "email": "not-an-email", "password": "pw"},
        )
        assert response.status_code == 400

    def test_unknown_tier_400(self, client):
        response = client.post(
            "/api/users",
            json={"name": "Ana", "email": "ana@example.com", "password": "pw", "tier": "gold"},
        )
        assert response.status_code == 400


class TestUpdateAndDelete:
    def test_update_self(self, client, carlos_headers):
        response = client.put(
            f"/api/users/{CARLOS_ID}", json={"name": "Carlitos"}, headers=carlos_headers
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Carlitos"

    def test_update_other_403(self, client, carlos_headers):
        response = client.put(
            f"/api/users/{MELANI_ID}", json={"name": "x"}, headers=carlos_headers
        )
        assert response.status_code == 403

    def test_delete_author_409(self, client, melani_headers):
        response = client.delete(f"/api/users/{MELANI_ID}", headers=melani_headers)
        assert response.status_code == 409
        assert response.json()["error"] == "USER_HAS_RECIPES"

    def test_delete_self(self, client, carlos_headers):
        response = client.delete(f"/api/users/{CARLOS_ID}", headers=carlos_headers)
        assert response.status_code == 200
        assert client.get(f"/api/users/{CARLOS_ID}").status_code == 404
        # The session went with the account
        assert client.get("/api/users/me", headers=carlos_headers).status_code == 401
