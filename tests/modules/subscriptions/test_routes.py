"""
Tests for subscription endpoints.
"""

from datetime import datetime, timedelta, timezone

from tests.conftest import CARLOS_ID, FATIMA_ID


def iso(value: datetime) -> str:
    return value.isoformat()


class TestCreateSubscription:
    def test_create(self, client, carlos_headers):
        start = datetime(2026, 1, 1, tzinfo=timezone.utc)
        response = client.post(
            "/api/subscriptions",
            json={"starts_at": iso(start), "ends_at": iso(start + timedelta(days=30)), "amount": "99.99"},
            headers=carlos_headers,
        )
        assert response.status_code == 201
        data = response.json()
        assert data["user_id"] == CARLOS_ID
        assert data["amount"] == "99.99"

    def test_start_defaults_to_now(self, client, carlos_headers):
        end = datetime.now(timezone.utc) + timedelta(days=30)
        response = client.post(
            "/api/subscriptions",
            json={"ends_at": iso(end), "amount": "10.00"},
            headers=carlos_headers,
        )
        assert response.status_code == 201

    def test_end_not_after_start_400(self, client, carlos_headers):
        start = datetime(2026, 1, 1, tzinfo=timezone.utc)
        for end in (start, start - timedelta(days=1)):
            response = client.post(
                "/api/subscriptions",
                json={"starts_at": iso(start), "ends_at": iso(end), "amount": "10.00"},
                headers=carlos_headers,
            )
            assert response.status_code == 400
            assert response.json()["error"] == "INVALID_SUBSCRIPTION_PERIOD"

    def test_negative_amount_400(self, client, carlos_headers):
        end = datetime.now(timezone.utc) + timedelta(days=30)
        response = client.post(
            "/api/subscriptions",
            json={"ends_at": iso(end), "amount": "-1"},
            headers=carlos_headers,
        )
        assert response.status_code == 400

    def test_does_not_change_tier(self, client, carlos_headers):
        end = datetime.now(timezone.utc) + timedelta(days=30)
        client.post(
            "/api/subscriptions",
            json={"ends_at": iso(end), "amount": "10.00"},
            headers=carlos_headers,
        )
        assert client.get("/api/users/me", headers=carlos_headers).json()["tier"] == "public"


class TestOwnerOnly:
    def test_owner_lists(self, client, fatima_headers):
        response = client.get(f"/api/subscriptions/user/{FATIMA_ID}", headers=fatima_headers)
        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_other_user_list_403(self, client, carlos_headers):
        response = client.get(f"/api/subscriptions/user/{FATIMA_ID}", headers=carlos_headers)
        assert response.status_code == 403
        assert response.json()["error"] == "SUBSCRIPTION_ACCESS_DENIED"

    def test_other_user_get_403(self, client, carlos_headers):
        assert client.get("/api/subscriptions/1", headers=carlos_headers).status_code == 403

    def test_update_checks_merged_period(self, client, fatima_headers):
        response = client.put(
            "/api/subscriptions/1",
            json={"ends_at": iso(datetime(2000, 1, 1, tzinfo=timezone.utc))},
            headers=fatima_headers,
        )
        assert response.status_code == 400

    def test_update_amount(self, client, fatima_headers):
        response = client.put("/api/subscriptions/1", json={"amount": "80"}, headers=fatima_headers)
        assert response.status_code == 200
        assert response.json()["amount"] == "80.00"

    def test_delete(self, client, fatima_headers):
        assert client.delete("/api/subscriptions/1", headers=fatima_headers).status_code == 200
        assert client.get("/api/subscriptions/1", headers=fatima_headers).status_code == 404
