"""
Tests for step endpoints.

Steps inherit visibility and write permission from their recipe.
"""

from sqlalchemy import select

from shared.schema import recipes
from tests.conftest import POSTRE_GOURMET_ID, TACOS_ID


def modified_at(engine, recipe_id: int):
    with engine.connect() as conn:
        return conn.execute(
            select(recipes.c.modified_at).where(recipes.c.id == recipe_id)
        ).scalar_one()


class TestListSteps:
    def test_ordered_by_step_number(self, client, melani_headers):
        client.post(
            "/api/steps",
            json={"recipe_id": TACOS_ID, "step_number": 5, "description": "Servir."},
            headers=melani_headers,
        )
        client.post(
            "/api/steps",
            json={"recipe_id": TACOS_ID, "step_number": 4, "description": "Decorar."},
            headers=melani_headers,
        )
        response = client.get(f"/api/steps/recipe/{TACOS_ID}")
        assert response.status_code == 200
        assert [s["step_number"] for s in response.json()] == [1, 2, 3, 4, 5]

    def test_hidden_recipe_404(self, client, carlos_headers):
        response = client.get(f"/api/steps/recipe/{POSTRE_GOURMET_ID}", headers=carlos_headers)
        assert response.status_code == 404

    def test_author_sees_hidden_recipe_steps(self, client, fatima_headers):
        response = client.get(f"/api/steps/recipe/{POSTRE_GOURMET_ID}", headers=fatima_headers)
        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_step_of_hidden_recipe_404(self, client):
        response = client.get("/api/steps/4")
        assert response.status_code == 404
        assert response.json()["error"] == "STEP_NOT_FOUND"


class TestWriteSteps:
    def test_any_integer_step_number_accepted(self, client, melani_headers):
        response = client.post(
            "/api/steps",
            json={"recipe_id": TACOS_ID, "step_number": 0, "description": "Lavar la piña."},
            headers=melani_headers,
        )
        assert response.status_code == 201
        numbers = [s["step_number"] for s in client.get(f"/api/steps/recipe/{TACOS_ID}").json()]
        assert numbers == [0, 1, 2, 3]

    def test_create_touches_recipe(self, client, melani_headers, seeded_engine):
        before = modified_at(seeded_engine, TACOS_ID)
        response = client.post(
            "/api/steps",
            json={"recipe_id": TACOS_ID, "step_number": 4, "description": "Servir."},
            headers=melani_headers,
        )
        assert response.status_code == 201
        assert modified_at(seeded_engine, TACOS_ID) > before

    def test_stranger_cannot_add(self, client, carlos_headers):
        response = client.post(
            "/api/steps",
            json={"recipe_id": TACOS_ID, "step_number": 4, "description": "x"},
            headers=carlos_headers,
        )
        assert response.status_code == 403

    def test_collaborator_updates(self, client, fatima_headers):
        response = client.put(
            "/api/steps/1", json={"description": "Cortar fino."}, headers=fatima_headers
        )
        assert response.status_code == 200
        assert response.json()["description"] == "Cortar fino."
        assert response.json()["step_number"] == 1

    def test_delete(self, client, melani_headers):
        response = client.delete("/api/steps/3", headers=melani_headers)
        assert response.status_code == 200
        assert client.get("/api/steps/3").status_code == 404
