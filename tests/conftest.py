"""
Shared test fixtures and utilities.

Tests run the real services against an in-memory SQLite database built
from shared.schema. The `seeded_engine` fixture loads a slice of the sample
data from migrations/002_seed_data.sql with the same IDs:

    categories:  1 Desayuno, 2 Almuerzo, 3 Cena, 4 Postre
    users:       1 Melani (public), 2 Fátima (premium), 3 Carlos (public)
    recipes:     1 Tacos al Pastor (public, author Melani, Fátima collaborates
                   with can_modify)
                 2 Postre Gourmet (private + premium, author Fátima)
    ingredients: 1 Carne de cerdo, 2 Piña, 3 Tortilla, 4 Azúcar, 5 Crema
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import insert

from api.app import create_app
from api.dependencies import ServiceContainer, reset_container, set_container
from modules.auth.passwords import PasswordHasher
from shared.config import Settings
from shared.database import create_db_engine
from shared.models import AuthenticatedUser, UserTier
from shared.schema import (
    categories,
    ingredients,
    metadata,
    ratings,
    recipe_authors,
    recipe_ingredients,
    recipes,
    steps,
    subscriptions,
    users,
)

TEST_PASSWORD = "password123"

MELANI_ID = 1
FATIMA_ID = 2
CARLOS_ID = 3
TACOS_ID = 1
POSTRE_GOURMET_ID = 2


def make_user(
    user_id: int,
    tier: UserTier = UserTier.PUBLIC,
    name: str = "Test User",
) -> AuthenticatedUser:
    """Build an AuthenticatedUser without going through login."""
    return AuthenticatedUser(
        id=user_id,
        name=name,
        email=f"user{user_id}@example.com",
        tier=tier,
        session_id=f"session-{user_id}",
    )


@pytest.fixture(scope="session")
def hasher() -> PasswordHasher:
    """Cheap bcrypt cost so tests stay fast."""
    return PasswordHasher(rounds=4)


@pytest.fixture(scope="session")
def password_hash(hasher: PasswordHasher) -> str:
    return hasher.hash(TEST_PASSWORD)


@pytest.fixture
def engine():
    """Empty in-memory database with the full schema."""
    engine = create_db_engine(Settings(_env_file=None, database_url="sqlite://"))
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def seeded_engine(engine, password_hash):
    """In-memory database with sample data loaded."""
    now = datetime.now(timezone.utc)
    with engine.begin() as conn:
        conn.execute(insert(categories), [
            {"name": "Desayuno"}, {"name": "Almuerzo"}, {"name": "Cena"}, {"name": "Postre"},
        ])
        conn.execute(insert(users), [
            {"name": "Melani", "email": "melani@example.com", "password_hash": password_hash, "tier": "public"},
            {"name": "Fátima", "email": "fatima@example.com", "password_hash": password_hash, "tier": "premium"},
            {"name": "Carlos", "email": "carlos@example.com", "password_hash": password_hash, "tier": "public"},
        ])
        conn.execute(insert(recipes), [
            {
                "title": "Tacos al Pastor",
                "description": "Receta tradicional con piña y carne marinada",
                "prep_time": 30, "cost": None,
                "is_public": True, "is_premium": False,
                "category_id": 3, "author_id": MELANI_ID,
            },
            {
                "title": "Postre Gourmet",
                "description": "Receta premium solo para usuarios especiales",
                "prep_time": 45, "cost": Decimal("50.00"),
                "is_public": False, "is_premium": True,
                "category_id": 4, "author_id": FATIMA_ID,
            },
        ])
        conn.execute(insert(ingredients), [
            {"name": "Carne de cerdo", "unit": "g"},
            {"name": "Piña", "unit": "rodajas"},
            {"name": "Tortilla", "unit": "pieza"},
            {"name": "Azúcar", "unit": "g"},
            {"name": "Crema", "unit": "ml"},
        ])
        conn.execute(insert(recipe_ingredients), [
            {"recipe_id": 1, "ingredient_id": 1, "quantity": Decimal("500")},
            {"recipe_id": 1, "ingredient_id": 2, "quantity": Decimal("3")},
            {"recipe_id": 1, "ingredient_id": 3, "quantity": Decimal("10")},
            {"recipe_id": 2, "ingredient_id": 4, "quantity": Decimal("200")},
            {"recipe_id": 2, "ingredient_id": 5, "quantity": Decimal("100")},
        ])
        conn.execute(insert(steps), [
            {"recipe_id": 1, "step_number": 1, "description": "Cortar la carne en trozos pequeños."},
            {"recipe_id": 1, "step_number": 2, "description": "Marinar con achiote y jugo de piña."},
            {"recipe_id": 1, "step_number": 3, "description": "Cocinar en sartén y servir con piña."},
            {"recipe_id": 2, "step_number": 1, "description": "Mezclar azúcar con crema."},
        ])
        conn.execute(insert(ratings), [
            {"recipe_id": 1, "user_id": FATIMA_ID, "score": 5, "comment": "¡Deliciosos tacos!",
             "rated_at": now - timedelta(days=1)},
            {"recipe_id": 2, "user_id": MELANI_ID, "score": 4, "comment": "Se ve bien",
             "rated_at": now - timedelta(days=1)},
        ])
        conn.execute(insert(recipe_authors), [
            {"recipe_id": 1, "user_id": FATIMA_ID, "role": "collaborator", "can_modify": True},
        ])
        conn.execute(insert(subscriptions), [
            {"user_id": FATIMA_ID, "starts_at": now, "ends_at": now + timedelta(days=30),
             "amount": Decimal("99.99")},
        ])
    return engine


@pytest.fixture
def container(seeded_engine, hasher):
    """Service container wired to the seeded database."""
    container = ServiceContainer(engine=seeded_engine, hasher=hasher)
    set_container(container)
    yield container
    reset_container()


@pytest.fixture
def client(container) -> TestClient:
    """Test client for a fresh app backed by the seeded database."""
    return TestClient(create_app())


@pytest.fixture
def login(client):
    """Log in a seeded user and return the Authorization headers."""

    def _login(email: str) -> dict[str, str]:
        response = client.post(
            "/api/sessions/login",
            json={"email": email, "password": TEST_PASSWORD},
        )
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['session_id']}"}

    return _login


@pytest.fixture
def melani_headers(login) -> dict[str, str]:
    return login("melani@example.com")


@pytest.fixture
def fatima_headers(login) -> dict[str, str]:
    return login("fatima@example.com")


@pytest.fixture
def carlos_headers(login) -> dict[str, str]:
    return login("carlos@example.com")
