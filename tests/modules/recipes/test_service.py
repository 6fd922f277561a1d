"""Tests for RecipeService against the seeded in-memory database."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.recipes.exceptions import (
    AuthorAsCollaboratorError,
    DuplicateCollaboratorError,
    DuplicateIngredientLinkError,
    InvalidReferenceError,
    RecipeAccessDeniedError,
    RecipeNotFoundError,
)
from modules.recipes.models import (
    CollaboratorCreate,
    RecipeCreate,
    RecipeIngredientCreate,
    RecipeUpdate,
)
from modules.recipes.repository import RecipeRepository
from modules.recipes.service import RecipeService
from shared.exceptions import StorageError, ValidationError
from shared.models import UserTier
from tests.conftest import (
    CARLOS_ID,
    FATIMA_ID,
    MELANI_ID,
    POSTRE_GOURMET_ID,
    TACOS_ID,
    make_user,
)


@pytest.fixture
def repository(seeded_engine) -> RecipeRepository:
    return RecipeRepository(seeded_engine)


@pytest.fixture
def service(repository) -> RecipeService:
    return RecipeService(repository)


melani = make_user(MELANI_ID, name="Melani")
fatima = make_user(FATIMA_ID, UserTier.PREMIUM, name="Fátima")
carlos = make_user(CARLOS_ID, name="Carlos")


class TestListAndGet:
    def test_anonymous_sees_public_only(self, service):
        titles = [r.title for r in service.list_recipes(None)]
        assert titles == ["Tacos al Pastor"]

    def test_author_sees_private_recipe(self, service):
        titles = [r.title for r in service.list_recipes(fatima)]
        assert titles == ["Tacos al Pastor", "Postre Gourmet"]

    def test_projection_includes_names(self, service):
        recipe = service.get_recipe(TACOS_ID, None)
        assert recipe.category_name == "Cena"
        assert recipe.author_name == "Melani"
        assert recipe.cost is None

    def test_cost_is_decimal(self, service):
        recipe = service.get_recipe(POSTRE_GOURMET_ID, fatima)
        assert recipe.cost == Decimal("50.00")

    def test_hidden_recipe_is_not_found(self, service):
        with pytest.raises(RecipeNotFoundError):
            service.get_recipe(POSTRE_GOURMET_ID, carlos)

    def test_missing_recipe_is_not_found(self, service):
        with pytest.raises(RecipeNotFoundError):
            service.get_recipe(999, melani)


class TestSearch:
    def test_ingredient_match_returned_once(self, service):
        """'piñ' matches the Piña ingredient; the recipe appears once."""
        results = service.search_recipes("piñ", None)
        assert [r.title for r in results] == ["Tacos al Pastor"]

    def test_case_insensitive_title(self, service):
        assert [r.title for r in service.search_recipes("TACOS", None)] == ["Tacos al Pastor"]

    def test_title_and_ingredient_match_once(self, service, repository):
        repository.add_ingredient(TACOS_ID, {"ingredient_id": 5, "quantity": None})  # Crema
        results = service.search_recipes("a", melani)
        assert [r.id for r in results].count(TACOS_ID) == 1

    def test_hidden_recipes_dropped(self, service):
        assert service.search_recipes("azúcar", carlos) == []
        assert [r.id for r in service.search_recipes("azúcar", fatima)] == [POSTRE_GOURMET_ID]

    def test_wildcards_match_literally(self, service):
        assert service.search_recipes("%", None) == []

    def test_no_match(self, service):
        assert service.search_recipes("sushi", None) == []


class TestCreateUpdateDelete:
    def test_create_sets_author_from_session(self, service):
        recipe = service.create_recipe(
            RecipeCreate(title="Flan", category_id=4, cost=Decimal("12.50")), carlos
        )
        assert recipe.author_id == CARLOS_ID
        assert recipe.author_name == "Carlos"
        assert recipe.is_public is True
        assert recipe.is_premium is False
        assert recipe.cost == Decimal("12.50")

    def test_create_with_missing_category(self, service):
        with pytest.raises(InvalidReferenceError):
            service.create_recipe(RecipeCreate(title="Flan", category_id=99), carlos)

    def test_update_by_author_bumps_modified_at(self, service):
        before = service.get_recipe(TACOS_ID, melani)
        updated = service.update_recipe(TACOS_ID, RecipeUpdate(prep_time=40), melani)
        assert updated.prep_time == 40
        assert updated.title == before.title
        assert updated.modified_at >= before.modified_at

    def test_update_by_collaborator_with_permission(self, service):
        updated = service.update_recipe(TACOS_ID, RecipeUpdate(title="Tacos de Pastor"), fatima)
        assert updated.title == "Tacos de Pastor"

    def test_update_refused_for_stranger(self, service):
        with pytest.raises(RecipeAccessDeniedError):
            service.update_recipe(TACOS_ID, RecipeUpdate(title="Mine"), carlos)
        assert service.get_recipe(TACOS_ID, None).title == "Tacos al Pastor"

    def test_update_clears_nullable_field(self, service):
        updated = service.update_recipe(POSTRE_GOURMET_ID, RecipeUpdate(cost=None), fatima)
        assert updated.cost is None

    def test_empty_update_rejected(self, service):
        with pytest.raises(ValidationError):
            service.update_recipe(TACOS_ID, RecipeUpdate(), melani)

    def test_collaborator_cannot_delete(self, service):
        with pytest.raises(RecipeAccessDeniedError):
            service.delete_recipe(TACOS_ID, fatima)

    def test_author_deletes_with_children(self, service, repository):
        service.delete_recipe(TACOS_ID, melani)
        assert repository.get(TACOS_ID) is None
        assert repository.list_ingredients(TACOS_ID) == []
        assert repository.list_collaborators(TACOS_ID) == []


class TestCollaborators:
    def test_duplicate_pair_conflicts_and_keeps_first(self, service, repository):
        first = service.add_collaborator(
            POSTRE_GOURMET_ID, CollaboratorCreate(user_id=CARLOS_ID, can_modify=True), fatima
        )
        with pytest.raises(DuplicateCollaboratorError):
            service.add_collaborator(
                POSTRE_GOURMET_ID, CollaboratorCreate(user_id=CARLOS_ID, role="guest"), fatima
            )
        assert repository.list_collaborators(POSTRE_GOURMET_ID) == [first]
        assert first.can_modify is True

    def test_secondary_author_can_view_private_recipe(self, service):
        service.add_collaborator(POSTRE_GOURMET_ID, CollaboratorCreate(user_id=CARLOS_ID), fatima)
        assert service.get_recipe(POSTRE_GOURMET_ID, carlos).id == POSTRE_GOURMET_ID

    def test_only_author_manages_collaborators(self, service):
        with pytest.raises(RecipeAccessDeniedError):
            service.add_collaborator(TACOS_ID, CollaboratorCreate(user_id=CARLOS_ID), fatima)

    def test_author_cannot_be_collaborator(self, service):
        with pytest.raises(AuthorAsCollaboratorError):
            service.add_collaborator(TACOS_ID, CollaboratorCreate(user_id=MELANI_ID), melani)

    def test_unknown_user(self, service):
        with pytest.raises(InvalidReferenceError):
            service.add_collaborator(TACOS_ID, CollaboratorCreate(user_id=99), melani)


class TestIngredientLinks:
    def test_list_with_units(self, service):
        links = service.list_recipe_ingredients(TACOS_ID, None)
        assert [(l.name, l.unit, l.quantity) for l in links] == [
            ("Carne de cerdo", "g", Decimal("500")),
            ("Piña", "rodajas", Decimal("3")),
            ("Tortilla", "pieza", Decimal("10")),
        ]

    def test_duplicate_link_conflicts(self, service):
        with pytest.raises(DuplicateIngredientLinkError):
            service.add_recipe_ingredient(TACOS_ID, RecipeIngredientCreate(ingredient_id=2), melani)

    def test_link_bumps_modified_at(self, service):
        before = service.get_recipe(TACOS_ID, melani).modified_at
        service.add_recipe_ingredient(
            TACOS_ID, RecipeIngredientCreate(ingredient_id=4, quantity=Decimal("1.5")), melani
        )
        assert service.get_recipe(TACOS_ID, melani).modified_at > before

    def test_stranger_cannot_link(self, service):
        with pytest.raises(RecipeAccessDeniedError):
            service.add_recipe_ingredient(TACOS_ID, RecipeIngredientCreate(ingredient_id=4), carlos)


class TestStorageFailure:
    def test_storage_error_propagates(self):
        repository = MagicMock(spec=RecipeRepository)
        repository.list_all.side_effect = StorageError()
        with pytest.raises(StorageError):
            RecipeService(repository).list_recipes(None)
