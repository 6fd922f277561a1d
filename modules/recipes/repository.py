"""
Recipe repository for database access.

Covers recipes and the two tables that hang off them: secondary authors
(recipe_authors) and ingredient links (recipe_ingredients). Every write to
a child table also bumps the parent recipe's modified_at in the same
transaction.
"""

from collections import defaultdict
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from sqlalchemy import and_, delete, exists, insert, or_, select, update
from sqlalchemy.engine import Connection, RowMapping
from sqlalchemy.exc import IntegrityError
from sqlalchemy.sql import Select

from shared.repository import BaseRepository
from shared.schema import (
    categories,
    ingredients,
    recipe_authors,
    recipe_ingredients,
    recipes,
    users,
)
from .exceptions import (
    DuplicateCollaboratorError,
    DuplicateIngredientLinkError,
    InvalidReferenceError,
)
from .models import Collaborator, Recipe, RecipeIngredient


def touch_recipe(conn: Connection, recipe_id: int) -> None:
    """Set a recipe's modified_at to now within the caller's transaction."""
    conn.execute(
        update(recipes)
        .where(recipes.c.id == recipe_id)
        .values(modified_at=datetime.now(timezone.utc))
    )


def _row_exists(conn: Connection, table, row_id: int) -> bool:
    return bool(conn.execute(select(exists().where(table.c.id == row_id))).scalar())


class RecipeRepository(BaseRepository[Recipe]):
    """
    Repository for recipe data access.

    Projections always join the category and author names. No authorization
    happens here; RecipeService filters results through the policy.
    """

    # Recipes

    def list_all(self) -> list[Recipe]:
        """List all recipes ordered by insertion."""
        with self._connect() as conn:
            rows = conn.execute(self._recipe_query().order_by(recipes.c.id)).mappings().all()
        return [self._map_to_recipe(r) for r in rows]

    def get(self, recipe_id: int) -> Optional[Recipe]:
        with self._connect() as conn:
            row = conn.execute(
                self._recipe_query().where(recipes.c.id == recipe_id)
            ).mappings().first()
        return self._map_to_recipe(row) if row else None

    def search(self, term: str) -> list[Recipe]:
        """
        Case-insensitive substring search over titles and ingredient names.

        A recipe matching on several ingredients (or on title and
        ingredients) is returned once. Wildcard characters in the term
        match literally.
        """
        by_ingredient = (
            select(recipe_ingredients.c.recipe_id)
            .join(ingredients, recipe_ingredients.c.ingredient_id == ingredients.c.id)
            .where(ingredients.c.name.icontains(term, autoescape=True))
        )
        query = (
            self._recipe_query()
            .where(
                or_(
                    recipes.c.title.icontains(term, autoescape=True),
                    recipes.c.id.in_(by_ingredient),
                )
            )
            .order_by(recipes.c.id)
        )
        with self._connect() as conn:
            rows = conn.execute(query).mappings().all()
        return [self._map_to_recipe(r) for r in rows]

    def create(self, data: dict[str, Any]) -> Recipe:
        """
        Create a recipe.

        Args:
            data: Column values including author_id.

        Raises:
            InvalidReferenceError: If the category or author doesn't exist.
        """
        now = datetime.now(timezone.utc)
        values = {**data, "created_at": now, "modified_at": now}
        with self._connect() as conn:
            self._check_references(conn, values)
            result = conn.execute(insert(recipes).values(**values))
            recipe_id = result.inserted_primary_key[0]
            row = conn.execute(
                self._recipe_query().where(recipes.c.id == recipe_id)
            ).mappings().one()
        return self._map_to_recipe(row)

    def update(self, recipe_id: int, changes: dict[str, Any]) -> Optional[Recipe]:
        """
        Apply a partial update and bump modified_at.

        Returns:
            Updated Recipe, or None if no row matches.
        """
        values = {**changes, "modified_at": datetime.now(timezone.utc)}
        with self._connect() as conn:
            self._check_references(conn, values)
            result = conn.execute(
                update(recipes).where(recipes.c.id == recipe_id).values(**values)
            )
            if result.rowcount == 0:
                return None
            row = conn.execute(
                self._recipe_query().where(recipes.c.id == recipe_id)
            ).mappings().one()
        return self._map_to_recipe(row)

    def delete(self, recipe_id: int) -> bool:
        """
        Delete a recipe.

        Secondary authors, ingredient links, steps and ratings are removed
        via CASCADE.
        """
        with self._connect() as conn:
            result = conn.execute(delete(recipes).where(recipes.c.id == recipe_id))
        return result.rowcount > 0

    # Secondary authors

    def list_collaborators(self, recipe_id: int) -> list[Collaborator]:
        return self.collaborators_for([recipe_id]).get(recipe_id, [])

    def collaborators_for(self, recipe_ids: Iterable[int]) -> dict[int, list[Collaborator]]:
        """Load the secondary authors of several recipes, keyed by recipe ID."""
        ids = list(recipe_ids)
        grouped: dict[int, list[Collaborator]] = defaultdict(list)
        if not ids:
            return grouped
        with self._connect() as conn:
            rows = conn.execute(
                self._collaborator_query()
                .where(recipe_authors.c.recipe_id.in_(ids))
                .order_by(recipe_authors.c.recipe_id, recipe_authors.c.invited_at, recipe_authors.c.user_id)
            ).mappings().all()
        for row in rows:
            grouped[row["recipe_id"]].append(self._map_to_collaborator(row))
        return grouped

    def add_collaborator(self, recipe_id: int, data: dict[str, Any]) -> Collaborator:
        """
        Add a secondary author.

        Raises:
            InvalidReferenceError: If the user doesn't exist.
            DuplicateCollaboratorError: If the pair already exists.
        """
        user_id = data["user_id"]
        values = {**data, "recipe_id": recipe_id, "invited_at": datetime.now(timezone.utc)}
        key = and_(recipe_authors.c.recipe_id == recipe_id, recipe_authors.c.user_id == user_id)
        try:
            with self._connect() as conn:
                if not _row_exists(conn, users, user_id):
                    raise InvalidReferenceError("user_id", user_id)
                if conn.execute(select(exists().where(key))).scalar():
                    raise DuplicateCollaboratorError(recipe_id, user_id)
                conn.execute(insert(recipe_authors).values(**values))
                touch_recipe(conn, recipe_id)
                row = conn.execute(self._collaborator_query().where(key)).mappings().one()
        except IntegrityError as e:
            raise DuplicateCollaboratorError(recipe_id, user_id) from e
        return self._map_to_collaborator(row)

    def update_collaborator(
        self, recipe_id: int, user_id: int, changes: dict[str, Any]
    ) -> Optional[Collaborator]:
        key = and_(recipe_authors.c.recipe_id == recipe_id, recipe_authors.c.user_id == user_id)
        with self._connect() as conn:
            result = conn.execute(update(recipe_authors).where(key).values(**changes))
            if result.rowcount == 0:
                return None
            touch_recipe(conn, recipe_id)
            row = conn.execute(self._collaborator_query().where(key)).mappings().one()
        return self._map_to_collaborator(row)

    def remove_collaborator(self, recipe_id: int, user_id: int) -> bool:
        with self._connect() as conn:
            result = conn.execute(
                delete(recipe_authors).where(
                    recipe_authors.c.recipe_id == recipe_id,
                    recipe_authors.c.user_id == user_id,
                )
            )
            if result.rowcount == 0:
                return False
            touch_recipe(conn, recipe_id)
        return True

    # Ingredient links

    def list_ingredients(self, recipe_id: int) -> list[RecipeIngredient]:
        with self._connect() as conn:
            rows = conn.execute(
                self._ingredient_query()
                .where(recipe_ingredients.c.recipe_id == recipe_id)
                .order_by(recipe_ingredients.c.ingredient_id)
            ).mappings().all()
        return [self._map_to_ingredient(r) for r in rows]

    def add_ingredient(self, recipe_id: int, data: dict[str, Any]) -> RecipeIngredient:
        """
        Link an ingredient to a recipe.

        Raises:
            InvalidReferenceError: If the ingredient doesn't exist.
            DuplicateIngredientLinkError: If the pair already exists.
        """
        ingredient_id = data["ingredient_id"]
        key = and_(
            recipe_ingredients.c.recipe_id == recipe_id,
            recipe_ingredients.c.ingredient_id == ingredient_id,
        )
        try:
            with self._connect() as conn:
                if not _row_exists(conn, ingredients, ingredient_id):
                    raise InvalidReferenceError("ingredient_id", ingredient_id)
                if conn.execute(select(exists().where(key))).scalar():
                    raise DuplicateIngredientLinkError(recipe_id, ingredient_id)
                conn.execute(insert(recipe_ingredients).values(recipe_id=recipe_id, **data))
                touch_recipe(conn, recipe_id)
                row = conn.execute(self._ingredient_query().where(key)).mappings().one()
        except IntegrityError as e:
            raise DuplicateIngredientLinkError(recipe_id, ingredient_id) from e
        return self._map_to_ingredient(row)

    def update_ingredient(
        self, recipe_id: int, ingredient_id: int, changes: dict[str, Any]
    ) -> Optional[RecipeIngredient]:
        key = and_(
            recipe_ingredients.c.recipe_id == recipe_id,
            recipe_ingredients.c.ingredient_id == ingredient_id,
        )
        with self._connect() as conn:
            result = conn.execute(update(recipe_ingredients).where(key).values(**changes))
            if result.rowcount == 0:
                return None
            touch_recipe(conn, recipe_id)
            row = conn.execute(self._ingredient_query().where(key)).mappings().one()
        return self._map_to_ingredient(row)

    def remove_ingredient(self, recipe_id: int, ingredient_id: int) -> bool:
        with self._connect() as conn:
            result = conn.execute(
                delete(recipe_ingredients).where(
                    recipe_ingredients.c.recipe_id == recipe_id,
                    recipe_ingredients.c.ingredient_id == ingredient_id,
                )
            )
            if result.rowcount == 0:
                return False
            touch_recipe(conn, recipe_id)
        return True

    # Queries and mapping

    def _recipe_query(self) -> Select:
        return select(
            recipes,
            categories.c.name.label("category_name"),
            users.c.name.label("author_name"),
        ).select_from(
            recipes.join(categories, recipes.c.category_id == categories.c.id).join(
                users, recipes.c.author_id == users.c.id
            )
        )

    def _collaborator_query(self) -> Select:
        return select(recipe_authors, users.c.name.label("user_name")).select_from(
            recipe_authors.join(users, recipe_authors.c.user_id == users.c.id)
        )

    def _ingredient_query(self) -> Select:
        return select(
            recipe_ingredients,
            ingredients.c.name,
            ingredients.c.unit,
        ).select_from(
            recipe_ingredients.join(
                ingredients, recipe_ingredients.c.ingredient_id == ingredients.c.id
            )
        )

    def _check_references(self, conn: Connection, values: dict[str, Any]) -> None:
        if "category_id" in values and not _row_exists(conn, categories, values["category_id"]):
            raise InvalidReferenceError("category_id", values["category_id"])
        if "author_id" in values and not _row_exists(conn, users, values["author_id"]):
            raise InvalidReferenceError("author_id", values["author_id"])

    def _map_to_recipe(self, row: RowMapping) -> Recipe:
        """Map a joined database row to Recipe model."""
        return Recipe(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            prep_time=row["prep_time"],
            cost=row["cost"],
            is_public=row["is_public"],
            is_premium=row["is_premium"],
            category_id=row["category_id"],
            category_name=row["category_name"],
            author_id=row["author_id"],
            author_name=row["author_name"],
            created_at=row["created_at"],
            modified_at=row["modified_at"],
        )

    def _map_to_collaborator(self, row: RowMapping) -> Collaborator:
        return Collaborator(
            recipe_id=row["recipe_id"],
            user_id=row["user_id"],
            user_name=row["user_name"],
            role=row["role"],
            can_modify=row["can_modify"],
            invited_at=row["invited_at"],
        )

    def _map_to_ingredient(self, row: RowMapping) -> RecipeIngredient:
        return RecipeIngredient(
            recipe_id=row["recipe_id"],
            ingredient_id=row["ingredient_id"],
            name=row["name"],
            unit=row["unit"],
            quantity=row["quantity"],
        )
