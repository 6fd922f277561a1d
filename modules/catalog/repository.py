"""
Catalog repositories for database access.
"""

from typing import Optional, Any

from sqlalchemy import delete, exists, insert, select, update
from sqlalchemy.engine import RowMapping
from sqlalchemy.exc import IntegrityError

from shared.repository import BaseRepository
from shared.schema import categories, ingredients, recipes
from .exceptions import CategoryInUseError
from .models import Category, Ingredient


class CategoryRepository(BaseRepository[Category]):
    """Repository for the categories table."""

    def list_all(self) -> list[Category]:
        with self._connect() as conn:
            rows = conn.execute(select(categories).order_by(categories.c.id)).mappings().all()
        return [self._map_to_category(r) for r in rows]

    def get(self, category_id: int) -> Optional[Category]:
        with self._connect() as conn:
            row = conn.execute(
                select(categories).where(categories.c.id == category_id)
            ).mappings().first()
        return self._map_to_category(row) if row else None

    def create(self, data: dict[str, Any]) -> Category:
        with self._connect() as conn:
            result = conn.execute(insert(categories).values(**data))
            category_id = result.inserted_primary_key[0]
        return Category(id=category_id, **data)

    def update(self, category_id: int, changes: dict[str, Any]) -> Optional[Category]:
        """
        Apply a partial update.

        Returns:
            Updated Category, or None if no row matches.
        """
        with self._connect() as conn:
            result = conn.execute(
                update(categories).where(categories.c.id == category_id).values(**changes)
            )
            if result.rowcount == 0:
                return None
            row = conn.execute(
                select(categories).where(categories.c.id == category_id)
            ).mappings().one()
        return self._map_to_category(row)

    def delete(self, category_id: int) -> bool:
        """
        Delete a category.

        Returns:
            True if a row was deleted, False if none matched.

        Raises:
            CategoryInUseError: If recipes still reference the category.
        """
        try:
            with self._connect() as conn:
                in_use = conn.execute(
                    select(exists().where(recipes.c.category_id == category_id))
                ).scalar()
                if in_use:
                    raise CategoryInUseError(category_id)
                result = conn.execute(delete(categories).where(categories.c.id == category_id))
        except IntegrityError as e:
            raise CategoryInUseError(category_id) from e
        return result.rowcount > 0

    def _map_to_category(self, row: RowMapping) -> Category:
        return Category(id=row["id"], name=row["name"])


class IngredientRepository(BaseRepository[Ingredient]):
    """Repository for the ingredients table."""

    def list_all(self) -> list[Ingredient]:
        with self._connect() as conn:
            rows = conn.execute(select(ingredients).order_by(ingredients.c.id)).mappings().all()
        return [self._map_to_ingredient(r) for r in rows]

    def get(self, ingredient_id: int) -> Optional[Ingredient]:
        with self._connect() as conn:
            row = conn.execute(
                select(ingredients).where(ingredients.c.id == ingredient_id)
            ).mappings().first()
        return self._map_to_ingredient(row) if row else None

    def create(self, data: dict[str, Any]) -> Ingredient:
        with self._connect() as conn:
            result = conn.execute(insert(ingredients).values(**data))
            ingredient_id = result.inserted_primary_key[0]
        return Ingredient(id=ingredient_id, **data)

    def update(self, ingredient_id: int, changes: dict[str, Any]) -> Optional[Ingredient]:
        with self._connect() as conn:
            result = conn.execute(
                update(ingredients).where(ingredients.c.id == ingredient_id).values(**changes)
            )
            if result.rowcount == 0:
                return None
            row = conn.execute(
                select(ingredients).where(ingredients.c.id == ingredient_id)
            ).mappings().one()
        return self._map_to_ingredient(row)

    def delete(self, ingredient_id: int) -> bool:
        """Delete an ingredient; recipe links go with it via CASCADE."""
        with self._connect() as conn:
            result = conn.execute(delete(ingredients).where(ingredients.c.id == ingredient_id))
        return result.rowcount > 0

    def _map_to_ingredient(self, row: RowMapping) -> Ingredient:
        return Ingredient(id=row["id"], name=row["name"], unit=row["unit"])
