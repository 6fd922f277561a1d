"""
Relational schema for CookShare.

Declared with SQLAlchemy Core so repositories can build parameterized
statements against it. The production DDL lives in migrations/*.sql and
mirrors these tables; tests create them directly with metadata.create_all().

Cascade edges (ON DELETE CASCADE):
    users      -> sessions, recipe_authors, ratings, subscriptions
    recipes    -> recipe_authors, recipe_ingredients, steps, ratings
    ingredients -> recipe_ingredients

recipes.category_id and recipes.author_id are plain foreign keys: the store
refuses to delete a category or user that still owns recipes.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    func,
)

metadata = MetaData()

USER_TIERS = ("public", "premium")
AUTHOR_ROLES = ("collaborator", "guest")


users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(100), nullable=False),
    Column("email", String(100), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column(
        "tier",
        Enum(*USER_TIERS, name="user_tier", native_enum=False, create_constraint=True),
        nullable=False,
        server_default="public",
    ),
    Column("registered_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)

Index("uq_users_email_lower", func.lower(users.c.email), unique=True)

sessions = Table(
    "sessions",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("started_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("ended_at", DateTime(timezone=True), nullable=True),
)

categories = Table(
    "categories",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(50), nullable=False),
)

recipes = Table(
    "recipes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(150), nullable=False),
    Column("description", Text, nullable=True),
    Column("prep_time", Integer, nullable=True),
    Column("cost", Numeric(6, 2), nullable=True),
    Column("is_public", Boolean, nullable=False, server_default="1"),
    Column("is_premium", Boolean, nullable=False, server_default="0"),
    Column("category_id", Integer, ForeignKey("categories.id"), nullable=False),
    Column("author_id", Integer, ForeignKey("users.id"), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("modified_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)

recipe_authors = Table(
    "recipe_authors",
    metadata,
    Column("recipe_id", Integer, ForeignKey("recipes.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "role",
        Enum(*AUTHOR_ROLES, name="author_role", native_enum=False, create_constraint=True),
        nullable=False,
        server_default="collaborator",
    ),
    Column("can_modify", Boolean, nullable=False, server_default="0"),
    Column("invited_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)

ingredients = Table(
    "ingredients",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(100), nullable=False),
    Column("unit", String(20), nullable=True),
)

recipe_ingredients = Table(
    "recipe_ingredients",
    metadata,
    Column("recipe_id", Integer, ForeignKey("recipes.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "ingredient_id",
        Integer,
        ForeignKey("ingredients.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("quantity", Numeric(6, 2), nullable=True),
)

steps = Table(
    "steps",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("recipe_id", Integer, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False),
    Column("step_number", Integer, nullable=False),
    Column("description", Text, nullable=False),
)

ratings = Table(
    "ratings",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("recipe_id", Integer, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("score", Integer, nullable=False),
    Column("comment", Text, nullable=True),
    Column("rated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    CheckConstraint("score BETWEEN 1 AND 5", name="ck_ratings_score"),
)

subscriptions = Table(
    "subscriptions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("starts_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("ends_at", DateTime(timezone=True), nullable=False),
    Column("amount", Numeric(6, 2), nullable=False),
)
