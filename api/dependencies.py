"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

The container owns the SQLAlchemy engine (and with it the connection
pool); every repository receives that engine explicitly.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy.engine import Engine

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import ISessionService
    from modules.auth.passwords import PasswordHasher
    from modules.catalog.interfaces import ICatalogService
    from modules.ratings.interfaces import IRatingService
    from modules.recipes.interfaces import IRecipeService
    from modules.steps.interfaces import IStepService
    from modules.subscriptions.interfaces import ISubscriptionService
    from modules.users.interfaces import IUserService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(
        self,
        engine: Optional[Engine] = None,
        hasher: "PasswordHasher | None" = None,
    ) -> None:
        self._engine = engine
        self._hasher = hasher
        self._session_service: "ISessionService | None" = None
        self._user_service: "IUserService | None" = None
        self._catalog_service: "ICatalogService | None" = None
        self._recipe_service: "IRecipeService | None" = None
        self._step_service: "IStepService | None" = None
        self._rating_service: "IRatingService | None" = None
        self._subscription_service: "ISubscriptionService | None" = None

    @property
    def engine(self) -> Engine:
        """Get the engine, building it from settings if none was injected."""
        if self._engine is None:
            from shared.database import get_engine
            self._engine = get_engine()
        return self._engine

    @property
    def hasher(self) -> "PasswordHasher":
        if self._hasher is None:
            from modules.auth.passwords import PasswordHasher
            from shared.config import get_settings
            self._hasher = PasswordHasher(rounds=get_settings().bcrypt_rounds)
        return self._hasher

    @property
    def sessions(self) -> "ISessionService":
        """Get the session service instance."""
        if self._session_service is None:
            from modules.auth.repository import SessionRepository
            from modules.auth.service import SessionService
            self._session_service = SessionService(SessionRepository(self.engine), self.hasher)
        return self._session_service

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.repository import UserRepository
            from modules.users.service import UserService
            self._user_service = UserService(UserRepository(self.engine), self.hasher)
        return self._user_service

    @property
    def catalog(self) -> "ICatalogService":
        """Get the catalog service instance."""
        if self._catalog_service is None:
            from modules.catalog.repository import CategoryRepository, IngredientRepository
            from modules.catalog.service import CatalogService
            self._catalog_service = CatalogService(
                categories=CategoryRepository(self.engine),
                ingredients=IngredientRepository(self.engine),
            )
        return self._catalog_service

    @property
    def recipes(self) -> "IRecipeService":
        """Get the recipe service instance."""
        if self._recipe_service is None:
            from modules.recipes.repository import RecipeRepository
            from modules.recipes.service import RecipeService
            self._recipe_service = RecipeService(RecipeRepository(self.engine))
        return self._recipe_service

    @property
    def steps(self) -> "IStepService":
        """Get the step service instance."""
        if self._step_service is None:
            from modules.steps.repository import StepRepository
            from modules.steps.service import StepService
            self._step_service = StepService(StepRepository(self.engine), recipes=self.recipes)
        return self._step_service

    @property
    def ratings(self) -> "IRatingService":
        """Get the rating service instance."""
        if self._rating_service is None:
            from modules.ratings.repository import RatingRepository
            from modules.ratings.service import RatingService
            self._rating_service = RatingService(RatingRepository(self.engine), recipes=self.recipes)
        return self._rating_service

    @property
    def subscriptions(self) -> "ISubscriptionService":
        """Get the subscription service instance."""
        if self._subscription_service is None:
            from modules.subscriptions.repository import SubscriptionRepository
            from modules.subscriptions.service import SubscriptionService
            self._subscription_service = SubscriptionService(SubscriptionRepository(self.engine))
        return self._subscription_service

    def reset(self) -> None:
        """
        Reset all cached services.

        The engine and hasher are kept; tests get fresh service instances
        wired to the same store.
        """
        self._session_service = None
        self._user_service = None
        self._catalog_service = None
        self._recipe_service = None
        self._step_service = None
        self._rating_service = None
        self._subscription_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def set_container(container: ServiceContainer) -> None:
    """
    Install a specific container.

    Tests use this to inject a container built around their own engine.
    """
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_session_service() -> "ISessionService":
    """FastAPI dependency for session service."""
    return get_container().sessions


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_catalog_service() -> "ICatalogService":
    """FastAPI dependency for catalog service."""
    return get_container().catalog


def get_recipe_service() -> "IRecipeService":
    """FastAPI dependency for recipe service."""
    return get_container().recipes


def get_step_service() -> "IStepService":
    """FastAPI dependency for step service."""
    return get_container().steps


def get_rating_service() -> "IRatingService":
    """FastAPI dependency for rating service."""
    return get_container().ratings


def get_subscription_service() -> "ISubscriptionService":
    """FastAPI dependency for subscription service."""
    return get_container().subscriptions


def get_db_engine() -> Engine:
    """FastAPI dependency for the engine (used by readiness checks)."""
    return get_container().engine
