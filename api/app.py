"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.database import reset_engine_cache
from shared.logging_setup import configure_logging

from .errors import register_error_handlers
from .routes import health
from modules.auth.routes import router as sessions_router
from modules.users.routes import router as users_router
from modules.catalog.routes import categories_router, ingredients_router
from modules.recipes.routes import router as recipes_router
from modules.steps.routes import router as steps_router
from modules.ratings.routes import router as ratings_router
from modules.subscriptions.routes import router as subscriptions_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)
    reset_engine_cache()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Recipe sharing API with public and premium recipes",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_error_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(users_router, prefix="/api/users", tags=["users"])
    app.include_router(sessions_router, prefix="/api/sessions", tags=["sessions"])
    app.include_router(categories_router, prefix="/api/categories", tags=["categories"])
    app.include_router(ingredients_router, prefix="/api/ingredients", tags=["ingredients"])
    app.include_router(recipes_router, prefix="/api/recipes", tags=["recipes"])
    app.include_router(steps_router, prefix="/api/steps", tags=["steps"])
    app.include_router(ratings_router, prefix="/api/ratings", tags=["ratings"])
    app.include_router(subscriptions_router, prefix="/api/subscriptions", tags=["subscriptions"])

    return app


# Application instance for uvicorn
app = create_app()
