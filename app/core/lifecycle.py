"""
Application lifecycle management using modern FastAPI lifespan pattern.

Startup creates the tables (DB_CREATE_TABLES) and seeds the default roles and
demo accounts (SEED_DEFAULT_DATA); shutdown disposes the engine pool.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config.settings import Settings, get_settings
from app.database import async_engine, check_db_connection, get_async_db_context, init_db
from app.domains.ecommerce.infrastructure.repositories import SQLAlchemyRoleRepository, SQLAlchemyUserRepository
from app.services.data_seeder import DataSeeder
from app.services.token_service import TokenService

logger = logging.getLogger(__name__)


class LifecycleManager:
    """
    Manages application lifecycle events.

    Handles startup initialization and graceful shutdown.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._initialized = False

    async def startup(self) -> None:
        """
        Execute startup tasks.

        Called when the application starts.
        """
        if self._initialized:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        logger.info("Starting application lifecycle...")

        if not await check_db_connection():
            logger.warning("Database is not reachable; requests needing it will fail")

        if self._settings.DB_CREATE_TABLES:
            await init_db()

        if self._settings.SEED_DEFAULT_DATA:
            await self._seed_default_data()

        self._verify_configurations()

        self._initialized = True
        logger.info("Application lifecycle startup completed")

    async def shutdown(self) -> None:
        """
        Execute shutdown tasks.

        Called when the application stops.
        """
        if not self._initialized:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        logger.info("Stopping application lifecycle...")
        await async_engine.dispose()

        self._initialized = False
        logger.info("Application lifecycle shutdown completed")

    async def _seed_default_data(self) -> None:
        async with get_async_db_context() as db:
            seeder = DataSeeder(SQLAlchemyUserRepository(db), SQLAlchemyRoleRepository(db), TokenService())
            await seeder.seed()

    def _verify_configurations(self) -> None:
        """Verify optional integrations."""
        if not self._settings.cloudinary_configured:
            logger.warning("Cloudinary credentials not configured - image uploads will fail")

        if not self._settings.SENTRY_DSN:
            logger.info("SENTRY_DSN not set - error tracking disabled")


# Global lifecycle manager instance
_lifecycle_manager: LifecycleManager | None = None


def get_lifecycle_manager() -> LifecycleManager:
    """Get or create the global lifecycle manager instance."""
    global _lifecycle_manager
    if _lifecycle_manager is None:
        _lifecycle_manager = LifecycleManager()
    return _lifecycle_manager


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Usage:
        app = FastAPI(lifespan=lifespan)
    """
    lifecycle = get_lifecycle_manager()

    await lifecycle.startup()

    yield  # Application runs here

    await lifecycle.shutdown()
