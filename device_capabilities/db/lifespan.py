import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from device_capabilities.core.config import get_settings
from device_capabilities.db.base import get_session_maker
from device_capabilities.db.database import database
from device_capabilities.db.seed import is_catalog_empty, seed

logger = logging.getLogger(__name__)


async def seed_development_catalog():
    """Loads the reference catalog into an empty development database."""
    async with get_session_maker()() as session:
        if not await is_catalog_empty(session):
            logger.info("Catalog already contains devices. Skipping seeding.")
            return
        logger.info("Catalog is empty. Seeding reference data...")
        try:
            await seed(session)
        except Exception as e:
            logger.error(f"Error seeding development catalog: {e}", exc_info=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Context manager for FastAPI startup and shutdown logic."""
    logger.info("Application startup sequence initiated...")
    settings = get_settings()

    logger.info("Database initialization sequence...")
    await database.connect()

    if settings.is_development:
        await seed_development_catalog()

    logger.info("Application startup complete.")

    yield

    # 在應用程式關閉前執行
    await database.disconnect()
    logger.info("Application shutdown complete.")
