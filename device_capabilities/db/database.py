"""
Database connection manager.

Owns table creation on startup and engine disposal on shutdown, and reports
readiness for the health endpoint.
"""

import logging
from typing import Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import SQLModel

from device_capabilities.db.base import get_engine

# Register every table on SQLModel.metadata
from device_capabilities.domains.device.models import device_model  # noqa: F401
from device_capabilities.domains.software.models import software_model  # noqa: F401
from device_capabilities.domains.provider.models import provider_model  # noqa: F401
from device_capabilities.domains.band.models import band_model  # noqa: F401
from device_capabilities.domains.combo.models import combo_model  # noqa: F401
from device_capabilities.domains.feature.models import feature_model  # noqa: F401

logger = logging.getLogger(__name__)


class DatabaseManager:
    """資料庫連接管理器"""

    def __init__(self, engine: Optional[AsyncEngine] = None):
        self._engine = engine
        self.is_connected = False

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            self._engine = get_engine()
        return self._engine

    async def connect(self):
        """Check connectivity and create any missing tables."""
        try:
            logger.info("Connecting to the database...")
            async with self.engine.begin() as conn:
                await conn.execute(text("SELECT 1"))
                await conn.run_sync(SQLModel.metadata.create_all)

            self.is_connected = True
            logger.info("Database connected, tables created (if they didn't exist).")

        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            raise e

    async def disconnect(self):
        """Dispose of the engine's connection pool."""
        try:
            if self.is_connected:
                await self.engine.dispose()
                self.is_connected = False
                logger.info("Database connection closed.")
        except Exception as e:
            logger.error(f"Error while closing the database connection: {e}")

    def is_ready(self) -> bool:
        """檢查資料庫是否就緒"""
        return self.is_connected


# 創建全域資料庫管理器實例
database = DatabaseManager()
