import logging
from typing import Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from device_capabilities.core.config import get_settings

logger = logging.getLogger(__name__)

_engine: Optional[AsyncEngine] = None
_session_maker: Optional[sessionmaker] = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite only enforces ON DELETE CASCADE with this pragma
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, **kwargs) -> AsyncEngine:
    """Create an async engine; SQLite URLs get foreign key enforcement."""
    # echo=False 可避免印出 SQL 指令，設為 True 可用於除錯
    engine = create_async_engine(url, echo=False, future=True, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def build_session_maker(engine: AsyncEngine) -> sessionmaker:
    # expire_on_commit=False 可讓你在 commit 後仍能存取 session 中的物件
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


def get_engine() -> AsyncEngine:
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = build_engine(
            settings.async_database_url, pool_size=10, pool_pre_ping=True
        )
        logger.info(f"Database engine created for {settings.db_host}:{settings.db_port}")
    return _engine


def get_session_maker() -> sessionmaker:
    global _session_maker
    if _session_maker is None:
        _session_maker = build_session_maker(get_engine())
    return _session_maker
