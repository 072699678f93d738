from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession
from device_capabilities.db.base import get_session_maker


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency to get an async database session."""
    async with get_session_maker()() as session:
        yield session
