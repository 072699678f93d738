import logging
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from device_capabilities.domains.provider.models.provider_model import Provider
from device_capabilities.domains.provider.interfaces.provider_repository import (
    ProviderRepository,
)

logger = logging.getLogger(__name__)


class SQLModelProviderRepository(ProviderRepository):
    """SQLModel 電信業者存儲庫實現"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, provider_id: int) -> Optional[Provider]:
        logger.debug(f"Fetching provider with ID: {provider_id}")
        stmt = select(Provider).where(Provider.id == provider_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_all(self) -> List[Provider]:
        stmt = select(Provider).order_by(Provider.name, Provider.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
