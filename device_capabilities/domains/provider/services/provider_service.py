import logging
from typing import List, Optional
from fastapi import HTTPException, status

from device_capabilities.domains.provider.interfaces.provider_repository import (
    ProviderRepository,
)
from device_capabilities.domains.provider.models.provider_model import Provider

logger = logging.getLogger(__name__)


class ProviderService:
    """電信業者服務層"""

    def __init__(self, provider_repository: ProviderRepository):
        self.provider_repository = provider_repository

    async def get_providers(self) -> List[Provider]:
        return await self.provider_repository.find_all()

    async def get_provider_by_id(self, provider_id: int) -> Provider:
        provider = await self.provider_repository.get_by_id(provider_id)
        if provider is None:
            logger.warning(f"Provider with ID {provider_id} not found.")
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Provider not found"
            )
        return provider

    async def ensure_provider(self, provider_id: Optional[int]) -> Optional[Provider]:
        """Resolve an optional provider filter; an unknown id is a 404."""
        if provider_id is None:
            return None
        return await self.get_provider_by_id(provider_id)
