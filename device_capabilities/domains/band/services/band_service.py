import logging
from typing import List, Optional
from fastapi import HTTPException, status

from device_capabilities.domains.band.interfaces.band_repository import BandRepository
from device_capabilities.domains.band.models.band_model import Band
from device_capabilities.domains.band.models.dto import FindDevicesByBandParams
from device_capabilities.domains.common.models.capability_model import (
    DeviceCapabilityResult,
)
from device_capabilities.domains.provider.services.provider_service import (
    ProviderService,
)

logger = logging.getLogger(__name__)


class BandService:
    """頻段服務層"""

    def __init__(self, band_repository: BandRepository, provider_service: ProviderService):
        self.band_repository = band_repository
        self.provider_service = provider_service

    async def search_bands(
        self, technology: Optional[str] = None, band_number: Optional[str] = None
    ) -> List[Band]:
        return await self.band_repository.search(
            technology=technology, band_number=band_number
        )

    async def get_band_by_id(self, band_id: int) -> Band:
        band = await self.band_repository.get_by_id(band_id)
        if band is None:
            logger.warning(f"Band with ID {band_id} not found.")
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Band not found"
            )
        return band

    async def devices_supporting_band(
        self, params: FindDevicesByBandParams
    ) -> List[DeviceCapabilityResult]:
        await self.get_band_by_id(params.band_id)
        await self.provider_service.ensure_provider(params.provider_id)
        return await self.band_repository.find_devices_supporting_band(params)

    async def bands_for_device_software(
        self,
        device_id: int,
        software_id: int,
        provider_id: Optional[int] = None,
        technology: Optional[str] = None,
    ) -> List[Band]:
        if provider_id is None:
            return await self.band_repository.find_by_device_software(
                device_id, software_id, technology
            )
        await self.provider_service.ensure_provider(provider_id)
        return await self.band_repository.find_by_device_software_provider(
            device_id, software_id, provider_id, technology
        )
