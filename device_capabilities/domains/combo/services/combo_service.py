import logging
from typing import List, Optional
from fastapi import HTTPException, status

from device_capabilities.domains.band.models.band_model import Band
from device_capabilities.domains.combo.interfaces.combo_repository import (
    ComboRepository,
)
from device_capabilities.domains.combo.models.combo_model import Combo
from device_capabilities.domains.combo.models.dto import FindDevicesByComboParams
from device_capabilities.domains.common.models.capability_model import (
    DeviceCapabilityResult,
)
from device_capabilities.domains.provider.services.provider_service import (
    ProviderService,
)

logger = logging.getLogger(__name__)


class ComboService:
    """頻段組合服務層"""

    def __init__(
        self, combo_repository: ComboRepository, provider_service: ProviderService
    ):
        self.combo_repository = combo_repository
        self.provider_service = provider_service

    async def search_combos(
        self, technology: Optional[str] = None, name: Optional[str] = None
    ) -> List[Combo]:
        return await self.combo_repository.search(technology=technology, name=name)

    async def get_combo_by_id(self, combo_id: int) -> Combo:
        combo = await self.combo_repository.get_by_id(combo_id)
        if combo is None:
            logger.warning(f"Combo with ID {combo_id} not found.")
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Combo not found"
            )
        return combo

    async def bands_of_combo(self, combo_id: int) -> List[Band]:
        await self.get_combo_by_id(combo_id)
        return await self.combo_repository.find_bands_by_combo(combo_id)

    async def devices_supporting_combo(
        self, params: FindDevicesByComboParams
    ) -> List[DeviceCapabilityResult]:
        await self.get_combo_by_id(params.combo_id)
        await self.provider_service.ensure_provider(params.provider_id)
        return await self.combo_repository.find_devices_supporting_combo(params)

    async def combos_for_device_software(
        self,
        device_id: int,
        software_id: int,
        provider_id: Optional[int] = None,
        technology: Optional[str] = None,
    ) -> List[Combo]:
        if provider_id is None:
            return await self.combo_repository.find_by_device_software(
                device_id, software_id, technology
            )
        await self.provider_service.ensure_provider(provider_id)
        return await self.combo_repository.find_by_device_software_provider(
            device_id, software_id, provider_id, technology
        )
