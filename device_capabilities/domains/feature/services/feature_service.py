import logging
from typing import List, Optional
from fastapi import HTTPException, status

from device_capabilities.domains.common.models.capability_model import (
    DeviceCapabilityResult,
)
from device_capabilities.domains.feature.interfaces.feature_repository import (
    FeatureRepository,
)
from device_capabilities.domains.feature.models.dto import (
    FeatureCreate,
    FindDevicesByFeatureParams,
)
from device_capabilities.domains.feature.models.feature_model import Feature
from device_capabilities.domains.provider.services.provider_service import (
    ProviderService,
)

logger = logging.getLogger(__name__)


class FeatureService:
    """功能服務層"""

    def __init__(
        self, feature_repository: FeatureRepository, provider_service: ProviderService
    ):
        self.feature_repository = feature_repository
        self.provider_service = provider_service

    async def get_features(self, name: Optional[str] = None) -> List[Feature]:
        if name:
            return await self.feature_repository.search(name=name)
        return await self.feature_repository.find_all()

    async def create_feature(self, feature_data: FeatureCreate) -> Feature:
        return await self.feature_repository.create(feature_data)

    async def get_feature_by_id(self, feature_id: int) -> Feature:
        feature = await self.feature_repository.get_by_id(feature_id)
        if feature is None:
            logger.warning(f"Feature with ID {feature_id} not found.")
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Feature not found"
            )
        return feature

    async def devices_supporting_feature(
        self, params: FindDevicesByFeatureParams
    ) -> List[DeviceCapabilityResult]:
        await self.get_feature_by_id(params.feature_id)
        await self.provider_service.ensure_provider(params.provider_id)
        return await self.feature_repository.find_devices_supporting_feature(params)

    async def features_for_device_software(
        self, device_id: int, software_id: int, provider_id: Optional[int] = None
    ) -> List[Feature]:
        await self.provider_service.ensure_provider(provider_id)
        return await self.feature_repository.find_by_device_software_provider(
            device_id, software_id, provider_id
        )
