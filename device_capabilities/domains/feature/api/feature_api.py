import logging
from typing import List, Any, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from device_capabilities.api.deps import get_session
from device_capabilities.domains.common.models.capability_model import (
    DeviceCapabilityResponse,
)
from device_capabilities.domains.feature.adapters.sqlmodel_feature_repository import (
    SQLModelFeatureRepository,
)
from device_capabilities.domains.feature.models.dto import (
    FeatureCreate,
    FeatureResponse,
    FindDevicesByFeatureParams,
)
from device_capabilities.domains.feature.services.feature_service import (
    FeatureService,
)
from device_capabilities.domains.provider.api.provider_api import get_provider_service
from device_capabilities.domains.provider.services.provider_service import (
    ProviderService,
)

logger = logging.getLogger(__name__)
router = APIRouter()


async def get_feature_service(
    session: AsyncSession = Depends(get_session),
    provider_service: ProviderService = Depends(get_provider_service),
) -> FeatureService:
    return FeatureService(
        feature_repository=SQLModelFeatureRepository(session),
        provider_service=provider_service,
    )


@router.get("", response_model=List[FeatureResponse])
async def read_features(
    name: Optional[str] = Query(None, description="Feature name (partial match)"),
    feature_service: FeatureService = Depends(get_feature_service),
) -> Any:
    logger.info(f"API: Received request to list features (name={name})")
    features = await feature_service.get_features(name=name)
    return [FeatureResponse.model_validate(f) for f in features]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=FeatureResponse)
async def create_feature(
    *,
    feature_in: FeatureCreate,
    feature_service: FeatureService = Depends(get_feature_service),
) -> Any:
    logger.info(f"API: Received request to create feature: {feature_in.name}")
    feature = await feature_service.create_feature(feature_in)
    return FeatureResponse.model_validate(feature)


@router.get("/{feature_id}", response_model=FeatureResponse)
async def read_feature(
    feature_id: int,
    feature_service: FeatureService = Depends(get_feature_service),
) -> Any:
    feature = await feature_service.get_feature_by_id(feature_id)
    return FeatureResponse.model_validate(feature)


@router.get("/{feature_id}/devices", response_model=List[DeviceCapabilityResponse])
async def read_devices_supporting_feature(
    feature_id: int,
    provider_id: Optional[int] = Query(None, description="Only this provider's support"),
    feature_service: FeatureService = Depends(get_feature_service),
) -> Any:
    logger.info(
        f"API: Received request for devices supporting feature {feature_id} (provider_id={provider_id})"
    )
    results = await feature_service.devices_supporting_feature(
        FindDevicesByFeatureParams(feature_id=feature_id, provider_id=provider_id)
    )
    return [DeviceCapabilityResponse.model_validate(r) for r in results]
