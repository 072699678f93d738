import logging
from typing import List, Any, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from device_capabilities.api.deps import get_session
from device_capabilities.domains.band.adapters.sqlmodel_band_repository import (
    SQLModelBandRepository,
)
from device_capabilities.domains.band.models.dto import (
    BandResponse,
    FindDevicesByBandParams,
)
from device_capabilities.domains.band.services.band_service import BandService
from device_capabilities.domains.common.models.capability_model import (
    DeviceCapabilityResponse,
)
from device_capabilities.domains.provider.api.provider_api import get_provider_service
from device_capabilities.domains.provider.services.provider_service import (
    ProviderService,
)

logger = logging.getLogger(__name__)
router = APIRouter()


async def get_band_service(
    session: AsyncSession = Depends(get_session),
    provider_service: ProviderService = Depends(get_provider_service),
) -> BandService:
    return BandService(
        band_repository=SQLModelBandRepository(session),
        provider_service=provider_service,
    )


@router.get("", response_model=List[BandResponse])
async def read_bands(
    technology: Optional[str] = Query(None, description="GSM, HSPA, LTE or NR"),
    band_number: Optional[str] = Query(None, description="Band number (partial match)"),
    band_service: BandService = Depends(get_band_service),
) -> Any:
    logger.info(
        f"API: Received request to search bands (technology={technology}, band_number={band_number})"
    )
    bands = await band_service.search_bands(technology=technology, band_number=band_number)
    return [BandResponse.model_validate(b) for b in bands]


@router.get("/{band_id}", response_model=BandResponse)
async def read_band(
    band_id: int,
    band_service: BandService = Depends(get_band_service),
) -> Any:
    band = await band_service.get_band_by_id(band_id)
    return BandResponse.model_validate(band)


@router.get("/{band_id}/devices", response_model=List[DeviceCapabilityResponse])
async def read_devices_supporting_band(
    band_id: int,
    provider_id: Optional[int] = Query(
        None, description="Only devices certified for this band by the provider"
    ),
    technology: Optional[str] = Query(None, description="Require the band technology"),
    band_service: BandService = Depends(get_band_service),
) -> Any:
    """
    Devices supporting a band, globally or on one provider.
    """
    logger.info(
        f"API: Received request for devices supporting band {band_id} (provider_id={provider_id})"
    )
    results = await band_service.devices_supporting_band(
        FindDevicesByBandParams(
            band_id=band_id, provider_id=provider_id, technology=technology
        )
    )
    return [DeviceCapabilityResponse.model_validate(r) for r in results]
