import logging
from datetime import date
from typing import List, Any, Optional
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.ext.asyncio import AsyncSession

from device_capabilities.api.deps import get_session
from device_capabilities.domains.band.api.band_api import get_band_service
from device_capabilities.domains.band.models.dto import BandResponse
from device_capabilities.domains.band.services.band_service import BandService
from device_capabilities.domains.combo.api.combo_api import get_combo_service
from device_capabilities.domains.combo.models.dto import ComboResponse
from device_capabilities.domains.combo.services.combo_service import ComboService
from device_capabilities.domains.device.adapters.sqlmodel_device_repository import (
    SQLModelDeviceRepository,
)
from device_capabilities.domains.feature.api.feature_api import get_feature_service
from device_capabilities.domains.feature.models.dto import FeatureResponse
from device_capabilities.domains.feature.services.feature_service import (
    FeatureService,
)
from device_capabilities.domains.software.adapters.sqlmodel_software_repository import (
    SQLModelSoftwareRepository,
)
from device_capabilities.domains.software.models.dto import (
    SoftwareCreate,
    SoftwareUpdate,
    SoftwareResponse as SoftwareSchema,
)
from device_capabilities.domains.software.services.software_service import (
    SoftwareService,
)

logger = logging.getLogger(__name__)
router = APIRouter()


async def get_software_service(
    session: AsyncSession = Depends(get_session),
) -> SoftwareService:
    return SoftwareService(
        software_repository=SQLModelSoftwareRepository(session=session),
        device_repository=SQLModelDeviceRepository(session=session),
    )


@router.get("/{device_id}/softwares", response_model=List[SoftwareSchema])
async def read_device_softwares(
    device_id: int,
    software_service: SoftwareService = Depends(get_software_service),
    platform: Optional[str] = Query(None, description="Exact platform, e.g. iOS"),
    released_after: Optional[date] = Query(None, description="Released on or after"),
) -> Any:
    """
    List the software versions of a device. Unknown devices yield an empty list.
    """
    logger.info(f"API: Received request to list software for device {device_id}")
    softwares = await software_service.list_for_device(
        device_id, platform=platform, released_after=released_after
    )
    return [SoftwareSchema.model_validate(s) for s in softwares]


@router.post(
    "/{device_id}/softwares",
    status_code=status.HTTP_201_CREATED,
    response_model=SoftwareSchema,
)
async def create_device_software(
    *,
    device_id: int,
    software_in: SoftwareCreate,
    software_service: SoftwareService = Depends(get_software_service),
) -> Any:
    logger.info(
        f"API: Received request to create software '{software_in.name}' for device {device_id}"
    )
    software = await software_service.create_software(device_id, software_in)
    return SoftwareSchema.model_validate(software)


@router.get("/{device_id}/softwares/{software_id}", response_model=SoftwareSchema)
async def read_device_software(
    device_id: int,
    software_id: int,
    software_service: SoftwareService = Depends(get_software_service),
) -> Any:
    software = await software_service.get_device_software(device_id, software_id)
    return SoftwareSchema.model_validate(software)


@router.put("/{device_id}/softwares/{software_id}", response_model=SoftwareSchema)
async def update_device_software(
    *,
    device_id: int,
    software_id: int,
    software_in: SoftwareUpdate,
    software_service: SoftwareService = Depends(get_software_service),
) -> Any:
    logger.info(
        f"API: Received request to update software {software_id} of device {device_id}"
    )
    software = await software_service.update_software(
        device_id, software_id, software_in
    )
    return SoftwareSchema.model_validate(software)


# --- Capabilities of one software version ---
@router.get(
    "/{device_id}/softwares/{software_id}/bands", response_model=List[BandResponse]
)
async def read_software_bands(
    device_id: int,
    software_id: int,
    provider_id: Optional[int] = Query(None, description="Carrier-certified bands only"),
    technology: Optional[str] = Query(None, description="GSM, HSPA, LTE or NR"),
    software_service: SoftwareService = Depends(get_software_service),
    band_service: BandService = Depends(get_band_service),
) -> Any:
    await software_service.get_device_software(device_id, software_id)
    bands = await band_service.bands_for_device_software(
        device_id, software_id, provider_id=provider_id, technology=technology
    )
    return [BandResponse.model_validate(b) for b in bands]


@router.get(
    "/{device_id}/softwares/{software_id}/combos", response_model=List[ComboResponse]
)
async def read_software_combos(
    device_id: int,
    software_id: int,
    provider_id: Optional[int] = Query(None, description="Carrier-certified combos only"),
    technology: Optional[str] = Query(None, description="LTE CA, EN-DC or NR CA"),
    software_service: SoftwareService = Depends(get_software_service),
    combo_service: ComboService = Depends(get_combo_service),
) -> Any:
    await software_service.get_device_software(device_id, software_id)
    combos = await combo_service.combos_for_device_software(
        device_id, software_id, provider_id=provider_id, technology=technology
    )
    return [ComboResponse.model_validate(c) for c in combos]


@router.get(
    "/{device_id}/softwares/{software_id}/features",
    response_model=List[FeatureResponse],
)
async def read_software_features(
    device_id: int,
    software_id: int,
    provider_id: Optional[int] = Query(None, description="Features on this carrier only"),
    software_service: SoftwareService = Depends(get_software_service),
    feature_service: FeatureService = Depends(get_feature_service),
) -> Any:
    await software_service.get_device_software(device_id, software_id)
    features = await feature_service.features_for_device_software(
        device_id, software_id, provider_id=provider_id
    )
    return [FeatureResponse.model_validate(f) for f in features]
