import logging
from typing import List, Any, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from device_capabilities.api.deps import get_session
from device_capabilities.domains.band.models.dto import BandResponse
from device_capabilities.domains.combo.adapters.sqlmodel_combo_repository import (
    SQLModelComboRepository,
)
from device_capabilities.domains.combo.models.dto import (
    ComboResponse,
    FindDevicesByComboParams,
)
from device_capabilities.domains.combo.services.combo_service import ComboService
from device_capabilities.domains.common.models.capability_model import (
    DeviceCapabilityResponse,
)
from device_capabilities.domains.provider.api.provider_api import get_provider_service
from device_capabilities.domains.provider.services.provider_service import (
    ProviderService,
)

logger = logging.getLogger(__name__)
router = APIRouter()


async def get_combo_service(
    session: AsyncSession = Depends(get_session),
    provider_service: ProviderService = Depends(get_provider_service),
) -> ComboService:
    return ComboService(
        combo_repository=SQLModelComboRepository(session),
        provider_service=provider_service,
    )


@router.get("", response_model=List[ComboResponse])
async def read_combos(
    technology: Optional[str] = Query(None, description="LTE CA, EN-DC or NR CA"),
    name: Optional[str] = Query(None, description="Combo name (partial match)"),
    combo_service: ComboService = Depends(get_combo_service),
) -> Any:
    logger.info(
        f"API: Received request to search combos (technology={technology}, name={name})"
    )
    combos = await combo_service.search_combos(technology=technology, name=name)
    return [ComboResponse.model_validate(c) for c in combos]


@router.get("/{combo_id}", response_model=ComboResponse)
async def read_combo(
    combo_id: int,
    combo_service: ComboService = Depends(get_combo_service),
) -> Any:
    combo = await combo_service.get_combo_by_id(combo_id)
    return ComboResponse.model_validate(combo)


@router.get("/{combo_id}/bands", response_model=List[BandResponse])
async def read_combo_bands(
    combo_id: int,
    combo_service: ComboService = Depends(get_combo_service),
) -> Any:
    bands = await combo_service.bands_of_combo(combo_id)
    return [BandResponse.model_validate(b) for b in bands]


@router.get("/{combo_id}/devices", response_model=List[DeviceCapabilityResponse])
async def read_devices_supporting_combo(
    combo_id: int,
    provider_id: Optional[int] = Query(
        None, description="Only devices certified for this combo by the provider"
    ),
    technology: Optional[str] = Query(None, description="Require the combo technology"),
    combo_service: ComboService = Depends(get_combo_service),
) -> Any:
    logger.info(
        f"API: Received request for devices supporting combo {combo_id} (provider_id={provider_id})"
    )
    results = await combo_service.devices_supporting_combo(
        FindDevicesByComboParams(
            combo_id=combo_id, provider_id=provider_id, technology=technology
        )
    )
    return [DeviceCapabilityResponse.model_validate(r) for r in results]
