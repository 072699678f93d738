import logging
from typing import List, Any
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from device_capabilities.api.deps import get_session
from device_capabilities.domains.provider.adapters.sqlmodel_provider_repository import (
    SQLModelProviderRepository,
)
from device_capabilities.domains.provider.models.dto import ProviderResponse
from device_capabilities.domains.provider.services.provider_service import (
    ProviderService,
)

logger = logging.getLogger(__name__)
router = APIRouter()


async def get_provider_service(
    session: AsyncSession = Depends(get_session),
) -> ProviderService:
    return ProviderService(provider_repository=SQLModelProviderRepository(session))


@router.get("", response_model=List[ProviderResponse])
async def read_providers(
    provider_service: ProviderService = Depends(get_provider_service),
) -> Any:
    logger.info("API: Received request to list providers")
    providers = await provider_service.get_providers()
    return [ProviderResponse.model_validate(p) for p in providers]


@router.get("/{provider_id}", response_model=ProviderResponse)
async def read_provider(
    provider_id: int,
    provider_service: ProviderService = Depends(get_provider_service),
) -> Any:
    provider = await provider_service.get_provider_by_id(provider_id)
    return ProviderResponse.model_validate(provider)
