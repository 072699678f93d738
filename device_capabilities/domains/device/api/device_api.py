import logging
from datetime import date
from typing import List, Any, Optional
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.ext.asyncio import AsyncSession

from device_capabilities.api.deps import get_session
from device_capabilities.domains.device.services.device_service import DeviceService
from device_capabilities.domains.device.adapters.sqlmodel_device_repository import (
    SQLModelDeviceRepository,
)
from device_capabilities.domains.device.models.dto import (
    DeviceCreate,
    DeviceSearchCriteria,
    DeviceUpdate,
    DeviceResponse as DeviceSchema,
)

logger = logging.getLogger(__name__)
router = APIRouter()


# 依賴注入函數，創建設備服務實例
async def get_device_service(
    session: AsyncSession = Depends(get_session),
) -> DeviceService:
    """獲取設備服務實例，用於依賴注入"""
    repository = SQLModelDeviceRepository(session=session)
    return DeviceService(device_repository=repository)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=DeviceSchema)
async def create_new_device(
    *,
    device_service: DeviceService = Depends(get_device_service),
    device_in: DeviceCreate,
) -> Any:
    """
    Create a device.
    """
    logger.info(f"API: Received request to create device: {device_in.model_num}")
    created_device = await device_service.create_device(device_data=device_in)
    return DeviceSchema.model_validate(created_device)


@router.get("", response_model=List[DeviceSchema])
async def read_devices(
    device_service: DeviceService = Depends(get_device_service),
    vendor: Optional[str] = Query(None, description="Vendor (partial match)"),
    model_num: Optional[str] = Query(None, description="Model number (partial match)"),
    market_name: Optional[str] = Query(None, description="Market name (partial match)"),
    released_after: Optional[date] = Query(None, description="Released on or after"),
    released_before: Optional[date] = Query(None, description="Released on or before"),
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
) -> Any:
    """
    Search devices; every filter is optional.
    """
    criteria = DeviceSearchCriteria(
        vendor=vendor,
        model_num=model_num,
        market_name=market_name,
        released_after=released_after,
        released_before=released_before,
        limit=limit,
        offset=offset,
    )
    logger.info(f"API: Received request to search devices ({criteria.model_dump()})")

    devices = await device_service.search_devices(criteria)
    return [DeviceSchema.model_validate(device) for device in devices]


@router.get("/{device_id}", response_model=DeviceSchema)
async def read_device_by_id(
    device_id: int,
    device_service: DeviceService = Depends(get_device_service),
) -> Any:
    logger.info(f"API: Received request to read device with ID: {device_id}")
    device = await device_service.get_device_by_id(device_id=device_id)
    return DeviceSchema.model_validate(device)


@router.put("/{device_id}", response_model=DeviceSchema)
async def update_existing_device(
    *,
    device_service: DeviceService = Depends(get_device_service),
    device_id: int,
    device_in: DeviceUpdate,
) -> Any:
    logger.info(f"API: Received request to update device with ID: {device_id}")
    updated_device = await device_service.update_device(
        device_id=device_id, device_data=device_in
    )
    return DeviceSchema.model_validate(updated_device)


@router.delete("/{device_id}", response_model=DeviceSchema)
async def delete_device_by_id(
    *,
    device_service: DeviceService = Depends(get_device_service),
    device_id: int,
) -> Any:
    """
    Delete a device together with its software versions and capability rows.
    """
    logger.info(f"API: Received request to delete device with ID: {device_id}")
    deleted_device = await device_service.delete_device(device_id=device_id)
    return DeviceSchema.model_validate(deleted_device)
