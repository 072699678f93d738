import logging
from typing import Sequence
from fastapi import HTTPException, status

from device_capabilities.domains.device.models.device_model import Device
from device_capabilities.domains.device.interfaces.device_repository import (
    DeviceRepository,
)
from device_capabilities.domains.device.models.dto import (
    DeviceCreate,
    DeviceSearchCriteria,
    DeviceUpdate,
)

logger = logging.getLogger(__name__)


class DeviceService:
    """設備服務層，實現設備相關的業務邏輯"""

    def __init__(self, device_repository: DeviceRepository):
        self.device_repository = device_repository

    async def create_device(self, device_data: DeviceCreate) -> Device:
        return await self.device_repository.create(obj_in=device_data)

    async def get_device_by_id(self, device_id: int) -> Device:
        """根據 ID 獲取設備，如果不存在則拋出 404 異常"""
        device = await self.device_repository.get_by_id(device_id=device_id)
        if not device:
            logger.warning(f"Device with ID {device_id} not found.")
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Device not found"
            )
        return device

    async def search_devices(self, criteria: DeviceSearchCriteria) -> Sequence[Device]:
        return await self.device_repository.search(criteria)

    async def update_device(self, device_id: int, device_data: DeviceUpdate) -> Device:
        """更新設備資訊"""
        # 先檢查設備是否存在
        await self.get_device_by_id(device_id=device_id)

        return await self.device_repository.update_by_id(
            device_id=device_id, device_in=device_data
        )

    async def delete_device(self, device_id: int) -> Device:
        """刪除設備，其軟體版本與能力記錄一併刪除"""
        device = await self.get_device_by_id(device_id=device_id)
        await self.device_repository.remove(device_id=device_id)
        return device
