import logging
from datetime import date
from typing import List, Optional
from fastapi import HTTPException, status

from device_capabilities.domains.device.interfaces.device_repository import (
    DeviceRepository,
)
from device_capabilities.domains.software.interfaces.software_repository import (
    SoftwareRepository,
)
from device_capabilities.domains.software.models.dto import (
    SoftwareCreate,
    SoftwareUpdate,
)
from device_capabilities.domains.software.models.software_model import Software

logger = logging.getLogger(__name__)


class SoftwareService:
    """軟體版本服務層"""

    def __init__(
        self,
        software_repository: SoftwareRepository,
        device_repository: DeviceRepository,
    ):
        self.software_repository = software_repository
        self.device_repository = device_repository

    async def list_for_device(
        self,
        device_id: int,
        platform: Optional[str] = None,
        released_after: Optional[date] = None,
    ) -> List[Software]:
        # 不檢查設備是否存在，不存在時返回空列表
        return await self.software_repository.find_by_device(
            device_id, platform=platform, released_after=released_after
        )

    async def get_device_software(self, device_id: int, software_id: int) -> Software:
        """獲取屬於指定設備的軟體版本，不存在或不屬於該設備時拋出 404"""
        software = await self.software_repository.get_by_id(software_id)
        if software is None or software.device_id != device_id:
            logger.warning(
                f"Software with ID {software_id} not found for device {device_id}."
            )
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Software not found"
            )
        return software

    async def create_software(
        self, device_id: int, software_data: SoftwareCreate
    ) -> Software:
        device = await self.device_repository.get_by_id(device_id)
        if device is None:
            logger.warning(f"Cannot create software: device {device_id} not found.")
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Device not found"
            )
        return await self.software_repository.create(
            device_id=device_id, obj_in=software_data
        )

    async def update_software(
        self, device_id: int, software_id: int, software_data: SoftwareUpdate
    ) -> Software:
        await self.get_device_software(device_id, software_id)
        return await self.software_repository.update_by_id(
            software_id=software_id, software_in=software_data
        )
