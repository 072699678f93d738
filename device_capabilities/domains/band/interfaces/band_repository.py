from abc import ABC, abstractmethod
from typing import List, Optional

from device_capabilities.domains.band.models.band_model import Band
from device_capabilities.domains.band.models.dto import FindDevicesByBandParams
from device_capabilities.domains.common.models.capability_model import (
    DeviceCapabilityResult,
)


class BandRepository(ABC):
    """頻段存儲庫接口"""

    @abstractmethod
    async def get_by_id(self, band_id: int) -> Optional[Band]:
        """根據 ID 獲取頻段"""
        pass

    @abstractmethod
    async def search(
        self, *, technology: Optional[str] = None, band_number: Optional[str] = None
    ) -> List[Band]:
        """按技術與頻段編號搜尋頻段"""
        pass

    @abstractmethod
    async def find_all(self) -> List[Band]:
        """獲取所有頻段"""
        pass

    @abstractmethod
    async def find_devices_supporting_band(
        self, params: FindDevicesByBandParams
    ) -> List[DeviceCapabilityResult]:
        """查詢支援指定頻段的設備"""
        pass

    @abstractmethod
    async def find_by_device_software(
        self, device_id: int, software_id: int, technology: Optional[str] = None
    ) -> List[Band]:
        """獲取設備軟體版本的全域頻段"""
        pass

    @abstractmethod
    async def find_by_device_software_provider(
        self,
        device_id: int,
        software_id: int,
        provider_id: int,
        technology: Optional[str] = None,
    ) -> List[Band]:
        """獲取設備軟體版本在指定電信業者下的頻段"""
        pass
