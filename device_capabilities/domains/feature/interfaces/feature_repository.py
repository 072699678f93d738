from abc import ABC, abstractmethod
from typing import List, Optional

from device_capabilities.domains.common.models.capability_model import (
    DeviceCapabilityResult,
)
from device_capabilities.domains.feature.models.dto import (
    FeatureCreate,
    FindDevicesByFeatureParams,
)
from device_capabilities.domains.feature.models.feature_model import Feature


class FeatureRepository(ABC):
    """功能存儲庫接口"""

    @abstractmethod
    async def create(self, obj_in: FeatureCreate) -> Feature:
        """創建新功能"""
        pass

    @abstractmethod
    async def get_by_id(self, feature_id: int) -> Optional[Feature]:
        """根據 ID 獲取功能"""
        pass

    @abstractmethod
    async def search(self, *, name: Optional[str] = None) -> List[Feature]:
        """按名稱搜尋功能"""
        pass

    @abstractmethod
    async def find_all(self) -> List[Feature]:
        """獲取所有功能，按名稱排序"""
        pass

    @abstractmethod
    async def find_devices_supporting_feature(
        self, params: FindDevicesByFeatureParams
    ) -> List[DeviceCapabilityResult]:
        """查詢支援指定功能的設備"""
        pass

    @abstractmethod
    async def find_by_device_software_provider(
        self, device_id: int, software_id: int, provider_id: Optional[int] = None
    ) -> List[Feature]:
        """獲取設備軟體版本支援的功能，可選按電信業者過濾"""
        pass
