from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, Union, Sequence

from device_capabilities.domains.device.models.device_model import Device
from device_capabilities.domains.device.models.dto import (
    DeviceCreate,
    DeviceSearchCriteria,
    DeviceUpdate,
)


class DeviceRepository(ABC):
    """設備存儲庫接口，定義對設備數據的操作方法"""

    @abstractmethod
    async def create(self, obj_in: DeviceCreate) -> Device:
        """創建一個新的設備記錄"""
        pass

    @abstractmethod
    async def get_by_id(self, device_id: int) -> Optional[Device]:
        """根據 ID 獲取設備"""
        pass

    @abstractmethod
    async def search(self, criteria: DeviceSearchCriteria) -> Sequence[Device]:
        """按廠商、型號、市場名稱搜尋設備"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """統計設備數量"""
        pass

    @abstractmethod
    async def update_by_id(
        self, *, device_id: int, device_in: Union[DeviceUpdate, Dict[str, Any]]
    ) -> Device:
        """根據 ID 更新設備資訊"""
        pass

    @abstractmethod
    async def remove(self, *, device_id: int) -> Optional[Device]:
        """刪除設備（連同其軟體版本與能力記錄）"""
        pass
