from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional, Dict, Any, Union

from device_capabilities.domains.software.models.software_model import Software
from device_capabilities.domains.software.models.dto import (
    SoftwareCreate,
    SoftwareUpdate,
)


class SoftwareRepository(ABC):
    """軟體版本存儲庫接口"""

    @abstractmethod
    async def create(self, *, device_id: int, obj_in: SoftwareCreate) -> Software:
        """為設備創建軟體版本"""
        pass

    @abstractmethod
    async def get_by_id(self, software_id: int) -> Optional[Software]:
        """根據 ID 獲取軟體版本"""
        pass

    @abstractmethod
    async def find_by_device(
        self,
        device_id: int,
        *,
        platform: Optional[str] = None,
        released_after: Optional[date] = None,
    ) -> List[Software]:
        """獲取設備的所有軟體版本，不檢查設備是否存在"""
        pass

    @abstractmethod
    async def update_by_id(
        self, *, software_id: int, software_in: Union[SoftwareUpdate, Dict[str, Any]]
    ) -> Software:
        """根據 ID 更新軟體版本"""
        pass
