from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from device_capabilities.domains.band.models.band_model import Band
from device_capabilities.domains.combo.models.combo_model import Combo
from device_capabilities.domains.combo.models.dto import FindDevicesByComboParams
from device_capabilities.domains.common.models.capability_model import (
    DeviceCapabilityResult,
)


class ComboRepository(ABC):
    """頻段組合存儲庫接口"""

    @abstractmethod
    async def get_by_id(self, combo_id: int) -> Optional[Combo]:
        """根據 ID 獲取頻段組合"""
        pass

    @abstractmethod
    async def search(
        self, *, technology: Optional[str] = None, name: Optional[str] = None
    ) -> List[Combo]:
        """按技術與名稱搜尋頻段組合"""
        pass

    @abstractmethod
    async def find_bands_by_combo(self, combo_id: int) -> List[Band]:
        """獲取組成頻段組合的頻段"""
        pass

    @abstractmethod
    async def find_bands_by_combos(
        self, combo_ids: Sequence[int]
    ) -> Dict[int, List[Band]]:
        """批量獲取多個頻段組合的頻段"""
        pass

    @abstractmethod
    async def find_devices_supporting_combo(
        self, params: FindDevicesByComboParams
    ) -> List[DeviceCapabilityResult]:
        """查詢支援指定頻段組合的設備"""
        pass

    @abstractmethod
    async def find_by_device_software(
        self, device_id: int, software_id: int, technology: Optional[str] = None
    ) -> List[Combo]:
        """獲取設備軟體版本的全域頻段組合"""
        pass

    @abstractmethod
    async def find_by_device_software_provider(
        self,
        device_id: int,
        software_id: int,
        provider_id: int,
        technology: Optional[str] = None,
    ) -> List[Combo]:
        """獲取設備軟體版本在指定電信業者下的頻段組合"""
        pass
