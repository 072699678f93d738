from abc import ABC, abstractmethod
from typing import List, Optional

from device_capabilities.domains.provider.models.provider_model import Provider


class ProviderRepository(ABC):
    """電信業者存儲庫接口"""

    @abstractmethod
    async def get_by_id(self, provider_id: int) -> Optional[Provider]:
        """根據 ID 獲取電信業者"""
        pass

    @abstractmethod
    async def find_all(self) -> List[Provider]:
        """獲取所有電信業者，按名稱排序"""
        pass
