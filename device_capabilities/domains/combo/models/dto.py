from typing import Optional
from pydantic import BaseModel, ConfigDict
from .combo_model import ComboBase


class ComboResponse(ComboBase):
    """頻段組合響應的資料傳輸對象"""

    id: int

    model_config = ConfigDict(from_attributes=True)


class FindDevicesByComboParams(BaseModel):
    combo_id: int
    provider_id: Optional[int] = None
    technology: Optional[str] = None
