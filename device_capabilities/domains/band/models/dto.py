from typing import Optional
from pydantic import BaseModel, ConfigDict
from .band_model import BandBase


class BandResponse(BandBase):
    """頻段響應的資料傳輸對象"""

    id: int

    model_config = ConfigDict(from_attributes=True)


class FindDevicesByBandParams(BaseModel):
    """Band capability lookup; provider_id narrows to carrier-certified support."""

    band_id: int
    provider_id: Optional[int] = None
    technology: Optional[str] = None
