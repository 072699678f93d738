from typing import Optional
from pydantic import BaseModel, ConfigDict
from .feature_model import FeatureBase


class FeatureCreate(FeatureBase):
    """創建功能的資料傳輸對象"""

    pass


class FeatureResponse(FeatureBase):
    """功能響應的資料傳輸對象"""

    id: int

    model_config = ConfigDict(from_attributes=True)


class FindDevicesByFeatureParams(BaseModel):
    feature_id: int
    provider_id: Optional[int] = None
