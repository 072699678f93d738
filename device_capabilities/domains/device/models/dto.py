from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from .device_model import DeviceBase


class DeviceCreate(DeviceBase):
    """創建設備的資料傳輸對象"""

    pass


class DeviceUpdate(BaseModel):
    """更新設備的資料傳輸對象"""

    vendor: Optional[str] = Field(default=None, max_length=100)
    model_num: Optional[str] = Field(default=None, max_length=100)
    market_name: Optional[str] = Field(default=None, max_length=200)
    release_date: Optional[date] = None

    @field_validator("vendor", "model_num")
    @classmethod
    def reject_null(cls, v: Optional[str]) -> str:
        # 省略欄位表示不變，明確的 null 不允許
        if v is None:
            raise ValueError("must not be null")
        return v


class DeviceResponse(DeviceBase):
    """設備響應的資料傳輸對象"""

    id: int

    model_config = ConfigDict(from_attributes=True)


class DeviceSearchCriteria(BaseModel):
    """Substring filters over vendor/model/market name plus a release window."""

    vendor: Optional[str] = None
    model_num: Optional[str] = None
    market_name: Optional[str] = None
    released_after: Optional[date] = None
    released_before: Optional[date] = None
    limit: int = Field(default=50, ge=1, le=500)
    offset: int = Field(default=0, ge=0)
