from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from .software_model import SoftwareBase


class SoftwareCreate(SoftwareBase):
    """創建軟體版本的資料傳輸對象，device_id 由路徑提供"""

    pass


class SoftwareUpdate(BaseModel):
    """更新軟體版本的資料傳輸對象"""

    name: Optional[str] = Field(default=None, max_length=100)
    platform: Optional[str] = Field(default=None, max_length=50)
    ptcrb: Optional[int] = None
    svn: Optional[int] = None
    build_number: Optional[str] = Field(default=None, max_length=100)
    release_date: Optional[date] = None

    @field_validator("name", "platform")
    @classmethod
    def reject_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("must not be null")
        return v


class SoftwareResponse(SoftwareBase):
    """軟體版本響應的資料傳輸對象"""

    id: int
    device_id: int

    model_config = ConfigDict(from_attributes=True)
