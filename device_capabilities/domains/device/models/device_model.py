from datetime import date
from typing import Optional
from sqlmodel import Field, SQLModel


# --- SQLModel Definitions ---
class DeviceBase(SQLModel):
    """設備基礎模型，定義設備的共同屬性"""

    vendor: str = Field(..., max_length=100, index=True)
    model_num: str = Field(..., max_length=100)
    market_name: Optional[str] = Field(default=None, max_length=200)
    release_date: Optional[date] = Field(default=None)


# Represents the table structure, inherits validation from DeviceBase
class Device(DeviceBase, table=True):
    """設備實體模型，對應資料庫中的設備表"""

    id: Optional[int] = Field(default=None, primary_key=True)
