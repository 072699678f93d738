from datetime import date
from typing import Optional
from sqlmodel import Field, SQLModel


class SoftwareBase(SQLModel):
    """軟體版本基礎模型"""

    name: str = Field(..., max_length=100)
    platform: str = Field(..., max_length=50)
    ptcrb: Optional[int] = Field(default=None, description="PTCRB certification id")
    svn: Optional[int] = Field(default=None, description="Software version number")
    build_number: Optional[str] = Field(default=None, max_length=100)
    release_date: Optional[date] = Field(default=None)


class Software(SoftwareBase, table=True):
    """軟體版本實體模型，每筆記錄屬於一台設備"""

    id: Optional[int] = Field(default=None, primary_key=True)
    device_id: int = Field(foreign_key="device.id", ondelete="CASCADE", index=True)
