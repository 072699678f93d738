from typing import Optional
from sqlmodel import Field, SQLModel


class BandBase(SQLModel):
    """頻段基礎模型，以技術與頻段編號識別"""

    band_number: str = Field(..., max_length=20, index=True)
    technology: str = Field(..., max_length=20, index=True)  # GSM, HSPA, LTE, NR
    dl_band_class: Optional[str] = Field(default=None, max_length=50)
    ul_band_class: Optional[str] = Field(default=None, max_length=50)


class Band(BandBase, table=True):
    """頻段實體模型"""

    id: Optional[int] = Field(default=None, primary_key=True)


class DeviceSoftwareBand(SQLModel, table=True):
    """設備軟體版本的全域頻段支援"""

    __tablename__ = "device_software_band"

    device_id: int = Field(foreign_key="device.id", primary_key=True, ondelete="CASCADE")
    software_id: int = Field(
        foreign_key="software.id", primary_key=True, ondelete="CASCADE"
    )
    band_id: int = Field(
        foreign_key="band.id", primary_key=True, ondelete="CASCADE", index=True
    )


class ProviderDeviceSoftwareBand(SQLModel, table=True):
    """電信業者認證的頻段支援"""

    __tablename__ = "provider_device_software_band"

    provider_id: int = Field(
        foreign_key="provider.id", primary_key=True, ondelete="CASCADE"
    )
    device_id: int = Field(foreign_key="device.id", primary_key=True, ondelete="CASCADE")
    software_id: int = Field(
        foreign_key="software.id", primary_key=True, ondelete="CASCADE"
    )
    band_id: int = Field(
        foreign_key="band.id", primary_key=True, ondelete="CASCADE", index=True
    )
