from typing import Optional
from sqlmodel import Field, SQLModel


class ComboBase(SQLModel):
    """頻段組合基礎模型（載波聚合）"""

    name: str = Field(..., max_length=200, index=True)  # e.g. "2A-n66A"
    technology: str = Field(..., max_length=20, index=True)  # LTE CA, EN-DC, NR CA


class Combo(ComboBase, table=True):
    """頻段組合實體模型"""

    id: Optional[int] = Field(default=None, primary_key=True)


class ComboBand(SQLModel, table=True):
    """組成頻段組合的頻段"""

    __tablename__ = "combo_band"

    combo_id: int = Field(foreign_key="combo.id", primary_key=True, ondelete="CASCADE")
    band_id: int = Field(foreign_key="band.id", primary_key=True, ondelete="CASCADE")


class DeviceSoftwareCombo(SQLModel, table=True):
    """設備軟體版本的全域組合支援"""

    __tablename__ = "device_software_combo"

    device_id: int = Field(foreign_key="device.id", primary_key=True, ondelete="CASCADE")
    software_id: int = Field(
        foreign_key="software.id", primary_key=True, ondelete="CASCADE"
    )
    combo_id: int = Field(
        foreign_key="combo.id", primary_key=True, ondelete="CASCADE", index=True
    )


class ProviderDeviceSoftwareCombo(SQLModel, table=True):
    """電信業者認證的組合支援"""

    __tablename__ = "provider_device_software_combo"

    provider_id: int = Field(
        foreign_key="provider.id", primary_key=True, ondelete="CASCADE"
    )
    device_id: int = Field(foreign_key="device.id", primary_key=True, ondelete="CASCADE")
    software_id: int = Field(
        foreign_key="software.id", primary_key=True, ondelete="CASCADE"
    )
    combo_id: int = Field(
        foreign_key="combo.id", primary_key=True, ondelete="CASCADE", index=True
    )
