from typing import Optional
from sqlmodel import Field, SQLModel


class FeatureBase(SQLModel):
    """功能基礎模型（VoLTE、VoWiFi、5G SA 等）"""

    name: str = Field(..., max_length=100, index=True)
    description: Optional[str] = Field(default=None, max_length=500)


class Feature(FeatureBase, table=True):
    """功能實體模型"""

    id: Optional[int] = Field(default=None, primary_key=True)


class DeviceSoftwareProviderFeature(SQLModel, table=True):
    """設備軟體版本在電信業者下的功能支援"""

    __tablename__ = "device_software_provider_feature"

    device_id: int = Field(foreign_key="device.id", primary_key=True, ondelete="CASCADE")
    software_id: int = Field(
        foreign_key="software.id", primary_key=True, ondelete="CASCADE"
    )
    provider_id: int = Field(
        foreign_key="provider.id", primary_key=True, ondelete="CASCADE"
    )
    feature_id: int = Field(
        foreign_key="feature.id", primary_key=True, ondelete="CASCADE", index=True
    )
