from typing import Optional
from sqlmodel import Field, SQLModel


class ProviderBase(SQLModel):
    """電信業者基礎模型"""

    name: str = Field(..., max_length=100)
    country: str = Field(..., max_length=100)
    network_type: str = Field(..., max_length=50)


class Provider(ProviderBase, table=True):
    """電信業者實體模型，用於限定頻段、組合與功能的支援範圍"""

    id: Optional[int] = Field(default=None, primary_key=True)
