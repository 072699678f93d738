from pydantic import ConfigDict
from .provider_model import ProviderBase


class ProviderResponse(ProviderBase):
    """電信業者響應的資料傳輸對象"""

    id: int

    model_config = ConfigDict(from_attributes=True)
