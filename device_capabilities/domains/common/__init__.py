"""
共享領域模組

包含所有領域共用的模型與能力查詢結果。
"""

from device_capabilities.domains.common.models.base_model import DomainBaseModel
from device_capabilities.domains.common.models.capability_model import (
    SupportStatus,
    DeviceCapabilityResult,
    DeviceCapabilityResponse,
    group_by_device,
)

__all__ = [
    "DomainBaseModel",
    "SupportStatus",
    "DeviceCapabilityResult",
    "DeviceCapabilityResponse",
    "group_by_device",
]
