"""
Capability lookup results shared by the band, combo and feature domains.

A lookup answers "which devices support X", one record per device, carrying
the software versions through which the support exists.
"""

from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from device_capabilities.domains.common.models.base_model import DomainBaseModel
from device_capabilities.domains.device.models.device_model import Device
from device_capabilities.domains.device.models.dto import DeviceResponse
from device_capabilities.domains.provider.models.dto import ProviderResponse
from device_capabilities.domains.provider.models.provider_model import Provider
from device_capabilities.domains.software.models.dto import SoftwareResponse
from device_capabilities.domains.software.models.software_model import Software


class SupportStatus(str, Enum):
    GLOBAL = "global"
    PROVIDER_SPECIFIC = "provider-specific"


class DeviceCapabilityResult(DomainBaseModel):
    """單台設備對某項能力的支援結果"""

    device: Device
    software: List[Software] = Field(default_factory=list)
    support_status: SupportStatus
    provider: Optional[Provider] = None


class DeviceCapabilityResponse(BaseModel):
    """能力查詢響應的資料傳輸對象"""

    device: DeviceResponse
    software: List[SoftwareResponse]
    support_status: SupportStatus
    provider: Optional[ProviderResponse] = None

    model_config = ConfigDict(from_attributes=True)


CapabilityRow = Tuple[Device, Software, SupportStatus, Optional[Provider]]


def group_by_device(rows: Iterable[CapabilityRow]) -> List[DeviceCapabilityResult]:
    """Fold (device, software, status, provider) rows into one result per device.

    A device with any global row is reported as global. Software versions
    are deduplicated by id, keeping first-seen order. Results are ordered by
    vendor, model number, then device id.
    """
    results: Dict[int, DeviceCapabilityResult] = {}
    seen_software: Dict[int, set] = {}

    for device, software, status, provider in rows:
        entry = results.get(device.id)
        if entry is None:
            entry = DeviceCapabilityResult(
                device=device, support_status=status, provider=provider
            )
            results[device.id] = entry
            seen_software[device.id] = set()
        elif status == SupportStatus.GLOBAL:
            entry.support_status = SupportStatus.GLOBAL

        if software.id not in seen_software[device.id]:
            seen_software[device.id].add(software.id)
            entry.software.append(software)

    return sorted(
        results.values(),
        key=lambda r: (r.device.vendor, r.device.model_num, r.device.id),
    )
