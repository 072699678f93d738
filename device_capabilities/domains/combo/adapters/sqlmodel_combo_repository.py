import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from device_capabilities.domains.band.models.band_model import Band
from device_capabilities.domains.combo.models.combo_model import (
    Combo,
    ComboBand,
    DeviceSoftwareCombo,
    ProviderDeviceSoftwareCombo,
)
from device_capabilities.domains.combo.models.dto import FindDevicesByComboParams
from device_capabilities.domains.combo.interfaces.combo_repository import (
    ComboRepository,
)
from device_capabilities.domains.common.models.capability_model import (
    DeviceCapabilityResult,
    SupportStatus,
    group_by_device,
)
from device_capabilities.domains.device.models.device_model import Device
from device_capabilities.domains.provider.models.provider_model import Provider
from device_capabilities.domains.software.models.software_model import Software

logger = logging.getLogger(__name__)


class SQLModelComboRepository(ComboRepository):
    """SQLModel 頻段組合存儲庫實現"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, combo_id: int) -> Optional[Combo]:
        logger.debug(f"Fetching combo with ID: {combo_id}")
        stmt = select(Combo).where(Combo.id == combo_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def search(
        self, *, technology: Optional[str] = None, name: Optional[str] = None
    ) -> List[Combo]:
        query = select(Combo)

        if technology:
            query = query.where(Combo.technology == technology)

        if name:
            query = query.where(Combo.name.like(f"%{name}%"))

        query = query.order_by(Combo.technology, Combo.name, Combo.id)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def find_bands_by_combo(self, combo_id: int) -> List[Band]:
        stmt = (
            select(Band)
            .join(ComboBand, ComboBand.band_id == Band.id)
            .where(ComboBand.combo_id == combo_id)
            .order_by(Band.technology, Band.band_number, Band.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_bands_by_combos(
        self, combo_ids: Sequence[int]
    ) -> Dict[int, List[Band]]:
        if not combo_ids:
            return {}
        stmt = (
            select(ComboBand.combo_id, Band)
            .join(Band, ComboBand.band_id == Band.id)
            .where(ComboBand.combo_id.in_(combo_ids))
            .order_by(ComboBand.combo_id, Band.technology, Band.band_number, Band.id)
        )
        result = await self.session.execute(stmt)

        bands_by_combo: Dict[int, List[Band]] = defaultdict(list)
        for combo_id, band in result.all():
            bands_by_combo[combo_id].append(band)
        return dict(bands_by_combo)

    async def find_devices_supporting_combo(
        self, params: FindDevicesByComboParams
    ) -> List[DeviceCapabilityResult]:
        """查詢支援指定頻段組合的設備，語意同頻段查詢"""
        logger.debug(
            f"Finding devices supporting combo {params.combo_id} "
            f"(provider_id={params.provider_id}, technology={params.technology})"
        )

        if params.provider_id is not None:
            stmt = (
                select(Device, Software, Provider)
                .select_from(ProviderDeviceSoftwareCombo)
                .join(Device, ProviderDeviceSoftwareCombo.device_id == Device.id)
                .join(Software, ProviderDeviceSoftwareCombo.software_id == Software.id)
                .join(Provider, ProviderDeviceSoftwareCombo.provider_id == Provider.id)
                .join(Combo, ProviderDeviceSoftwareCombo.combo_id == Combo.id)
                .where(
                    ProviderDeviceSoftwareCombo.combo_id == params.combo_id,
                    ProviderDeviceSoftwareCombo.provider_id == params.provider_id,
                )
            )
            if params.technology:
                stmt = stmt.where(Combo.technology == params.technology)
            stmt = stmt.order_by(Device.vendor, Device.model_num, Device.id, Software.id)

            result = await self.session.execute(stmt)
            return group_by_device(
                (device, software, SupportStatus.PROVIDER_SPECIFIC, provider)
                for device, software, provider in result.all()
            )

        global_stmt = (
            select(Device, Software)
            .select_from(DeviceSoftwareCombo)
            .join(Device, DeviceSoftwareCombo.device_id == Device.id)
            .join(Software, DeviceSoftwareCombo.software_id == Software.id)
            .join(Combo, DeviceSoftwareCombo.combo_id == Combo.id)
            .where(DeviceSoftwareCombo.combo_id == params.combo_id)
        )
        carrier_stmt = (
            select(Device, Software)
            .select_from(ProviderDeviceSoftwareCombo)
            .join(Device, ProviderDeviceSoftwareCombo.device_id == Device.id)
            .join(Software, ProviderDeviceSoftwareCombo.software_id == Software.id)
            .join(Combo, ProviderDeviceSoftwareCombo.combo_id == Combo.id)
            .where(ProviderDeviceSoftwareCombo.combo_id == params.combo_id)
            .distinct()
        )
        if params.technology:
            global_stmt = global_stmt.where(Combo.technology == params.technology)
            carrier_stmt = carrier_stmt.where(Combo.technology == params.technology)

        global_rows = (
            await self.session.execute(global_stmt.order_by(Software.id))
        ).all()
        carrier_rows = (
            await self.session.execute(carrier_stmt.order_by(Software.id))
        ).all()

        rows = [
            (device, software, SupportStatus.GLOBAL, None)
            for device, software in global_rows
        ]
        rows.extend(
            (device, software, SupportStatus.PROVIDER_SPECIFIC, None)
            for device, software in carrier_rows
        )
        return group_by_device(rows)

    async def find_by_device_software(
        self, device_id: int, software_id: int, technology: Optional[str] = None
    ) -> List[Combo]:
        stmt = (
            select(Combo)
            .join(DeviceSoftwareCombo, DeviceSoftwareCombo.combo_id == Combo.id)
            .where(
                DeviceSoftwareCombo.device_id == device_id,
                DeviceSoftwareCombo.software_id == software_id,
            )
        )
        if technology:
            stmt = stmt.where(Combo.technology == technology)
        stmt = stmt.order_by(Combo.technology, Combo.name, Combo.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_by_device_software_provider(
        self,
        device_id: int,
        software_id: int,
        provider_id: int,
        technology: Optional[str] = None,
    ) -> List[Combo]:
        stmt = (
            select(Combo)
            .join(
                ProviderDeviceSoftwareCombo,
                ProviderDeviceSoftwareCombo.combo_id == Combo.id,
            )
            .where(
                ProviderDeviceSoftwareCombo.device_id == device_id,
                ProviderDeviceSoftwareCombo.software_id == software_id,
                ProviderDeviceSoftwareCombo.provider_id == provider_id,
            )
        )
        if technology:
            stmt = stmt.where(Combo.technology == technology)
        stmt = stmt.order_by(Combo.technology, Combo.name, Combo.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
