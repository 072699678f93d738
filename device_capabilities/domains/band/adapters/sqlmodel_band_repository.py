import logging
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from device_capabilities.domains.band.models.band_model import (
    Band,
    DeviceSoftwareBand,
    ProviderDeviceSoftwareBand,
)
from device_capabilities.domains.band.models.dto import FindDevicesByBandParams
from device_capabilities.domains.band.interfaces.band_repository import BandRepository
from device_capabilities.domains.common.models.capability_model import (
    DeviceCapabilityResult,
    SupportStatus,
    group_by_device,
)
from device_capabilities.domains.device.models.device_model import Device
from device_capabilities.domains.provider.models.provider_model import Provider
from device_capabilities.domains.software.models.software_model import Software

logger = logging.getLogger(__name__)


class SQLModelBandRepository(BandRepository):
    """SQLModel 頻段存儲庫實現"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, band_id: int) -> Optional[Band]:
        logger.debug(f"Fetching band with ID: {band_id}")
        stmt = select(Band).where(Band.id == band_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def search(
        self, *, technology: Optional[str] = None, band_number: Optional[str] = None
    ) -> List[Band]:
        logger.debug(f"Searching bands (technology={technology}, band_number={band_number})")
        query = select(Band)

        if technology:
            query = query.where(Band.technology == technology)

        if band_number:
            query = query.where(Band.band_number.like(f"%{band_number}%"))

        query = query.order_by(Band.technology, Band.band_number, Band.id)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def find_all(self) -> List[Band]:
        return await self.search()

    async def find_devices_supporting_band(
        self, params: FindDevicesByBandParams
    ) -> List[DeviceCapabilityResult]:
        """查詢支援指定頻段的設備

        With a provider id only that carrier's certified rows count and every
        result is provider-specific. Without one, devices with global rows or
        with any carrier row are all returned.
        """
        logger.debug(
            f"Finding devices supporting band {params.band_id} "
            f"(provider_id={params.provider_id}, technology={params.technology})"
        )

        if params.provider_id is not None:
            stmt = (
                select(Device, Software, Provider)
                .select_from(ProviderDeviceSoftwareBand)
                .join(Device, ProviderDeviceSoftwareBand.device_id == Device.id)
                .join(Software, ProviderDeviceSoftwareBand.software_id == Software.id)
                .join(Provider, ProviderDeviceSoftwareBand.provider_id == Provider.id)
                .join(Band, ProviderDeviceSoftwareBand.band_id == Band.id)
                .where(
                    ProviderDeviceSoftwareBand.band_id == params.band_id,
                    ProviderDeviceSoftwareBand.provider_id == params.provider_id,
                )
            )
            if params.technology:
                stmt = stmt.where(Band.technology == params.technology)
            stmt = stmt.order_by(Device.vendor, Device.model_num, Device.id, Software.id)

            result = await self.session.execute(stmt)
            return group_by_device(
                (device, software, SupportStatus.PROVIDER_SPECIFIC, provider)
                for device, software, provider in result.all()
            )

        # 全域支援
        global_stmt = (
            select(Device, Software)
            .select_from(DeviceSoftwareBand)
            .join(Device, DeviceSoftwareBand.device_id == Device.id)
            .join(Software, DeviceSoftwareBand.software_id == Software.id)
            .join(Band, DeviceSoftwareBand.band_id == Band.id)
            .where(DeviceSoftwareBand.band_id == params.band_id)
        )
        # 任一電信業者的支援
        carrier_stmt = (
            select(Device, Software)
            .select_from(ProviderDeviceSoftwareBand)
            .join(Device, ProviderDeviceSoftwareBand.device_id == Device.id)
            .join(Software, ProviderDeviceSoftwareBand.software_id == Software.id)
            .join(Band, ProviderDeviceSoftwareBand.band_id == Band.id)
            .where(ProviderDeviceSoftwareBand.band_id == params.band_id)
            .distinct()
        )
        if params.technology:
            global_stmt = global_stmt.where(Band.technology == params.technology)
            carrier_stmt = carrier_stmt.where(Band.technology == params.technology)

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
    ) -> List[Band]:
        stmt = (
            select(Band)
            .join(DeviceSoftwareBand, DeviceSoftwareBand.band_id == Band.id)
            .where(
                DeviceSoftwareBand.device_id == device_id,
                DeviceSoftwareBand.software_id == software_id,
            )
        )
        if technology:
            stmt = stmt.where(Band.technology == technology)
        stmt = stmt.order_by(Band.technology, Band.band_number, Band.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_by_device_software_provider(
        self,
        device_id: int,
        software_id: int,
        provider_id: int,
        technology: Optional[str] = None,
    ) -> List[Band]:
        stmt = (
            select(Band)
            .join(
                ProviderDeviceSoftwareBand,
                ProviderDeviceSoftwareBand.band_id == Band.id,
            )
            .where(
                ProviderDeviceSoftwareBand.device_id == device_id,
                ProviderDeviceSoftwareBand.software_id == software_id,
                ProviderDeviceSoftwareBand.provider_id == provider_id,
            )
        )
        if technology:
            stmt = stmt.where(Band.technology == technology)
        stmt = stmt.order_by(Band.technology, Band.band_number, Band.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
