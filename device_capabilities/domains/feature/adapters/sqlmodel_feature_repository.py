import logging
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from device_capabilities.domains.common.models.capability_model import (
    DeviceCapabilityResult,
    SupportStatus,
    group_by_device,
)
from device_capabilities.domains.device.models.device_model import Device
from device_capabilities.domains.feature.interfaces.feature_repository import (
    FeatureRepository,
)
from device_capabilities.domains.feature.models.dto import (
    FeatureCreate,
    FindDevicesByFeatureParams,
)
from device_capabilities.domains.feature.models.feature_model import (
    DeviceSoftwareProviderFeature,
    Feature,
)
from device_capabilities.domains.provider.models.provider_model import Provider
from device_capabilities.domains.software.models.software_model import Software

logger = logging.getLogger(__name__)


class SQLModelFeatureRepository(FeatureRepository):
    """SQLModel 功能存儲庫實現"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, obj_in: FeatureCreate) -> Feature:
        logger.info(f"Attempting to create feature: {obj_in.name}")
        try:
            db_feature = Feature(**obj_in.model_dump())
            self.session.add(db_feature)
            await self.session.commit()
            await self.session.refresh(db_feature)
            logger.info(
                f"Successfully created feature '{db_feature.name}' with ID {db_feature.id}"
            )
            return db_feature
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error creating feature '{obj_in.name}': {e}", exc_info=True)
            raise

    async def get_by_id(self, feature_id: int) -> Optional[Feature]:
        logger.debug(f"Fetching feature with ID: {feature_id}")
        stmt = select(Feature).where(Feature.id == feature_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def search(self, *, name: Optional[str] = None) -> List[Feature]:
        query = select(Feature)
        if name:
            query = query.where(Feature.name.like(f"%{name}%"))
        query = query.order_by(Feature.name, Feature.id)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def find_all(self) -> List[Feature]:
        return await self.search()

    async def find_devices_supporting_feature(
        self, params: FindDevicesByFeatureParams
    ) -> List[DeviceCapabilityResult]:
        """查詢支援指定功能的設備

        Feature rows are always carrier-scoped. Without a provider id every
        carrier's rows count and the support is reported as global.
        """
        logger.debug(
            f"Finding devices supporting feature {params.feature_id} (provider_id={params.provider_id})"
        )

        if params.provider_id is not None:
            stmt = (
                select(Device, Software, Provider)
                .select_from(DeviceSoftwareProviderFeature)
                .join(Device, DeviceSoftwareProviderFeature.device_id == Device.id)
                .join(Software, DeviceSoftwareProviderFeature.software_id == Software.id)
                .join(Provider, DeviceSoftwareProviderFeature.provider_id == Provider.id)
                .where(
                    DeviceSoftwareProviderFeature.feature_id == params.feature_id,
                    DeviceSoftwareProviderFeature.provider_id == params.provider_id,
                )
                .order_by(Device.vendor, Device.model_num, Device.id, Software.id)
            )
            result = await self.session.execute(stmt)
            return group_by_device(
                (device, software, SupportStatus.PROVIDER_SPECIFIC, provider)
                for device, software, provider in result.all()
            )

        stmt = (
            select(Device, Software)
            .select_from(DeviceSoftwareProviderFeature)
            .join(Device, DeviceSoftwareProviderFeature.device_id == Device.id)
            .join(Software, DeviceSoftwareProviderFeature.software_id == Software.id)
            .where(DeviceSoftwareProviderFeature.feature_id == params.feature_id)
            .distinct()
            .order_by(Device.vendor, Device.model_num, Device.id, Software.id)
        )
        result = await self.session.execute(stmt)
        return group_by_device(
            (device, software, SupportStatus.GLOBAL, None)
            for device, software in result.all()
        )

    async def find_by_device_software_provider(
        self, device_id: int, software_id: int, provider_id: Optional[int] = None
    ) -> List[Feature]:
        stmt = (
            select(Feature)
            .join(
                DeviceSoftwareProviderFeature,
                DeviceSoftwareProviderFeature.feature_id == Feature.id,
            )
            .where(
                DeviceSoftwareProviderFeature.device_id == device_id,
                DeviceSoftwareProviderFeature.software_id == software_id,
            )
        )
        if provider_id is not None:
            stmt = stmt.where(DeviceSoftwareProviderFeature.provider_id == provider_id)
        stmt = stmt.distinct().order_by(Feature.name, Feature.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
