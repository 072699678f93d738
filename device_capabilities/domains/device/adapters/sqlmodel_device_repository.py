import logging
from typing import Optional, Dict, Any, Union, Sequence
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from device_capabilities.domains.device.models.device_model import Device
from device_capabilities.domains.device.interfaces.device_repository import (
    DeviceRepository,
)
from device_capabilities.domains.device.models.dto import (
    DeviceCreate,
    DeviceSearchCriteria,
    DeviceUpdate,
)


logger = logging.getLogger(__name__)


class SQLModelDeviceRepository(DeviceRepository):
    """SQLModel 設備存儲庫實現"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, obj_in: DeviceCreate) -> Device:
        """創建一個新的設備記錄"""
        logger.info(f"Attempting to create device: {obj_in.vendor} {obj_in.model_num}")
        try:
            db_device = Device(**obj_in.model_dump())
            self.session.add(db_device)
            await self.session.commit()
            await self.session.refresh(db_device)
            logger.info(
                f"Successfully created device '{db_device.model_num}' with ID {db_device.id}"
            )
            return db_device
        except Exception as e:
            await self.session.rollback()
            logger.error(
                f"Error creating device '{obj_in.model_num}': {e}", exc_info=True
            )
            raise  # 重新拋出異常，讓上層處理

    async def get_by_id(self, device_id: int) -> Optional[Device]:
        """根據 ID 獲取設備"""
        logger.debug(f"Fetching device with ID: {device_id}")
        stmt = select(Device).where(Device.id == device_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def search(self, criteria: DeviceSearchCriteria) -> Sequence[Device]:
        """按廠商、型號、市場名稱搜尋設備"""
        logger.debug(f"Searching devices with criteria: {criteria.model_dump()}")

        # 基礎查詢
        query = select(Device)

        # 過濾條件
        if criteria.vendor:
            query = query.where(Device.vendor.like(f"%{criteria.vendor}%"))

        if criteria.model_num:
            query = query.where(Device.model_num.like(f"%{criteria.model_num}%"))

        if criteria.market_name:
            query = query.where(Device.market_name.like(f"%{criteria.market_name}%"))

        if criteria.released_after:
            query = query.where(Device.release_date >= criteria.released_after)

        if criteria.released_before:
            query = query.where(Device.release_date <= criteria.released_before)

        # 排序與分頁
        query = (
            query.order_by(Device.vendor, Device.model_num, Device.id)
            .offset(criteria.offset)
            .limit(criteria.limit)
        )

        result = await self.session.execute(query)
        return result.scalars().all()

    async def count(self) -> int:
        """統計設備數量"""
        result = await self.session.execute(select(func.count()).select_from(Device))
        return int(result.scalar_one())

    async def update_by_id(
        self, *, device_id: int, device_in: Union[DeviceUpdate, Dict[str, Any]]
    ) -> Device:
        """根據 ID 更新設備資訊"""
        logger.info(f"Attempting to update device with ID: {device_id}")
        try:
            db_device = await self.get_by_id(device_id=device_id)
            if db_device is None:
                raise ValueError(f"Device with ID {device_id} not found.")

            # 轉換輸入為字典
            if isinstance(device_in, dict):
                update_data = device_in
            else:
                update_data = device_in.model_dump(exclude_unset=True)

            for field, value in update_data.items():
                if hasattr(db_device, field):
                    setattr(db_device, field, value)

            self.session.add(db_device)
            await self.session.commit()
            await self.session.refresh(db_device)
            logger.info(f"Successfully updated device with ID: {device_id}")
            return db_device
        except Exception as e:
            await self.session.rollback()
            logger.error(
                f"Error updating device with ID {device_id}: {e}", exc_info=True
            )
            raise

    async def remove(self, *, device_id: int) -> Optional[Device]:
        """刪除設備，軟體版本與能力記錄由資料庫級聯刪除"""
        logger.debug(f"Removing device with ID: {device_id}")
        try:
            db_device = await self.get_by_id(device_id=device_id)
            if db_device is None:
                logger.warning(f"Device with ID {device_id} not found for removal.")
                return None

            await self.session.delete(db_device)
            await self.session.commit()
            logger.info(f"Successfully removed device with ID: {device_id}")

            return db_device
        except Exception as e:
            await self.session.rollback()
            logger.error(
                f"Error removing device with ID {device_id}: {e}", exc_info=True
            )
            raise
