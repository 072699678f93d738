import logging
from datetime import date
from typing import List, Optional, Dict, Any, Union
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from device_capabilities.domains.software.models.software_model import Software
from device_capabilities.domains.software.interfaces.software_repository import (
    SoftwareRepository,
)
from device_capabilities.domains.software.models.dto import (
    SoftwareCreate,
    SoftwareUpdate,
)

logger = logging.getLogger(__name__)


class SQLModelSoftwareRepository(SoftwareRepository):
    """SQLModel 軟體版本存儲庫實現"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, *, device_id: int, obj_in: SoftwareCreate) -> Software:
        logger.info(f"Attempting to create software '{obj_in.name}' for device {device_id}")
        try:
            db_software = Software(**obj_in.model_dump(), device_id=device_id)
            self.session.add(db_software)
            await self.session.commit()
            await self.session.refresh(db_software)
            logger.info(
                f"Successfully created software '{db_software.name}' with ID {db_software.id}"
            )
            return db_software
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error creating software '{obj_in.name}': {e}", exc_info=True)
            raise

    async def get_by_id(self, software_id: int) -> Optional[Software]:
        logger.debug(f"Fetching software with ID: {software_id}")
        stmt = select(Software).where(Software.id == software_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_device(
        self,
        device_id: int,
        *,
        platform: Optional[str] = None,
        released_after: Optional[date] = None,
    ) -> List[Software]:
        logger.debug(
            f"Fetching software for device {device_id} (platform={platform}, released_after={released_after})"
        )
        query = select(Software).where(Software.device_id == device_id)

        if platform:
            query = query.where(Software.platform == platform)

        if released_after:
            query = query.where(Software.release_date >= released_after)

        query = query.order_by(Software.release_date, Software.id)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def update_by_id(
        self, *, software_id: int, software_in: Union[SoftwareUpdate, Dict[str, Any]]
    ) -> Software:
        logger.info(f"Attempting to update software with ID: {software_id}")
        try:
            db_software = await self.get_by_id(software_id)
            if db_software is None:
                raise ValueError(f"Software with ID {software_id} not found.")

            if isinstance(software_in, dict):
                update_data = software_in
            else:
                update_data = software_in.model_dump(exclude_unset=True)

            for field, value in update_data.items():
                if hasattr(db_software, field):
                    setattr(db_software, field, value)

            self.session.add(db_software)
            await self.session.commit()
            await self.session.refresh(db_software)
            logger.info(f"Successfully updated software with ID: {software_id}")
            return db_software
        except Exception as e:
            await self.session.rollback()
            logger.error(
                f"Error updating software with ID {software_id}: {e}", exc_info=True
            )
            raise
