# consult_match/repositories/specialization_repo.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from typing import List, Optional

from consult_match.models.specialization import Specialization
from consult_match.schemas.specialization_schema import SpecializationCreate

class SpecializationRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_name(self, name: str) -> Optional[Specialization]:
        stmt = select(Specialization).where(Specialization.name == name)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def list_active(self) -> List[Specialization]:
        """
        獲取所有啟用中的專長標籤 (依名稱排序)
        """
        stmt = (
            select(Specialization)
            .where(Specialization.is_active == True)
            .order_by(Specialization.name)
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def create_specialization(self, data: SpecializationCreate) -> Specialization:
        new_specialization = Specialization(**data.model_dump(), is_active=True)
        self.db.add(new_specialization)
        await self.db.commit()
        await self.db.refresh(new_specialization)
        return new_specialization
