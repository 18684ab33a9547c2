# consult_match/services/specialization_service.py
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from consult_match.models.specialization import Specialization
from consult_match.repositories.specialization_repo import SpecializationRepository
from consult_match.schemas.specialization_schema import SpecializationCreate

class SpecializationService:
    def __init__(self, db: AsyncSession):
        self.repo = SpecializationRepository(db)

    async def list_active(self) -> List[Specialization]:
        return await self.repo.list_active()

    async def create_specialization(self, data: SpecializationCreate) -> Specialization:
        """(管理員) 新增專長標籤，名稱不可重複"""
        existing = await self.repo.get_by_name(data.name)
        if existing:
            raise HTTPException(status.HTTP_409_CONFLICT, "此專長標籤已存在")
        return await self.repo.create_specialization(data)
