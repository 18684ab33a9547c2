# consult_match/services/consultant_service.py
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException, status
from typing import List, Optional

from consult_match.repositories.profile_repo import ProfileRepository
from consult_match.schemas.consultant_schema import ConsultantWithUserOut

class ConsultantService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = ProfileRepository(db)

    async def search_consultants(
        self,
        search: Optional[str] = None,
        specialization: Optional[str] = None,
        limit: int = 20,
        offset: int = 0
    ) -> List[ConsultantWithUserOut]:
        """
        (公開) 搜尋接案中的顧問，附上讀取時計算的統計
        """
        profiles = await self.repo.get_consultants(
            search=search, specialization=specialization, limit=limit, offset=offset
        )
        aggregates = await self.repo.get_consultant_aggregates([p.profile_id for p in profiles])
        return [
            ConsultantWithUserOut.model_validate(p).model_copy(update=aggregates[p.profile_id])
            for p in profiles
        ]

    async def get_consultant(self, user_id: str) -> ConsultantWithUserOut:
        """
        (公開) 依 User ID 取得顧問 Profile，每次瀏覽 profile_views + 1
        """
        profile = await self.repo.get_consultant_with_profile(user_id)
        if not profile:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "顧問不存在")

        profile = await self.repo.increment_profile_views(profile)
        aggregates = await self.repo.get_consultant_aggregates([profile.profile_id])
        return ConsultantWithUserOut.model_validate(profile).model_copy(
            update=aggregates[profile.profile_id]
        )
