# consult_match/services/favorite_service.py
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from consult_match.models.user import User
from consult_match.models.favorite import Favorite, FAVORITE_TARGET_TYPES
from consult_match.repositories.favorite_repo import FavoriteRepository
from consult_match.repositories.profile_repo import ProfileRepository
from consult_match.repositories.project_repo import ProjectRepository
from consult_match.schemas.favorite_schema import FavoriteCreate

class FavoriteService:
    def __init__(self, db: AsyncSession):
        self.repo = FavoriteRepository(db)
        self.profile_repo = ProfileRepository(db)
        self.project_repo = ProjectRepository(db)

    def _check_target_type(self, target_type: str) -> None:
        if target_type not in FAVORITE_TARGET_TYPES:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "targetType 必須是 consultant 或 project")

    async def add_favorite(self, user: User, data: FavoriteCreate) -> Favorite:
        """
        加入收藏 (重複加入時回傳既有的那一筆)
        consultant 的 target_id 為顧問 Profile ID
        """
        self._check_target_type(data.target_type)

        if data.target_type == "consultant":
            target = await self.profile_repo.get_consultant_profile_by_id(data.target_id)
        else:
            target = await self.project_repo.get_project_by_id(data.target_id)
        if not target:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "收藏的目標不存在")

        existing = await self.repo.get_favorite(user.user_id, data.target_id, data.target_type)
        if existing:
            return existing
        return await self.repo.add_favorite(user.user_id, data.target_id, data.target_type)

    async def remove_favorite(self, user: User, target_id: str, target_type: str) -> None:
        self._check_target_type(target_type)
        await self.repo.remove_favorite(user.user_id, target_id, target_type)

    async def list_favorites(self, user: User, target_type: Optional[str] = None) -> List[Favorite]:
        if target_type is not None:
            self._check_target_type(target_type)
        return await self.repo.list_favorites(user.user_id, target_type)
