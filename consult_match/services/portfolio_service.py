# consult_match/services/portfolio_service.py
import logging
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from consult_match.models.user import User
from consult_match.models.portfolio_item import PortfolioItem
from consult_match.repositories.portfolio_repo import PortfolioRepository
from consult_match.repositories.profile_repo import ProfileRepository
from consult_match.schemas.portfolio_schema import PortfolioItemCreate

logger = logging.getLogger(__name__)

class PortfolioService:
    def __init__(self, db: AsyncSession):
        self.repo = PortfolioRepository(db)
        self.profile_repo = ProfileRepository(db)

    async def create_item(self, user: User, item_data: PortfolioItemCreate) -> PortfolioItem:
        """(僅限顧問) 新增作品集項目"""
        profile = await self.profile_repo.get_consultant_profile_by_user_id(user.user_id)
        if not profile:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "請先建立您的顧問 Profile")

        item = await self.repo.create_portfolio_item(profile.profile_id, item_data)
        logger.info(f"新增作品集: {item.item_id} consultant={profile.profile_id}")
        return item

    async def list_public_items(self, consultant_id: str) -> List[PortfolioItem]:
        return await self.repo.list_public_items(consultant_id)
