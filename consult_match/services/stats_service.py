# consult_match/services/stats_service.py
from sqlalchemy.ext.asyncio import AsyncSession

from consult_match.models.user import User, UserRoleEnum
from consult_match.repositories.profile_repo import ProfileRepository
from consult_match.repositories.stats_repo import StatsRepository

class StatsService:
    def __init__(self, db: AsyncSession):
        self.repo = StatsRepository(db)
        self.profile_repo = ProfileRepository(db)

    async def get_dashboard_stats(self, user: User) -> dict:
        """
        依角色回傳儀表板數字；尚未建立 Profile 則回傳 {}
        """
        if user.role == UserRoleEnum.entrepreneur:
            profile = await self.profile_repo.get_entrepreneur_profile_by_user_id(user.user_id)
            if profile:
                return await self.repo.get_entrepreneur_stats(profile.profile_id, user.user_id)
        elif user.role == UserRoleEnum.consultant:
            profile = await self.profile_repo.get_consultant_profile_by_user_id(user.user_id)
            if profile:
                return await self.repo.get_consultant_stats(profile.profile_id, user.user_id)
        return {}
