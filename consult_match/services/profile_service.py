# consult_match/services/profile_service.py
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException, status
from consult_match.models.user import User, UserRoleEnum
from consult_match.models.entrepreneur_profile import EntrepreneurProfile
from consult_match.models.consultant_profile import ConsultantProfile
from consult_match.repositories.profile_repo import ProfileRepository
from consult_match.repositories.user_repo import UserRepository
from consult_match.schemas.profile_schema import (
    EntrepreneurProfileCreate, EntrepreneurProfileUpdate, EntrepreneurProfileOut,
    ConsultantProfileCreate, ConsultantProfileUpdate, ConsultantProfileOut
)
from typing import Optional, Union

logger = logging.getLogger(__name__)

class ProfileService:
    def __init__(self, db: AsyncSession):
        self.repo = ProfileRepository(db)
        self.user_repo = UserRepository(db)
        self.db = db

    # --- 輸出 (附上讀取時計算的統計欄位) ---
    async def entrepreneur_profile_out(self, profile: EntrepreneurProfile) -> EntrepreneurProfileOut:
        aggregates = await self.repo.get_entrepreneur_aggregates(profile.profile_id)
        return EntrepreneurProfileOut.model_validate(profile).model_copy(update=aggregates)

    async def consultant_profile_out(self, profile: ConsultantProfile) -> ConsultantProfileOut:
        aggregates = await self.repo.get_consultant_aggregates([profile.profile_id])
        return ConsultantProfileOut.model_validate(profile).model_copy(
            update=aggregates[profile.profile_id]
        )

    async def get_my_profile(self, user: User) -> Optional[Union[EntrepreneurProfile, ConsultantProfile]]:
        """依據角色取得 Profile"""
        if user.role == UserRoleEnum.entrepreneur:
            return await self.repo.get_entrepreneur_profile_by_user_id(user.user_id)
        elif user.role == UserRoleEnum.consultant:
            return await self.repo.get_consultant_profile_by_user_id(user.user_id)
        return None # 尚未 Onboarding 或管理員沒有 profile

    async def get_my_profile_out(self, user: User) -> Optional[Union[EntrepreneurProfileOut, ConsultantProfileOut]]:
        profile = await self.get_my_profile(user)
        if isinstance(profile, EntrepreneurProfile):
            return await self.entrepreneur_profile_out(profile)
        if isinstance(profile, ConsultantProfile):
            return await self.consultant_profile_out(profile)
        return None

    def _ensure_role_not_set(self, user: User) -> None:
        # (重要) 角色只能設定一次，之後不可變更
        if user.role is not None:
            raise HTTPException(status.HTTP_409_CONFLICT, "已完成身分設定，無法重複建立 Profile")

    async def create_entrepreneur_profile(
        self, user: User, profile_data: EntrepreneurProfileCreate
    ) -> EntrepreneurProfileOut:
        """
        Onboarding：設定角色為 ENTREPRENEUR 並建立 Profile (同一個交易)
        """
        self._ensure_role_not_set(user)
        await self.user_repo.set_role(user, UserRoleEnum.entrepreneur)
        profile = await self.repo.create_entrepreneur_profile(user.user_id, profile_data)
        logger.info(f"建立創業者 Profile: user={user.user_id}, profile={profile.profile_id}")
        return await self.entrepreneur_profile_out(profile)

    async def create_consultant_profile(
        self, user: User, profile_data: ConsultantProfileCreate
    ) -> ConsultantProfileOut:
        """
        Onboarding：設定角色為 CONSULTANT 並建立 Profile (同一個交易)
        """
        self._ensure_role_not_set(user)
        await self.user_repo.set_role(user, UserRoleEnum.consultant)
        profile = await self.repo.create_consultant_profile(user.user_id, profile_data)
        logger.info(f"建立顧問 Profile: user={user.user_id}, profile={profile.profile_id}")
        return await self.consultant_profile_out(profile)

    async def update_entrepreneur_profile(
        self, user: User, update_data: EntrepreneurProfileUpdate
    ) -> EntrepreneurProfileOut:
        profile = await self.repo.get_entrepreneur_profile_by_user_id(user.user_id)
        if not profile:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "創業者 Profile 尚未建立")
        profile = await self.repo.update_entrepreneur_profile(profile, update_data)
        return await self.entrepreneur_profile_out(profile)

    async def update_consultant_profile(
        self, user: User, update_data: ConsultantProfileUpdate
    ) -> ConsultantProfileOut:
        profile = await self.repo.get_consultant_profile_by_user_id(user.user_id)
        if not profile:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "顧問 Profile 尚未建立")
        profile = await self.repo.update_consultant_profile(profile, update_data)
        return await self.consultant_profile_out(profile)
