# consult_match/repositories/profile_repo.py
from sqlalchemy import String, cast, func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import joinedload
from consult_match.models.user import User
from consult_match.models.project import Project, ProjectStatusEnum
from consult_match.models.entrepreneur_profile import EntrepreneurProfile
from consult_match.models.consultant_profile import ConsultantProfile
from consult_match.schemas.profile_schema import (
    EntrepreneurProfileCreate, EntrepreneurProfileUpdate,
    ConsultantProfileCreate, ConsultantProfileUpdate
)
from typing import Dict, List, Optional


class ProfileRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    # --- Entrepreneur ---
    async def get_entrepreneur_profile_by_user_id(self, user_id: str) -> EntrepreneurProfile | None:
        stmt = select(EntrepreneurProfile).where(EntrepreneurProfile.user_id == user_id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_entrepreneur_profile_by_id(self, profile_id: str) -> EntrepreneurProfile | None:
        stmt = select(EntrepreneurProfile).where(EntrepreneurProfile.profile_id == profile_id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def create_entrepreneur_profile(
        self, user_id: str, profile_data: EntrepreneurProfileCreate
    ) -> EntrepreneurProfile:
        new_profile = EntrepreneurProfile(
            **profile_data.model_dump(),
            user_id=user_id
        )
        self.db.add(new_profile)
        await self.db.commit()
        await self.db.refresh(new_profile)
        return new_profile

    async def update_entrepreneur_profile(
        self, profile: EntrepreneurProfile, update_data: EntrepreneurProfileUpdate
    ) -> EntrepreneurProfile:
        """更新創業者 Profile"""
        # exclude_unset=True: 只包含 "有被傳入" 的欄位
        update_dict = update_data.model_dump(exclude_unset=True)

        for key, value in update_dict.items():
            setattr(profile, key, value)

        await self.db.commit()
        await self.db.refresh(profile)
        return profile

    async def get_entrepreneur_aggregates(self, profile_id: str) -> dict:
        """
        已完成案件數與花費 (讀取時計算，不寫回資料表)
        """
        stmt = (
            select(func.count(Project.project_id), func.coalesce(func.sum(Project.budget), 0))
            .where(
                Project.entrepreneur_id == profile_id,
                Project.status == ProjectStatusEnum.completed
            )
        )
        count, total = (await self.db.execute(stmt)).one()
        return {"total_projects": count, "total_spent": float(total)}

    # --- Consultant ---
    async def get_consultant_profile_by_user_id(self, user_id: str) -> ConsultantProfile | None:
        stmt = select(ConsultantProfile).where(ConsultantProfile.user_id == user_id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_consultant_profile_by_id(self, profile_id: str) -> ConsultantProfile | None:
        stmt = select(ConsultantProfile).where(ConsultantProfile.profile_id == profile_id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_consultant_with_profile(self, user_id: str) -> ConsultantProfile | None:
        """
        依 user_id 取得顧問 Profile，並 Eager Load 使用者姓名 / 頭像
        """
        stmt = (
            select(ConsultantProfile)
            .where(ConsultantProfile.user_id == user_id)
            .options(joinedload(ConsultantProfile.user))
        )
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def create_consultant_profile(
        self, user_id: str, profile_data: ConsultantProfileCreate
    ) -> ConsultantProfile:
        new_profile = ConsultantProfile(
            **profile_data.model_dump(),
            user_id=user_id
        )
        self.db.add(new_profile)
        await self.db.commit()
        await self.db.refresh(new_profile)
        return new_profile

    async def update_consultant_profile(
        self, profile: ConsultantProfile, update_data: ConsultantProfileUpdate
    ) -> ConsultantProfile:
        """更新顧問 Profile"""
        update_dict = update_data.model_dump(exclude_unset=True)

        for key, value in update_dict.items():
            setattr(profile, key, value)

        await self.db.commit()
        await self.db.refresh(profile)
        return profile

    async def increment_profile_views(self, profile: ConsultantProfile) -> ConsultantProfile:
        # 在資料庫端 +1，避免覆寫同時進來的瀏覽
        profile.profile_views = ConsultantProfile.profile_views + 1
        await self.db.commit()
        await self.db.refresh(profile, attribute_names=["profile_views"])
        return profile

    async def get_consultants(
        self,
        search: Optional[str] = None,
        specialization: Optional[str] = None,
        limit: int = 20,
        offset: int = 0
    ) -> List[ConsultantProfile]:
        """
        (核心功能) 搜尋「接案中」的顧問
        1. 僅限 accepting_clients = True
        2. specialization: industries 陣列包含該值
        3. search: 職稱 / 簡介 / 姓名 不分大小寫的部分比對
        4. 依平均評分降序 (無評分排最後)
        """
        stmt = (
            select(ConsultantProfile)
            .join(User, ConsultantProfile.user_id == User.user_id)
            .options(joinedload(ConsultantProfile.user))
            .where(ConsultantProfile.accepting_clients == True)
        )

        if specialization:
            # industries 以 JSON 陣列儲存，比對帶引號的完整元素 (e.g. "Marketing")
            stmt = stmt.where(
                cast(ConsultantProfile.industries, String).contains(f'"{specialization}"', autoescape=True)
            )

        if search:
            # 使用者輸入的 % _ 視為一般字元
            escaped = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
            pattern = f"%{escaped}%"
            stmt = stmt.where(
                or_(
                    ConsultantProfile.title.ilike(pattern, escape="\\"),
                    ConsultantProfile.bio.ilike(pattern, escape="\\"),
                    User.first_name.ilike(pattern, escape="\\"),
                    User.last_name.ilike(pattern, escape="\\"),
                )
            )

        stmt = (
            stmt.order_by(
                ConsultantProfile.average_rating.desc().nulls_last(),
                ConsultantProfile.created_at.desc()
            )
            .limit(limit)
            .offset(offset)
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def get_consultant_aggregates(self, profile_ids: List[str]) -> Dict[str, dict]:
        """
        一次計算多位顧問的已完成案件數與收入 (讀取時計算)
        回傳 {profile_id: {"total_projects": int, "total_earnings": float}}
        """
        aggregates = {
            profile_id: {"total_projects": 0, "total_earnings": 0.0}
            for profile_id in profile_ids
        }
        if not profile_ids:
            return aggregates

        stmt = (
            select(
                Project.consultant_id,
                func.count(Project.project_id),
                func.coalesce(func.sum(Project.budget), 0)
            )
            .where(
                Project.consultant_id.in_(profile_ids),
                Project.status == ProjectStatusEnum.completed
            )
            .group_by(Project.consultant_id)
        )
        for consultant_id, count, total in (await self.db.execute(stmt)).all():
            aggregates[consultant_id] = {"total_projects": count, "total_earnings": float(total)}
        return aggregates
