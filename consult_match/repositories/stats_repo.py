# consult_match/repositories/stats_repo.py
# 儀表板統計：每次請求即時 COUNT，不快取
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from consult_match.models.project import Project, ProjectStatusEnum
from consult_match.models.proposal import Proposal
from consult_match.models.favorite import Favorite

class StatsRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _count(self, stmt) -> int:
        result = await self.db.execute(stmt)
        return result.scalar_one()

    async def get_entrepreneur_stats(self, entrepreneur_id: str, user_id: str) -> dict:
        """
        - activeProjects: PUBLISHED + IN_PROGRESS 的案件
        - totalProposals: 自己所有案件收到的提案
        - favoriteConsultants: 收藏的顧問數
        """
        active_projects = await self._count(
            select(func.count(Project.project_id)).where(
                Project.entrepreneur_id == entrepreneur_id,
                Project.status.in_([ProjectStatusEnum.published, ProjectStatusEnum.in_progress])
            )
        )
        total_proposals = await self._count(
            select(func.count(Proposal.proposal_id))
            .join(Project, Proposal.project_id == Project.project_id)
            .where(Project.entrepreneur_id == entrepreneur_id)
        )
        favorite_consultants = await self._count(
            select(func.count(Favorite.favorite_id)).where(
                Favorite.user_id == user_id,
                Favorite.target_type == "consultant"
            )
        )
        return {
            "activeProjects": active_projects,
            "totalProposals": total_proposals,
            "favoriteConsultants": favorite_consultants,
        }

    async def get_consultant_stats(self, consultant_id: str, user_id: str) -> dict:
        """
        - activeProjects: 指派給自己且 IN_PROGRESS 的案件
        - sentProposals: 自己送出的提案
        """
        active_projects = await self._count(
            select(func.count(Project.project_id)).where(
                Project.consultant_id == consultant_id,
                Project.status == ProjectStatusEnum.in_progress
            )
        )
        sent_proposals = await self._count(
            select(func.count(Proposal.proposal_id)).where(Proposal.sender_id == user_id)
        )
        return {
            "activeProjects": active_projects,
            "sentProposals": sent_proposals,
        }
