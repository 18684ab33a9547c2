# consult_match/repositories/proposal_repo.py

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import joinedload, selectinload
from typing import List, Optional

from consult_match.models.proposal import Proposal

class ProposalRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_proposal_by_id(self, proposal_id: str) -> Optional[Proposal]:
        """
        透過 ID 獲取單一提案
        """
        stmt = select(Proposal).where(Proposal.proposal_id == proposal_id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_proposal_by_id_with_project(self, proposal_id: str) -> Optional[Proposal]:
        """
        透過 ID 獲取單一提案，並載入關聯的 Project (接受提案時要指派顧問)
        """
        stmt = select(Proposal).where(Proposal.proposal_id == proposal_id).options(
            joinedload(Proposal.project)
        )
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_proposals_by_project_id(self, project_id: str) -> List[Proposal]:
        """
        獲取特定案件的所有提案 (新的在前)
        """
        stmt = (
            select(Proposal)
            .where(Proposal.project_id == project_id)
            .order_by(Proposal.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def get_proposals_by_user(self, user_id: str, proposal_type: str) -> List[Proposal]:
        """
        我的提案
        - "sent": 我送出的 (sender_id)
        - "received": 我收到的 (receiver_id)
        """
        column = Proposal.sender_id if proposal_type == "sent" else Proposal.receiver_id
        stmt = (
            select(Proposal)
            .where(column == user_id)
            .options(selectinload(Proposal.project)) # 列表要顯示案件摘要
            .order_by(Proposal.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def get_counter_offers(self, proposal_id: str) -> List[Proposal]:
        """
        某提案底下的還價 (依時間先後)
        """
        stmt = (
            select(Proposal)
            .where(Proposal.parent_id == proposal_id)
            .order_by(Proposal.created_at.asc())
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def create_proposal(self, proposal: Proposal) -> Proposal:
        """
        新增提案 (同一個 Session 中的通知、原提案狀態會一起提交)
        """
        self.db.add(proposal)
        await self.db.commit()
        await self.db.refresh(proposal)
        return proposal

    async def update_proposal(self, proposal: Proposal) -> Proposal:
        """
        更新提案 (狀態 / 內容)
        """
        await self.db.commit()
        await self.db.refresh(proposal)
        return proposal
