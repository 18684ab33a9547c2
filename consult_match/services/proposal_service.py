# consult_match/services/proposal_service.py

import logging
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from consult_match.core.database import utcnow
from consult_match.models.user import User, UserRoleEnum
from consult_match.models.proposal import (
    Proposal, ProposalStatusEnum, PROPOSAL_TERMINAL_STATUSES, can_transition_proposal
)
from consult_match.models.project import Project, ProjectStatusEnum
from consult_match.models.notification import NotificationTypeEnum
from consult_match.repositories.proposal_repo import ProposalRepository
from consult_match.repositories.project_repo import ProjectRepository
from consult_match.repositories.profile_repo import ProfileRepository
from consult_match.repositories.user_repo import UserRepository
from consult_match.schemas.proposal_schema import ProposalCreate, ProposalUpdate
from consult_match.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

PROPOSAL_TYPES = ("sent", "received")

# 只有接收方可以設定的狀態
RECEIVER_ONLY_STATUSES = {
    ProposalStatusEnum.viewed,
    ProposalStatusEnum.accepted,
    ProposalStatusEnum.declined,
}

# 發送方可修改內容的狀態
EDITABLE_STATUSES = {ProposalStatusEnum.sent, ProposalStatusEnum.viewed}

CONTENT_FIELDS = ("message", "proposed_rate", "estimated_hours", "delivery_date")


class ProposalService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.proposal_repo = ProposalRepository(db)
        self.project_repo = ProjectRepository(db)
        self.profile_repo = ProfileRepository(db)
        self.user_repo = UserRepository(db)
        self.notification_service = NotificationService(db)

    # --- 建立 ---
    async def create_proposal(self, sender: User, proposal_data: ProposalCreate) -> Proposal:
        """
        建立提案；有 parent_id 時為還價
        """
        if proposal_data.parent_id:
            return await self._create_counter_offer(sender, proposal_data)
        return await self._create_initial_proposal(sender, proposal_data)

    async def _create_initial_proposal(self, sender: User, proposal_data: ProposalCreate) -> Proposal:
        if sender.role != UserRoleEnum.consultant:
            raise HTTPException(status.HTTP_403_FORBIDDEN, "只有顧問可以提出提案")

        # 步驟 1: 案件 -> 創業者 Profile -> 擁有者 User (任一不存在即 404，不建立任何資料)
        project = await self.project_repo.get_project_by_id(proposal_data.project_id)
        if not project:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "案件不存在")

        owner_profile = await self.profile_repo.get_entrepreneur_profile_by_id(project.entrepreneur_id)
        if not owner_profile:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "案件的創業者不存在")

        receiver = await self.user_repo.get_user_by_id(owner_profile.user_id)
        if not receiver:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "案件的創業者不存在")

        if project.status != ProjectStatusEnum.published:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "此案件目前未開放提案")

        # 步驟 2: 僅在記憶體中建立物件
        new_proposal = Proposal(
            **proposal_data.model_dump(exclude={"parent_id"}),
            sender_id=sender.user_id,
            receiver_id=receiver.user_id,
            status=ProposalStatusEnum.sent
        )

        # 步驟 3: 通知加入 Session
        await self.notification_service.create_notification(
            user_id=receiver.user_id,
            type=NotificationTypeEnum.proposal,
            title=f"案件「{project.title}」收到新提案",
            message=f"來自 {sender.first_name or sender.email} 的提案",
            data={"projectId": project.project_id}
        )

        # 步驟 4: 提案與通知一起提交
        created = await self.proposal_repo.create_proposal(new_proposal)
        logger.info(f"新提案: {created.proposal_id} project={project.project_id} sender={sender.user_id}")
        return created

    async def _create_counter_offer(self, sender: User, proposal_data: ProposalCreate) -> Proposal:
        """
        還價：由原提案的接收方發出，回給原提案的發送方，
        並在同一個交易中將原提案設為 COUNTER_OFFERED
        """
        parent = await self.proposal_repo.get_proposal_by_id(proposal_data.parent_id)
        if not parent:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "原提案不存在")

        if parent.receiver_id != sender.user_id:
            raise HTTPException(status.HTTP_403_FORBIDDEN, "只有提案的接收方可以還價")

        if parent.project_id != proposal_data.project_id:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "還價必須針對同一個案件")

        project = await self.project_repo.get_project_by_id(parent.project_id)
        if not project:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "案件不存在")

        self._mark_viewed_if_sent(parent)
        if not can_transition_proposal(parent.status, ProposalStatusEnum.counter_offered):
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "此提案已被處理，無法還價")

        parent.status = ProposalStatusEnum.counter_offered
        parent.responded_at = utcnow()

        counter = Proposal(
            **proposal_data.model_dump(),
            sender_id=sender.user_id,
            receiver_id=parent.sender_id,
            status=ProposalStatusEnum.sent
        )

        await self.notification_service.create_notification(
            user_id=parent.sender_id,
            type=NotificationTypeEnum.proposal,
            title=f"案件「{project.title}」收到還價",
            message=f"{sender.first_name or sender.email} 提出了新的條件",
            data={"projectId": project.project_id, "proposalId": parent.proposal_id}
        )

        created = await self.proposal_repo.create_proposal(counter)
        logger.info(f"還價: {created.proposal_id} parent={parent.proposal_id}")
        return created

    # --- 讀取 ---
    async def get_proposals_by_project(self, project_id: str) -> List[Proposal]:
        project = await self.project_repo.get_project_by_id(project_id)
        if not project:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "案件不存在")
        return await self.proposal_repo.get_proposals_by_project_id(project_id)

    async def get_my_proposals(self, user: User, proposal_type: str) -> List[Proposal]:
        if proposal_type not in PROPOSAL_TYPES:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "type 必須是 sent 或 received")
        return await self.proposal_repo.get_proposals_by_user(user.user_id, proposal_type)

    async def get_counter_offers(self, proposal_id: str, user: User) -> List[Proposal]:
        proposal = await self.proposal_repo.get_proposal_by_id(proposal_id)
        if not proposal:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "提案不存在")
        if user.user_id not in (proposal.sender_id, proposal.receiver_id):
            raise HTTPException(status.HTTP_403_FORBIDDEN, "你沒有權限檢視此提案")
        return await self.proposal_repo.get_counter_offers(proposal_id)

    # --- 更新 ---
    async def update_proposal(self, proposal_id: str, user: User, update_data: ProposalUpdate) -> Proposal:
        """
        - 發送方：SENT / VIEWED 時可修改內容
        - 接收方：VIEWED / ACCEPTED / DECLINED
        - 雙方：EXPIRED
        - COUNTER_OFFERED 只能透過建立還價提案
        """
        proposal = await self.proposal_repo.get_proposal_by_id_with_project(proposal_id)
        if not proposal:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "提案不存在")

        is_sender = proposal.sender_id == user.user_id
        is_receiver = proposal.receiver_id == user.user_id
        if not (is_sender or is_receiver):
            raise HTTPException(status.HTTP_403_FORBIDDEN, "你沒有權限修改此提案")

        update_dict = update_data.model_dump(exclude_unset=True)
        new_status = update_dict.pop("status", None)

        content = {key: value for key, value in update_dict.items() if key in CONTENT_FIELDS}
        if content:
            if not is_sender:
                raise HTTPException(status.HTTP_403_FORBIDDEN, "只有發送方可以修改提案內容")
            if proposal.status not in EDITABLE_STATUSES:
                raise HTTPException(status.HTTP_400_BAD_REQUEST, "提案已被處理，無法修改")
            for key, value in content.items():
                setattr(proposal, key, value)

        if new_status is not None and new_status != proposal.status:
            await self._change_status(proposal, new_status, user, is_receiver)

        return await self.proposal_repo.update_proposal(proposal)

    def _mark_viewed_if_sent(self, proposal: Proposal) -> None:
        # 接收方直接回覆 SENT 的提案，視為已先讀取
        if proposal.status == ProposalStatusEnum.sent:
            proposal.status = ProposalStatusEnum.viewed
            proposal.viewed_at = utcnow()

    async def _change_status(
        self, proposal: Proposal, new_status: ProposalStatusEnum, user: User, is_receiver: bool
    ) -> None:
        if new_status == ProposalStatusEnum.counter_offered:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "請建立還價提案 (parentId)")

        if new_status in RECEIVER_ONLY_STATUSES and not is_receiver:
            raise HTTPException(status.HTTP_403_FORBIDDEN, "只有提案的接收方可以設定此狀態")

        old_status = proposal.status
        if is_receiver and new_status in (ProposalStatusEnum.accepted, ProposalStatusEnum.declined):
            self._mark_viewed_if_sent(proposal)

        if not can_transition_proposal(proposal.status, new_status):
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                f"提案狀態無法從 {old_status.value} 變更為 {new_status.value}"
            )

        proposal.status = new_status
        if new_status == ProposalStatusEnum.viewed:
            proposal.viewed_at = utcnow()
        if new_status in PROPOSAL_TERMINAL_STATUSES:
            proposal.responded_at = utcnow()

        if new_status == ProposalStatusEnum.accepted:
            await self._assign_consultant(proposal, proposal.project)

        logger.info(f"提案狀態變更: {proposal.proposal_id} {old_status.value} -> {new_status.value}")

        # 通知另一方
        other_party_id = proposal.sender_id if user.user_id == proposal.receiver_id else proposal.receiver_id
        await self.notification_service.create_notification(
            user_id=other_party_id,
            type=NotificationTypeEnum.proposal,
            title=f"提案「{proposal.project.title}」狀態更新",
            message=f"提案狀態已變更為 {new_status.value}",
            data={"proposalId": proposal.proposal_id, "status": new_status.value}
        )

    async def _assign_consultant(self, proposal: Proposal, project: Project) -> None:
        """
        接受提案：將顧問方指派到案件，PUBLISHED 案件轉為 IN_PROGRESS
        """
        if project.status != ProjectStatusEnum.published:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "案件目前無法接受提案")

        consultant = await self.profile_repo.get_consultant_profile_by_user_id(proposal.sender_id)
        if consultant is None:
            consultant = await self.profile_repo.get_consultant_profile_by_user_id(proposal.receiver_id)
        if consultant is None:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "提案雙方都不是顧問")

        project.consultant_id = consultant.profile_id
        project.status = ProjectStatusEnum.in_progress
        logger.info(f"案件 {project.project_id} 指派顧問 {consultant.profile_id}")
