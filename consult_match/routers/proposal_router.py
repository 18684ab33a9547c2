# consult_match/routers/proposal_router.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from consult_match.core.database import get_db
from consult_match.core.security import get_current_user
from consult_match.models.user import User
from consult_match.services.proposal_service import ProposalService
from consult_match.schemas.proposal_schema import (
    ProposalCreate,
    ProposalUpdate,
    ProposalOut,
    ProposalOutWithProject
)

# 建立 API Router
router = APIRouter(
    prefix="/api/proposals",
    tags=["Proposals"]
)

# 「我的提案」掛在 /api 底下
my_proposal_router = APIRouter(
    prefix="/api",
    tags=["Proposals"],
    dependencies=[Depends(get_current_user)]
)

# -----------------------------------------------------------------
# 1. 提交提案 / 還價
# -----------------------------------------------------------------
@router.post("", response_model=ProposalOut, status_code=status.HTTP_201_CREATED)
async def submit_proposal(
    proposal_data: ProposalCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    - 一般提案：僅限顧問，案件必須是 PUBLISHED，接收方為案件擁有者。
    - 還價：帶入 parentId，由原提案接收方發出，原提案會變為 COUNTER_OFFERED。
    """
    service = ProposalService(db)
    return await service.create_proposal(current_user, proposal_data)

# -----------------------------------------------------------------
# 2. (公開) 某案件的所有提案
# -----------------------------------------------------------------
@router.get("/project/{project_id}", response_model=List[ProposalOut])
async def get_project_proposals(
    project_id: str,
    db: AsyncSession = Depends(get_db)
):
    service = ProposalService(db)
    return await service.get_proposals_by_project(project_id)

# -----------------------------------------------------------------
# 3. 某提案的還價鏈
# -----------------------------------------------------------------
@router.get("/{proposal_id}/counters", response_model=List[ProposalOut])
async def get_counter_offers(
    proposal_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    service = ProposalService(db)
    return await service.get_counter_offers(proposal_id, current_user)

# -----------------------------------------------------------------
# 4. 更新提案 (內容 / 狀態)
# -----------------------------------------------------------------
@router.put("/{proposal_id}", response_model=ProposalOut)
async def update_proposal(
    proposal_id: str,
    update_data: ProposalUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    - 發送方可在 SENT / VIEWED 時修改內容。
    - 接收方可設定 VIEWED、ACCEPTED、DECLINED；雙方都可設定 EXPIRED。
    - 接受提案會指派顧問並讓案件進入 IN_PROGRESS。
    """
    service = ProposalService(db)
    return await service.update_proposal(proposal_id, current_user, update_data)

# -----------------------------------------------------------------
# 5. 我的提案 (sent / received)
# -----------------------------------------------------------------
@my_proposal_router.get("/my-proposals/{proposal_type}", response_model=List[ProposalOutWithProject])
async def get_my_proposals(
    proposal_type: str,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    service = ProposalService(db)
    return await service.get_my_proposals(current_user, proposal_type)
