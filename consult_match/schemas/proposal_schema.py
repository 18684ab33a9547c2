# consult_match/schemas/proposal_schema.py
from pydantic import Field, field_validator
from datetime import datetime
from typing import Optional
from consult_match.models.proposal import ProposalStatusEnum
from consult_match.schemas.base_schema import CamelModel, reject_null
from consult_match.schemas.project_schema import ProjectBriefOut

# --- 建立 (Create) ---
class ProposalCreate(CamelModel):
    # sender_id 由 Session 取得；receiver_id 由伺服器解析 (案件擁有者 / 原提案發送者)
    project_id: str
    message: str = Field(..., min_length=1)
    proposed_rate: float = Field(..., gt=0)
    estimated_hours: Optional[int] = Field(None, gt=0)
    delivery_date: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    # 有值代表這是一筆還價 (counter-offer)
    parent_id: Optional[str] = None

# --- 更新 (Update) ---
class ProposalUpdate(CamelModel):
    message: Optional[str] = Field(None, min_length=1)
    proposed_rate: Optional[float] = Field(None, gt=0)
    estimated_hours: Optional[int] = Field(None, gt=0)
    delivery_date: Optional[datetime] = None
    status: Optional[ProposalStatusEnum] = None

    @field_validator("message", "proposed_rate", "status")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

# --- 讀取 (Read / Out) ---
class ProposalOut(CamelModel):
    proposal_id: str
    project_id: str
    sender_id: str
    receiver_id: str
    message: str
    proposed_rate: float
    estimated_hours: Optional[int] = None
    delivery_date: Optional[datetime] = None
    status: ProposalStatusEnum
    parent_id: Optional[str] = None
    viewed_at: Optional[datetime] = None
    responded_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

# --- 包含案件摘要 (我的提案列表用) ---
class ProposalOutWithProject(ProposalOut):
    project: Optional[ProjectBriefOut] = None
