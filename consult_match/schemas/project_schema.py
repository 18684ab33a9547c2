# consult_match/schemas/project_schema.py
from pydantic import Field, field_validator
from typing import List, Optional
from datetime import datetime
from consult_match.models.project import ProjectStatusEnum
from consult_match.schemas.base_schema import CamelModel, reject_null

# 1. 基礎欄位 (對應 Model)
class ProjectBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    requirements: Optional[str] = None
    deliverables: List[str] = []
    budget: Optional[float] = Field(None, ge=0)
    estimated_hours: Optional[int] = Field(None, gt=0)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    attachments: List[str] = []

# 2. 創業者刊登案件時的 Request Body (Input)
class ProjectCreate(ProjectBase):
    # 未指定時為 DRAFT；「儲存並發布」時傳入 PUBLISHED
    status: Optional[ProjectStatusEnum] = None

# 3. 更新案件時的 Request Body (Input)
# (所有欄位皆可選，status 需符合狀態機)
class ProjectUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    requirements: Optional[str] = None
    deliverables: Optional[List[str]] = None
    budget: Optional[float] = Field(None, ge=0)
    estimated_hours: Optional[int] = Field(None, gt=0)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    attachments: Optional[List[str]] = None
    status: Optional[ProjectStatusEnum] = None

    @field_validator("title", "description", "deliverables", "attachments", "status")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

# 4. 回傳給前端的案件資料 (Output)
class ProjectOut(ProjectBase):
    project_id: str
    entrepreneur_id: str
    consultant_id: Optional[str] = None
    status: ProjectStatusEnum
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

# 5. 精簡版，巢狀於提案列表中
class ProjectBriefOut(CamelModel):
    project_id: str
    title: str
    status: ProjectStatusEnum
    budget: Optional[float] = None
