# models/project.py
import enum
import uuid
from sqlalchemy import Column, TEXT, INT, DECIMAL, TIMESTAMP, ForeignKey, Enum, CHAR, JSON
from sqlalchemy.orm import relationship
from consult_match.core.database import Base, utcnow

class ProjectStatusEnum(str, enum.Enum):
    draft = "DRAFT"
    published = "PUBLISHED"
    in_progress = "IN_PROGRESS"
    completed = "COMPLETED"
    cancelled = "CANCELLED"
    disputed = "DISPUTED"

# --- 案件狀態機 ---
# key: 目前狀態, value: 允許轉換到的狀態
PROJECT_STATUS_TRANSITIONS = {
    ProjectStatusEnum.draft: {ProjectStatusEnum.published},
    ProjectStatusEnum.published: {
        ProjectStatusEnum.in_progress,
        ProjectStatusEnum.cancelled,
        ProjectStatusEnum.disputed,
    },
    ProjectStatusEnum.in_progress: {
        ProjectStatusEnum.completed,
        ProjectStatusEnum.cancelled,
        ProjectStatusEnum.disputed,
    },
    ProjectStatusEnum.completed: set(),
    ProjectStatusEnum.cancelled: set(),
    ProjectStatusEnum.disputed: set(),
}


def can_transition_project(current: ProjectStatusEnum, new: ProjectStatusEnum) -> bool:
    """狀態不變視為合法 (部分更新時可能重複傳入同一狀態)"""
    if current == new:
        return True
    return new in PROJECT_STATUS_TRANSITIONS.get(current, set())


class Project(Base):
    # 告訴 SQLAlchemy，這個類別對應到資料庫中名為 projects 的表格 (table)
    __tablename__ = "projects"

    project_id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    # 擁有者：創業者 Profile (非 User)
    entrepreneur_id = Column(CHAR(36), ForeignKey("entrepreneur_profiles.profile_id"), nullable=False, index=True)
    # 開始執行後才會指派顧問
    consultant_id = Column(CHAR(36), ForeignKey("consultant_profiles.profile_id"), nullable=True, index=True)

    title = Column(TEXT, nullable=False)
    description = Column(TEXT, nullable=False)
    requirements = Column(TEXT)
    deliverables = Column(JSON, default=list)
    budget = Column(DECIMAL(10, 2))
    estimated_hours = Column(INT)
    status = Column(
        Enum(ProjectStatusEnum, name="project_status", values_callable=lambda obj: [e.value for e in obj]),
        default=ProjectStatusEnum.draft,
        nullable=False
    )
    start_date = Column(TIMESTAMP(timezone=True))
    end_date = Column(TIMESTAMP(timezone=True))
    completed_at = Column(TIMESTAMP(timezone=True))
    attachments = Column(JSON, default=list)

    created_at = Column(TIMESTAMP(timezone=True), default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), default=utcnow, onupdate=utcnow)

    # 呼應 entrepreneur_profile.py 中的 'projects'
    entrepreneur = relationship(
        "EntrepreneurProfile",
        back_populates="projects"
    )

    # 呼應 consultant_profile.py 中的 'projects'
    consultant = relationship(
        "ConsultantProfile",
        back_populates="projects"
    )

    # 建立與 Proposal (提案表) 的 '多' 關聯
    proposals = relationship(
        "Proposal",
        back_populates="project",
        cascade="all, delete-orphan", # 刪除案件時，一併刪除關聯提案
        passive_deletes=True
    )
