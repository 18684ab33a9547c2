# consult_match/repositories/project_repo.py

import logging
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

# 匯入 Models
from consult_match.models.project import Project, ProjectStatusEnum

# 匯入 Schemas
from consult_match.schemas.project_schema import ProjectCreate

logger = logging.getLogger(__name__)

class ProjectRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    # 建立新案件
    async def create_project(self, entrepreneur_id: str, project_data: ProjectCreate) -> Project:
        """
        建立新案件 (未指定狀態時為 DRAFT)
        """
        project_dict = project_data.model_dump(exclude={"status"})
        db_project = Project(
            **project_dict,
            entrepreneur_id=entrepreneur_id,
            status=project_data.status or ProjectStatusEnum.draft
        )
        self.db.add(db_project)
        await self.db.commit()
        await self.db.refresh(db_project)
        return db_project

    async def get_project_by_id(self, project_id: str) -> Optional[Project]:
        stmt = select(Project).where(Project.project_id == project_id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def list_projects_by_entrepreneur(self, entrepreneur_id: str) -> List[Project]:
        """
        創業者自己的所有案件 (含草稿)，新的在前
        """
        stmt = (
            select(Project)
            .where(Project.entrepreneur_id == entrepreneur_id)
            .order_by(Project.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def list_projects_by_consultant(self, consultant_id: str) -> List[Project]:
        """
        指派給該顧問的案件，新的在前
        """
        stmt = (
            select(Project)
            .where(Project.consultant_id == consultant_id)
            .order_by(Project.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def get_published_projects(self, limit: int = 20, offset: int = 0) -> List[Project]:
        """
        (公開) 只列出 PUBLISHED 的案件，新的在前，分頁
        """
        stmt = (
            select(Project)
            .where(Project.status == ProjectStatusEnum.published)
            .order_by(Project.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def update_project(self, project: Project) -> Project:
        """
        儲存 Service 層已修改好的案件 (含狀態)
        """
        await self.db.commit()
        await self.db.refresh(project)
        logger.info(f"案件已更新: {project.project_id} (status={project.status.value})")
        return project
