# consult_match/services/project_service.py
import logging
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from consult_match.core.database import utcnow
from consult_match.models.user import User, UserRoleEnum
from consult_match.models.project import Project, ProjectStatusEnum, can_transition_project
from consult_match.models.notification import NotificationTypeEnum
from consult_match.repositories.project_repo import ProjectRepository
from consult_match.repositories.profile_repo import ProfileRepository
from consult_match.schemas.project_schema import ProjectCreate, ProjectUpdate
from consult_match.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

# 建立案件時可以指定的狀態 (儲存草稿 / 儲存並發布)
CREATABLE_STATUSES = {ProjectStatusEnum.draft, ProjectStatusEnum.published}

class ProjectService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = ProjectRepository(db)
        self.profile_repo = ProfileRepository(db)
        self.notification_service = NotificationService(db)

    async def create_project(self, user: User, project_data: ProjectCreate) -> Project:
        """
        (創業者) 刊登新案件，角色已由 require_roles 檢查
        """
        profile = await self.profile_repo.get_entrepreneur_profile_by_user_id(user.user_id)
        if not profile:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "請先建立創業者 Profile")

        if project_data.status is not None and project_data.status not in CREATABLE_STATUSES:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "新案件只能是 DRAFT 或 PUBLISHED")

        project = await self.repo.create_project(profile.profile_id, project_data)
        logger.info(f"建立案件: {project.project_id} by {profile.profile_id} ({project.status.value})")
        return project

    async def get_published_projects(self, limit: int, offset: int) -> List[Project]:
        return await self.repo.get_published_projects(limit=limit, offset=offset)

    async def get_project(self, project_id: str) -> Project:
        project = await self.repo.get_project_by_id(project_id)
        if not project:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "案件不存在")
        return project

    async def get_my_projects(self, user: User) -> List[Project]:
        """
        依角色：創業者 = 自己刊登的 (含草稿)；顧問 = 指派給自己的
        """
        if user.role == UserRoleEnum.entrepreneur:
            profile = await self.profile_repo.get_entrepreneur_profile_by_user_id(user.user_id)
            if profile:
                return await self.repo.list_projects_by_entrepreneur(profile.profile_id)
        elif user.role == UserRoleEnum.consultant:
            profile = await self.profile_repo.get_consultant_profile_by_user_id(user.user_id)
            if profile:
                return await self.repo.list_projects_by_consultant(profile.profile_id)
        return []

    async def update_project(self, project_id: str, user: User, update_data: ProjectUpdate) -> Project:
        """
        (擁有者) 部分更新案件，狀態必須依照狀態機轉換
        """
        project = await self.get_project(project_id)

        profile = await self.profile_repo.get_entrepreneur_profile_by_user_id(user.user_id)
        if not profile or project.entrepreneur_id != profile.profile_id:
            raise HTTPException(status.HTTP_403_FORBIDDEN, "你沒有權限修改此案件")

        update_dict = update_data.model_dump(exclude_unset=True)
        new_status = update_dict.pop("status", None)

        if new_status is not None and not can_transition_project(project.status, new_status):
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                f"案件狀態無法從 {project.status.value} 變更為 {new_status.value}"
            )

        for key, value in update_dict.items():
            setattr(project, key, value)

        if new_status is not None and new_status != project.status:
            await self._change_status(project, new_status)

        return await self.repo.update_project(project)

    async def _change_status(self, project: Project, new_status: ProjectStatusEnum) -> None:
        old_status = project.status
        project.status = new_status
        if new_status == ProjectStatusEnum.completed:
            project.completed_at = utcnow()

        logger.info(f"案件狀態變更: {project.project_id} {old_status.value} -> {new_status.value}")

        # 通知被指派的顧問
        if project.consultant_id:
            consultant = await self.profile_repo.get_consultant_profile_by_id(project.consultant_id)
            if consultant:
                await self.notification_service.create_notification(
                    user_id=consultant.user_id,
                    type=NotificationTypeEnum.project_update,
                    title=f"案件「{project.title}」狀態更新",
                    message=f"案件狀態已變更為 {new_status.value}",
                    data={"projectId": project.project_id, "status": new_status.value}
                )
