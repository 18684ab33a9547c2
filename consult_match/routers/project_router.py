# consult_match/routers/project_router.py
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

# 匯入核心依賴
from consult_match.core.config import settings
from consult_match.core.database import get_db
from consult_match.core.security import get_current_user, require_roles
from consult_match.models.user import User, UserRoleEnum

# 匯入 Service 和 Schemas
from consult_match.services.project_service import ProjectService
from consult_match.schemas.project_schema import ProjectCreate, ProjectOut, ProjectUpdate

# (注意) 列表與單筆查詢是公開的，所以不設 router 層級的登入依賴
router = APIRouter(
    prefix="/api/projects",
    tags=["Projects"]
)

# 「我的案件」掛在 /api 底下
my_project_router = APIRouter(
    prefix="/api",
    tags=["Projects"]
)

@router.post(
    "",
    response_model=ProjectOut,
    status_code=status.HTTP_201_CREATED
)
async def create_new_project(
    project_data: ProjectCreate, # Request Body
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_roles(UserRoleEnum.entrepreneur))
):
    """
    刊登新案件。

    - (權限) 僅限「創業者」角色。
    - (狀態) 預設 DRAFT；傳入 status=PUBLISHED 即「儲存並發布」。
    """
    service = ProjectService(db)
    return await service.create_project(user=current_user, project_data=project_data)

@router.get("", response_model=List[ProjectOut])
async def list_published_projects(
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db)
):
    """
    (公開) 已發布的案件，新的在前
    """
    service = ProjectService(db)
    return await service.get_published_projects(limit=limit, offset=offset)

@router.get("/{project_id}", response_model=ProjectOut)
async def get_project(
    project_id: str,
    db: AsyncSession = Depends(get_db)
):
    service = ProjectService(db)
    return await service.get_project(project_id)

@router.put("/{project_id}", response_model=ProjectOut)
async def update_project(
    project_id: str,
    update_data: ProjectUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    (擁有者) 部分更新案件。

    - status 只能依狀態機轉換：DRAFT -> PUBLISHED -> IN_PROGRESS -> COMPLETED，
      PUBLISHED / IN_PROGRESS 可轉為 CANCELLED 或 DISPUTED。
    """
    service = ProjectService(db)
    return await service.update_project(project_id, current_user, update_data)

@my_project_router.get("/my-projects", response_model=List[ProjectOut])
async def get_my_projects(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    創業者：自己刊登的案件 (含草稿)；顧問：指派給自己的案件
    """
    service = ProjectService(db)
    return await service.get_my_projects(current_user)
