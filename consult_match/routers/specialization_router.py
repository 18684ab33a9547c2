# consult_match/routers/specialization_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from consult_match.core.database import get_db
from consult_match.core.security import require_roles
from consult_match.models.user import User, UserRoleEnum
from consult_match.services.specialization_service import SpecializationService
from consult_match.schemas.specialization_schema import SpecializationCreate, SpecializationOut

router = APIRouter(
    prefix="/api/specializations",
    tags=["Specializations"]
)

@router.get("", response_model=List[SpecializationOut])
async def list_specializations(db: AsyncSession = Depends(get_db)):
    """
    (公開) 獲取所有啟用中的專長標籤 (用於前端下拉選單)
    """
    service = SpecializationService(db)
    return await service.list_active()

@router.post("", response_model=SpecializationOut, status_code=status.HTTP_201_CREATED)
async def create_specialization(
    data: SpecializationCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_roles(UserRoleEnum.admin))
):
    """
    (僅限管理員) 新增專長標籤
    """
    service = SpecializationService(db)
    return await service.create_specialization(data)
