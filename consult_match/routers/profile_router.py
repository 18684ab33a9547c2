# consult_match/routers/profile_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from consult_match.core.database import get_db
from consult_match.core.security import get_current_user
from consult_match.models.user import User
from consult_match.services.profile_service import ProfileService
from consult_match.schemas.profile_schema import (
    EntrepreneurProfileCreate, EntrepreneurProfileUpdate, EntrepreneurProfileOut,
    ConsultantProfileCreate, ConsultantProfileUpdate, ConsultantProfileOut
)

router = APIRouter(
    prefix="/api/profiles",
    tags=["Profiles"],
    dependencies=[Depends(get_current_user)]
)

@router.post(
    "/entrepreneur",
    response_model=EntrepreneurProfileOut,
    status_code=status.HTTP_201_CREATED
)
async def create_entrepreneur_profile(
    profile_data: EntrepreneurProfileCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Onboarding (創業者)：設定角色並建立 Profile。
    角色已設定過則回傳 409。
    """
    service = ProfileService(db)
    return await service.create_entrepreneur_profile(current_user, profile_data)

@router.post(
    "/consultant",
    response_model=ConsultantProfileOut,
    status_code=status.HTTP_201_CREATED
)
async def create_consultant_profile(
    profile_data: ConsultantProfileCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Onboarding (顧問)：設定角色並建立 Profile。
    角色已設定過則回傳 409。
    """
    service = ProfileService(db)
    return await service.create_consultant_profile(current_user, profile_data)

@router.put("/entrepreneur", response_model=EntrepreneurProfileOut)
async def update_entrepreneur_profile(
    update_data: EntrepreneurProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    部分更新自己的創業者 Profile (只寫入有傳的欄位)
    """
    service = ProfileService(db)
    return await service.update_entrepreneur_profile(current_user, update_data)

@router.put("/consultant", response_model=ConsultantProfileOut)
async def update_consultant_profile(
    update_data: ConsultantProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    service = ProfileService(db)
    return await service.update_consultant_profile(current_user, update_data)
