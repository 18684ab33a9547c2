# consult_match/routers/portfolio_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from consult_match.core.database import get_db
from consult_match.core.security import require_roles
from consult_match.models.user import User, UserRoleEnum
from consult_match.services.portfolio_service import PortfolioService
from consult_match.schemas.portfolio_schema import PortfolioItemCreate, PortfolioItemOut

router = APIRouter(
    prefix="/api/portfolio",
    tags=["Portfolio"]
)

@router.post("", response_model=PortfolioItemOut, status_code=status.HTTP_201_CREATED)
async def create_portfolio_item(
    item_data: PortfolioItemCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_roles(UserRoleEnum.consultant))
):
    """
    (僅限顧問) 新增作品集項目
    """
    service = PortfolioService(db)
    return await service.create_item(current_user, item_data)

@router.get("/{consultant_id}", response_model=List[PortfolioItemOut])
async def list_portfolio_items(
    consultant_id: str,
    db: AsyncSession = Depends(get_db)
):
    """
    (公開) 顧問 Profile ID 的公開作品集
    """
    service = PortfolioService(db)
    return await service.list_public_items(consultant_id)
