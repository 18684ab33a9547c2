# consult_match/routers/consultant_router.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from consult_match.core.config import settings
from consult_match.core.database import get_db
from consult_match.services.consultant_service import ConsultantService
from consult_match.schemas.consultant_schema import ConsultantWithUserOut

router = APIRouter(
    prefix="/api/consultants",
    tags=["Consultants"]
)

@router.get(
    "",
    response_model=List[ConsultantWithUserOut],
    summary="搜尋接案中的顧問"
)
async def search_consultants(
    search: Optional[str] = Query(None, description="職稱 / 簡介 / 姓名 關鍵字"),
    specialization: Optional[str] = Query(None, description="產業專長 (industries 需包含)"),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db)
):
    """
    (公開) 只會列出 acceptingClients = true 的顧問，依平均評分排序
    """
    service = ConsultantService(db)
    return await service.search_consultants(
        search=search, specialization=specialization, limit=limit, offset=offset
    )

@router.get("/{user_id}", response_model=ConsultantWithUserOut)
async def get_consultant(
    user_id: str,
    db: AsyncSession = Depends(get_db)
):
    """
    (公開) 依 User ID 取得顧問 Profile，會累加 profileViews
    """
    service = ConsultantService(db)
    return await service.get_consultant(user_id)
