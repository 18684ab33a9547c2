# consult_match/routers/dashboard_router.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Dict

from consult_match.core.database import get_db
from consult_match.core.security import get_current_user
from consult_match.models.user import User
from consult_match.services.stats_service import StatsService

router = APIRouter(
    prefix="/api/dashboard",
    tags=["Dashboard"]
)

@router.get("/stats", response_model=Dict[str, int])
async def get_dashboard_stats(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    - 創業者: activeProjects / totalProposals / favoriteConsultants
    - 顧問: activeProjects / sentProposals
    - 尚未建立 Profile: {}
    """
    service = StatsService(db)
    return await service.get_dashboard_stats(current_user)
