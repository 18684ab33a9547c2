# consult_match/routers/favorite_router.py
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from consult_match.core.database import get_db
from consult_match.core.security import get_current_user
from consult_match.models.user import User
from consult_match.services.favorite_service import FavoriteService
from consult_match.schemas.favorite_schema import FavoriteCreate, FavoriteOut

router = APIRouter(
    prefix="/api",
    tags=["Favorites"],
    dependencies=[Depends(get_current_user)]
)

@router.post("/favorites", response_model=FavoriteOut, status_code=status.HTTP_201_CREATED)
async def add_favorite(
    favorite_data: FavoriteCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    加入收藏 (重複加入會回傳原本那一筆)
    """
    service = FavoriteService(db)
    return await service.add_favorite(current_user, favorite_data)

@router.delete("/favorites/{target_id}/{target_type}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_favorite(
    target_id: str,
    target_type: str,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    service = FavoriteService(db)
    await service.remove_favorite(current_user, target_id, target_type)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/my-favorites", response_model=List[FavoriteOut])
async def get_my_favorites(
    target_type: Optional[str] = Query(None, alias="type"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    service = FavoriteService(db)
    return await service.list_favorites(current_user, target_type)
