# consult_match/repositories/favorite_repo.py
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from typing import List, Optional

from consult_match.models.favorite import Favorite

class FavoriteRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_favorite(self, user_id: str, target_id: str, target_type: str) -> Optional[Favorite]:
        stmt = select(Favorite).where(
            Favorite.user_id == user_id,
            Favorite.target_id == target_id,
            Favorite.target_type == target_type
        )
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def add_favorite(self, user_id: str, target_id: str, target_type: str) -> Favorite:
        favorite = Favorite(user_id=user_id, target_id=target_id, target_type=target_type)
        self.db.add(favorite)
        await self.db.commit()
        await self.db.refresh(favorite)
        return favorite

    async def remove_favorite(self, user_id: str, target_id: str, target_type: str) -> None:
        stmt = delete(Favorite).where(
            Favorite.user_id == user_id,
            Favorite.target_id == target_id,
            Favorite.target_type == target_type
        )
        await self.db.execute(stmt)
        await self.db.commit()

    async def list_favorites(self, user_id: str, target_type: Optional[str] = None) -> List[Favorite]:
        stmt = select(Favorite).where(Favorite.user_id == user_id)
        if target_type:
            stmt = stmt.where(Favorite.target_type == target_type)
        stmt = stmt.order_by(Favorite.created_at.desc())
        result = await self.db.execute(stmt)
        return result.scalars().all()
