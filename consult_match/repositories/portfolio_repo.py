# consult_match/repositories/portfolio_repo.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from typing import List

from consult_match.models.portfolio_item import PortfolioItem
from consult_match.schemas.portfolio_schema import PortfolioItemCreate

class PortfolioRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_portfolio_item(self, consultant_id: str, item_data: PortfolioItemCreate) -> PortfolioItem:
        new_item = PortfolioItem(
            **item_data.model_dump(),
            consultant_id=consultant_id
        )
        self.db.add(new_item)
        await self.db.commit()
        await self.db.refresh(new_item)
        return new_item

    async def list_public_items(self, consultant_id: str) -> List[PortfolioItem]:
        """
        顧問的公開作品集 (新的在前)
        """
        stmt = (
            select(PortfolioItem)
            .where(
                PortfolioItem.consultant_id == consultant_id,
                PortfolioItem.is_public == True
            )
            .order_by(PortfolioItem.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()
