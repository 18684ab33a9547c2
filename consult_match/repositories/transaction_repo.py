# consult_match/repositories/transaction_repo.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from typing import List

from consult_match.models.transaction import Transaction

class TransactionRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_transaction(self, transaction: Transaction) -> Transaction:
        self.db.add(transaction)
        await self.db.commit()
        await self.db.refresh(transaction)
        return transaction

    async def list_transactions_by_user(self, user_id: str) -> List[Transaction]:
        stmt = (
            select(Transaction)
            .where(Transaction.user_id == user_id)
            .order_by(Transaction.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()
