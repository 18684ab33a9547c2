# consult_match/services/transaction_service.py
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from consult_match.models.user import User
from consult_match.models.transaction import Transaction
from consult_match.repositories.transaction_repo import TransactionRepository

class TransactionService:
    def __init__(self, db: AsyncSession):
        self.repo = TransactionRepository(db)

    async def get_my_transactions(self, user: User) -> List[Transaction]:
        """
        (API 用) 目前登入者的交易紀錄 (僅帳本，無實際金流)
        """
        return await self.repo.list_transactions_by_user(user.user_id)
