# consult_match/routers/transaction_router.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from consult_match.core.database import get_db
from consult_match.core.security import get_current_user
from consult_match.models.user import User
from consult_match.services.transaction_service import TransactionService
from consult_match.schemas.transaction_schema import TransactionOut

router = APIRouter(
    prefix="/api",
    tags=["Transactions"]
)

@router.get("/my-transactions", response_model=List[TransactionOut])
async def get_my_transactions(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    service = TransactionService(db)
    return await service.get_my_transactions(current_user)
