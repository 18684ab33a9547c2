# consult_match/routers/message_router.py

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from consult_match.core.database import get_db
from consult_match.core.security import get_current_user
from consult_match.services.message_service import MessageService
from consult_match.schemas.message_schema import MessageCreate, MessageOut, ConversationOut
from consult_match.models.user import User
from typing import List, Optional

router = APIRouter(
    prefix="/api",
    tags=["Messaging"],
    dependencies=[Depends(get_current_user)]
)

@router.post(
    "/messages",
    response_model=MessageOut,
    status_code=status.HTTP_201_CREATED,
    summary="傳送訊息"
)
async def send_message(
    message_data: MessageCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    service = MessageService(db)
    return await service.send_message(current_user, message_data)

@router.get("/conversations", response_model=List[ConversationOut], summary="獲取對話列表")
async def list_conversations(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    每個 (對象, 案件) 一筆，附上最新訊息與未讀數
    """
    service = MessageService(db)
    return await service.get_conversations(current_user)

@router.get("/messages/{partner_id}", response_model=List[MessageOut], summary="與某人的訊息紀錄")
async def get_message_history(
    partner_id: str,
    project_id: Optional[str] = Query(None, alias="projectId"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    舊的在前；讀取不會改變已讀狀態 (請呼叫 PATCH /api/messages/{id}/read)
    """
    service = MessageService(db)
    return await service.get_history(current_user, partner_id, project_id)

@router.patch("/messages/{message_id}/read", response_model=MessageOut, summary="將訊息設為已讀")
async def mark_message_as_read(
    message_id: str,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    service = MessageService(db)
    return await service.mark_as_read(message_id, current_user)
