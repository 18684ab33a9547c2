# consult_match/repositories/message_repo.py

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_, or_
from sqlalchemy.orm import selectinload
from typing import Optional, List

from consult_match.core.database import utcnow
from consult_match.models.message import Message

class MessageRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_message(self, message: Message) -> Message:
        self.db.add(message)
        await self.db.commit()
        await self.db.refresh(message)
        return message

    async def get_message_by_id(self, message_id: str) -> Optional[Message]:
        stmt = select(Message).where(Message.message_id == message_id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_messages_between_users(
        self, user_id: str, partner_id: str, project_id: Optional[str] = None
    ) -> List[Message]:
        """
        兩人之間的訊息 (不分方向)，舊的在前
        有 project_id 時只取該案件的訊息
        """
        stmt = select(Message).where(
            or_(
                and_(Message.sender_id == user_id, Message.receiver_id == partner_id),
                and_(Message.sender_id == partner_id, Message.receiver_id == user_id),
            )
        )
        if project_id:
            stmt = stmt.where(Message.project_id == project_id)

        stmt = stmt.order_by(Message.created_at.asc())
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def list_messages_for_user(self, user_id: str) -> List[Message]:
        """
        使用者收發的所有訊息，新的在前 (對話列表用)
        一併載入雙方 User，用於顯示對話對象
        """
        stmt = (
            select(Message)
            .where(or_(Message.sender_id == user_id, Message.receiver_id == user_id))
            .options(
                selectinload(Message.sender),
                selectinload(Message.receiver)
            )
            .order_by(Message.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def mark_as_read(self, message: Message) -> Message:
        message.is_read = True
        message.read_at = utcnow()
        await self.db.commit()
        await self.db.refresh(message)
        return message
