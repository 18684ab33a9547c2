# consult_match/services/message_service.py

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

# 匯入 Schemas
from consult_match.schemas.message_schema import MessageCreate, ConversationOut

# 匯入 Repositories
from consult_match.repositories.message_repo import MessageRepository
from consult_match.repositories.project_repo import ProjectRepository
from consult_match.repositories.user_repo import UserRepository

from consult_match.models.user import User
from consult_match.models.message import Message
from consult_match.models.notification import NotificationTypeEnum
from consult_match.utils.conversations import group_conversations

# 匯入 NotificationService 以便使用
from consult_match.services.notification_service import NotificationService


logger = logging.getLogger(__name__)

# 通知內容預覽長度
PREVIEW_LENGTH = 80


class MessageService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.message_repo = MessageRepository(db)
        self.project_repo = ProjectRepository(db)
        self.user_repo = UserRepository(db)
        self.notification_service = NotificationService(db)

    async def send_message(self, sender: User, message_data: MessageCreate) -> Message:
        """
        傳送訊息：sender 一律是登入者，receiver 必須存在且不能是自己
        """
        if message_data.receiver_id == sender.user_id:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "不能傳訊息給自己")

        receiver = await self.user_repo.get_user_by_id(message_data.receiver_id)
        if not receiver:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "收件者不存在")

        if message_data.project_id:
            project = await self.project_repo.get_project_by_id(message_data.project_id)
            if not project:
                raise HTTPException(status.HTTP_404_NOT_FOUND, "案件不存在")

        if message_data.parent_id:
            parent = await self.message_repo.get_message_by_id(message_data.parent_id)
            if not parent:
                raise HTTPException(status.HTTP_404_NOT_FOUND, "回覆的訊息不存在")

        new_message = Message(
            **message_data.model_dump(),
            sender_id=sender.user_id,
            is_read=False
        )

        preview = message_data.content[:PREVIEW_LENGTH]
        await self.notification_service.create_notification(
            user_id=receiver.user_id,
            type=NotificationTypeEnum.message,
            title=f"{sender.first_name or sender.email} 傳來新訊息",
            message=preview,
            data={"senderId": sender.user_id, "projectId": message_data.project_id}
        )

        created = await self.message_repo.create_message(new_message)
        logger.info(f"訊息 {created.message_id}: {sender.user_id} -> {receiver.user_id}")
        return created

    async def get_conversations(self, user: User) -> List[ConversationOut]:
        messages = await self.message_repo.list_messages_for_user(user.user_id)

        # 對話對象的 User (已由 Repository 預先載入)
        partners = {}
        for message in messages:
            partners[message.sender_id] = message.sender
            partners[message.receiver_id] = message.receiver

        return [
            ConversationOut.model_validate({**conversation, "partner": partners.get(conversation["partner_id"])})
            for conversation in group_conversations(messages, user.user_id)
        ]

    async def get_history(self, user: User, partner_id: str, project_id: Optional[str] = None) -> List[Message]:
        """
        與某人的對話紀錄 (舊的在前)，只讀取，不會改變已讀狀態
        """
        return await self.message_repo.get_messages_between_users(user.user_id, partner_id, project_id)

    async def mark_as_read(self, message_id: str, user: User) -> Message:
        message = await self.message_repo.get_message_by_id(message_id)
        if not message:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "訊息不存在")
        if message.receiver_id != user.user_id:
            raise HTTPException(status.HTTP_403_FORBIDDEN, "只有收件者可以標記已讀")
        if message.is_read:
            return message
        return await self.message_repo.mark_as_read(message)
