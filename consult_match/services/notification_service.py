# consult_match/services/notification_service.py

from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException, status
from typing import List, Optional

from consult_match.models.user import User
from consult_match.models.notification import Notification, NotificationTypeEnum
from consult_match.repositories.notification_repo import NotificationRepository

import logging

logger = logging.getLogger(__name__)

class NotificationService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = NotificationRepository(db)

    async def create_notification(
        self,
        user_id: str,
        type: NotificationTypeEnum,
        title: str,
        message: str,
        data: Optional[dict] = None
    ) -> Notification:
        """
        (內部使用) 供其他 Service 呼叫的介面
        通知只加入 Session，由呼叫端的 commit 一併寫入
        """
        new_notification = Notification(
            user_id=user_id,
            type=type,
            title=title,
            message=message,
            data=data or {},
            is_read=False
        )
        logger.info(f"建立通知 for User ID: {user_id}, Type: {type.value}, Title: {title}")
        return await self.repo.create_notification(new_notification)

    async def get_my_notifications(self, user: User) -> List[Notification]:
        """
        (API 用) 獲取當前登入者的通知列表
        """
        return await self.repo.list_notifications_by_user(user.user_id)

    async def mark_notification_as_read(
        self,
        notification_id: str,
        user: User
    ) -> Notification:
        """
        (API 用) 將通知設為已讀，並檢查權限
        """
        notification = await self.repo.get_notification_by_id(notification_id)

        if not notification:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "通知不存在")

        # (重要) 只能標記自己的通知
        if notification.user_id != user.user_id:
            raise HTTPException(status.HTTP_403_FORBIDDEN, "無權操作此通知")

        if notification.is_read:
            return notification # 已讀，直接回傳

        return await self.repo.mark_as_read(notification)
