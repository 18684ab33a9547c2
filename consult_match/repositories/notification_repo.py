# consult_match/repositories/notification_repo.py

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from typing import List, Optional
import logging

from consult_match.core.database import utcnow
from consult_match.models.notification import Notification

logger = logging.getLogger(__name__)

class NotificationRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_notification(self, notification: Notification) -> Notification:
        """
        新增一筆通知
        (注意) 只 flush 不 commit，隨呼叫端 (提案 / 訊息 / 案件) 的交易一起提交
        """
        self.db.add(notification)
        await self.db.flush()
        return notification

    async def get_notification_by_id(self, notification_id: str) -> Optional[Notification]:
        """
        依 ID 獲取通知 (主要用於權限檢查)
        """
        stmt = select(Notification).where(Notification.notification_id == notification_id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def list_notifications_by_user(self, user_id: str, limit: int = 20) -> List[Notification]:
        """
        獲取某位使用者的通知 (依時間降序排列)
        """
        stmt = (
            select(Notification)
            .where(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc())
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def mark_as_read(self, notification: Notification) -> Notification:
        """
        將單一通知設為已讀
        """
        notification.is_read = True
        notification.read_at = utcnow()
        await self.db.commit()
        await self.db.refresh(notification)
        logger.info(f"通知已讀: {notification.notification_id}")
        return notification
