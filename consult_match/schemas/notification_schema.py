# consult_match/schemas/notification_schema.py

from datetime import datetime
from typing import Optional
from consult_match.models.notification import NotificationTypeEnum
from consult_match.schemas.base_schema import CamelModel

class NotificationOut(CamelModel):
    """
    用於 API 回傳的通知格式
    """
    notification_id: str
    user_id: str
    type: NotificationTypeEnum
    title: str
    message: str
    data: Optional[dict] = None
    is_read: bool
    read_at: Optional[datetime] = None
    created_at: datetime
