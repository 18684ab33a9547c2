# consult_match/models/notification.py

import enum
import uuid
from sqlalchemy import Column, String, TEXT, BOOLEAN, CHAR, ForeignKey, TIMESTAMP, JSON, Enum
from sqlalchemy.orm import relationship
from consult_match.core.database import Base, utcnow

class NotificationTypeEnum(str, enum.Enum):
    message = "MESSAGE"
    proposal = "PROPOSAL"
    project_update = "PROJECT_UPDATE"
    payment = "PAYMENT"
    system = "SYSTEM"
    marketing = "MARKETING"

class Notification(Base):
    __tablename__ = "notifications"

    notification_id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # (重要) 關聯到接收通知的 user
    user_id = Column(CHAR(36), ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)

    type = Column(
        Enum(NotificationTypeEnum, name="notification_type", values_callable=lambda obj: [e.value for e in obj]),
        nullable=False
    )
    title = Column(String(255), nullable=False)
    message = Column(TEXT, nullable=False)

    # (關鍵) 前端導頁所需的資料 (e.g. {"projectId": ...})
    data = Column(JSON)

    is_read = Column(BOOLEAN, default=False, nullable=False)
    read_at = Column(TIMESTAMP(timezone=True))
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow)

    # 建立反向關聯
    user = relationship("User", back_populates="notifications")
