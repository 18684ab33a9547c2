# consult_match/models/message.py

import uuid
from sqlalchemy import Column, Text, ForeignKey, TIMESTAMP, CHAR, Boolean, JSON
from sqlalchemy.orm import relationship
from consult_match.core.database import Base, utcnow

class Message(Base):
    __tablename__ = "messages"
    message_id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # (可選) 訊息所屬的案件，NULL 表示一般對話
    project_id = Column(CHAR(36), ForeignKey("projects.project_id", ondelete="SET NULL"), nullable=True, index=True)
    sender_id = Column(CHAR(36), ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)
    receiver_id = Column(CHAR(36), ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)

    content = Column(Text, nullable=False)
    attachments = Column(JSON, default=list)

    is_read = Column(Boolean, default=False, nullable=False)
    read_at = Column(TIMESTAMP(timezone=True))

    # 回覆串：指回上一則訊息
    parent_id = Column(CHAR(36), ForeignKey("messages.message_id"), nullable=True, index=True)

    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, index=True)
    updated_at = Column(TIMESTAMP(timezone=True), default=utcnow, onupdate=utcnow)

    sender = relationship("User", foreign_keys=[sender_id])
    receiver = relationship("User", foreign_keys=[receiver_id])
