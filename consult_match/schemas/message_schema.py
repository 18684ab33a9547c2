# consult_match/schemas/message_schema.py
from pydantic import Field
from typing import List, Optional
from datetime import datetime
from consult_match.schemas.base_schema import CamelModel
from consult_match.schemas.user_schema import UserBriefOut

class MessageCreate(CamelModel):
    # sender_id 一律取自 Session
    receiver_id: str
    content: str = Field(..., min_length=1, description="訊息內容")
    project_id: Optional[str] = None
    attachments: List[str] = []
    # 回覆某則訊息 (討論串)
    parent_id: Optional[str] = None

class MessageOut(CamelModel):
    message_id: str
    project_id: Optional[str] = None
    sender_id: str
    receiver_id: str
    content: str
    attachments: List[str] = []
    is_read: bool
    read_at: Optional[datetime] = None
    parent_id: Optional[str] = None
    created_at: datetime

class ConversationOut(CamelModel):
    """
    對話摘要：每個 (對象, 案件) 組合一筆
    project_id 為 None 代表一般對話 (未關聯案件)
    """
    partner_id: str
    partner: Optional[UserBriefOut] = None
    project_id: Optional[str] = None
    last_message: MessageOut
    unread_count: int
