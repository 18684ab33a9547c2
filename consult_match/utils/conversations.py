# consult_match/utils/conversations.py
from typing import Dict, List, Tuple

# 未關聯案件的對話歸在同一組
GENERAL_CONVERSATION = "general"


def _partner_of(message, user_id: str) -> str:
    return message.receiver_id if message.sender_id == user_id else message.sender_id


def group_conversations(messages: List, user_id: str) -> List[Dict]:
    """
    將使用者收發的訊息整理成對話列表

    - messages 必須是「新的在前」(list_messages_for_user 的順序)
    - 以 (對話對象, 案件 或 "general") 分組，每組一筆
    - last_message: 該組最新的一則訊息
    - unread_count: 對方傳給我且尚未讀取的數量
    - 回傳順序依各組最新訊息時間 (新的在前)
    """
    conversations: Dict[Tuple[str, str], Dict] = {}

    for message in messages:
        partner_id = _partner_of(message, user_id)
        key = (partner_id, message.project_id or GENERAL_CONVERSATION)

        conversation = conversations.get(key)
        if conversation is None:
            # 第一次出現 = 這組最新的一則
            conversation = {
                "partner_id": partner_id,
                "project_id": message.project_id,
                "last_message": message,
                "unread_count": 0,
            }
            conversations[key] = conversation

        if message.sender_id != user_id and not message.is_read:
            conversation["unread_count"] += 1

    return list(conversations.values())

