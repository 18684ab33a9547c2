# consult_match/schemas/consultant_schema.py
from typing import Optional
from consult_match.schemas.profile_schema import ConsultantProfileOut
from consult_match.schemas.user_schema import UserBriefOut


class ConsultantWithUserOut(ConsultantProfileOut):
    """
    顧問搜尋 / 公開頁使用：Profile + 使用者姓名與頭像
    會讀取 ConsultantProfile model 上的 'user' relationship
    """
    user: Optional[UserBriefOut] = None
