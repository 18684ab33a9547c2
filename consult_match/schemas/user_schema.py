# consult_match/schemas/user_schema.py
from pydantic import Field
from datetime import datetime
from typing import Optional, Union
from consult_match.models.user import UserRoleEnum, UserStatusEnum
from consult_match.schemas.base_schema import CamelModel
from consult_match.schemas.profile_schema import EntrepreneurProfileOut, ConsultantProfileOut


# 身分提供者回呼 token 內的資料
class IdentityClaims(CamelModel):
    sub: str = Field(..., min_length=1)
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    email_verified: bool = False


# 精簡版，用於巢狀顯示 (顧問列表、對話對象)
class UserBriefOut(CamelModel):
    user_id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None


class UserOut(UserBriefOut):
    email: Optional[str] = None
    role: Optional[UserRoleEnum] = None # Onboarding 前為 null
    status: UserStatusEnum
    email_verified: bool = False
    last_login: Optional[datetime] = None
    login_count: int = 0
    created_at: Optional[datetime] = None


# GET /api/auth/user：使用者 + 依角色附上的 Profile
class AuthUserOut(UserOut):
    profile: Optional[Union[EntrepreneurProfileOut, ConsultantProfileOut]] = None
