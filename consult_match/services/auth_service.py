# consult_match/services/auth_service.py
import logging
from fastapi import HTTPException, status
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from consult_match.core.database import utcnow
from consult_match.core.security import create_access_token, verify_identity_token
from consult_match.models.user import User, UserStatusEnum
from consult_match.repositories.user_repo import UserRepository
from consult_match.schemas.user_schema import IdentityClaims, AuthUserOut
from consult_match.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

class AuthService:
    def __init__(self, db: AsyncSession):
        self.user_repo = UserRepository(db)
        self.profile_service = ProfileService(db)

    async def login_with_identity_token(self, token: str) -> User:
        """
        身分提供者回呼：
        1. 驗證 token
        2. 依 'sub' 新增或更新使用者 (第一次登入即建立)
        3. 記錄登入時間 / 次數，Email 已驗證則啟用帳號
        """
        raw_claims = verify_identity_token(token)
        if raw_claims is None:
            raise HTTPException(status.HTTP_401_UNAUTHORIZED, "身分驗證失敗")
        try:
            claims = IdentityClaims.model_validate(raw_claims)
        except ValidationError:
            raise HTTPException(status.HTTP_401_UNAUTHORIZED, "身分驗證資料不完整")

        # 'role' 不在 upsert 範圍內，只有 Onboarding 才會設定
        user = await self.user_repo.upsert_user({
            "user_id": claims.sub,
            "email": claims.email,
            "first_name": claims.first_name,
            "last_name": claims.last_name,
            "profile_image_url": claims.profile_image_url,
            "email_verified": claims.email_verified,
        })

        user.last_login = utcnow()
        user.login_count = (user.login_count or 0) + 1
        if claims.email_verified and user.status == UserStatusEnum.pending_verification:
            user.status = UserStatusEnum.active

        user = await self.user_repo.update_user(user)
        logger.info(f"使用者登入: {user.user_id} (第 {user.login_count} 次)")
        return user

    def create_session_token(self, user: User) -> str:
        """
        為指定使用者建立 Session token ('sub' = user_id)
        """
        return create_access_token(data={"sub": user.user_id})

    async def get_auth_user(self, user: User) -> AuthUserOut:
        """
        目前登入者 + 依角色附上的 Profile (尚未 Onboarding 則為 null)
        """
        auth_user = AuthUserOut.model_validate(user)
        auth_user.profile = await self.profile_service.get_my_profile_out(user)
        return auth_user
