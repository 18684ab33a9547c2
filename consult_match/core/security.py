# consult_match/core/security.py
# 負責 Session (JWT) 的產生與驗證、身分提供者 token 驗證，以及角色檢查
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from consult_match.core.config import settings
from consult_match.core.database import get_db
from consult_match.repositories.user_repo import UserRepository
from consult_match.models.user import User, UserRoleEnum, UserStatusEnum

# (重要) Session 可放在 Cookie，也接受 Authorization: Bearer <token>
bearer_scheme = HTTPBearer(auto_error=False)

# 無法登入的帳號狀態
BLOCKED_STATUSES = {UserStatusEnum.suspended, UserStatusEnum.inactive}


# 1. Session 權杖產生與驗證
def create_access_token(data: dict) -> str:
    """
    根據傳入的 data (e.g., {"sub": user_id}) 產生 Session JWT
    """
    to_encode = data.copy() # 避免修改原始資料
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})

    encoded_jwt = jwt.encode(
        to_encode,
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM
    )
    return encoded_jwt

def verify_session_token(token: str) -> Optional[str]:
    """
    驗證 Session JWT，回傳 user_id ('sub') 或 None
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM]
        )
    except JWTError:
        return None
    return payload.get("sub")

# 2. 身分提供者回呼 token
def verify_identity_token(token: str) -> Optional[dict]:
    """
    驗證身分提供者簽發的 token，回傳 claims 或 None
    """
    try:
        claims = jwt.decode(
            token,
            settings.IDENTITY_PROVIDER_SECRET,
            algorithms=[settings.JWT_ALGORITHM]
        )
    except JWTError:
        return None
    if not claims.get("sub"):
        return None
    return claims


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db)
) -> User:
    """
    FastAPI 依賴項：驗證 Session 並回傳 User Model
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="尚未登入或登入已過期",
        headers={"WWW-Authenticate": "Bearer"},
    )

    token = credentials.credentials if credentials else request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        raise credentials_exception

    user_id = verify_session_token(token)
    if user_id is None:
        raise credentials_exception

    user_repo = UserRepository(db)
    user = await user_repo.get_user_by_id(user_id=user_id)

    if user is None:
        raise credentials_exception

    if user.status in BLOCKED_STATUSES:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="此帳號已被停權")

    return user


def require_roles(*roles: UserRoleEnum):
    """
    角色檢查 Dependency
    用法: current_user: User = Depends(require_roles(UserRoleEnum.consultant))
    """
    async def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in roles:
            allowed = "、".join(role.value for role in roles)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"此操作僅限 {allowed} 角色"
            )
        return current_user

    return role_checker
