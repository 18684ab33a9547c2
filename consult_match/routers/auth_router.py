# consult_match/routers/auth_router.py
import logging
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession
from urllib.parse import urlencode
from consult_match.core.config import settings
from consult_match.core.database import get_db
from consult_match.core.security import get_current_user
from consult_match.models.user import User
from consult_match.services.auth_service import AuthService
from consult_match.schemas.user_schema import AuthUserOut


logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api", # 路由前綴
    tags=["Auth"]  # API 文件分類標籤
)


@router.get("/login")
async def login(request: Request):
    """
    導向外部身分提供者登入，完成後會回呼 /api/callback
    """
    callback_url = str(request.url_for("auth_callback"))
    query = urlencode({"redirect_uri": callback_url})
    return RedirectResponse(f"{settings.IDENTITY_PROVIDER_URL}?{query}")


@router.get("/callback", name="auth_callback")
async def auth_callback(
    token: str = Query(..., description="身分提供者簽發的 token"),
    db: AsyncSession = Depends(get_db)
):
    """
    身分提供者回呼：建立 / 更新使用者，寫入 Session Cookie 後導回前端
    """
    auth_service = AuthService(db)
    user = await auth_service.login_with_identity_token(token)

    response = RedirectResponse(settings.POST_LOGIN_REDIRECT, status_code=302)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=auth_service.create_session_token(user),
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
    )
    return response


@router.get("/logout")
async def logout():
    """
    清除 Session Cookie 並導回首頁
    """
    response = RedirectResponse("/", status_code=302)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return response


@router.get("/auth/user", response_model=AuthUserOut)
async def get_auth_user(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    目前登入者的資料 + 依角色附上的 Profile (role 為 null 代表尚未 Onboarding)
    """
    auth_service = AuthService(db)
    return await auth_service.get_auth_user(current_user)
