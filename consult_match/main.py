import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from consult_match.core.config import settings
from consult_match.core.database import init_db, close_db
from consult_match.routers import (
    auth_router, profile_router, consultant_router,
    portfolio_router, message_router, favorite_router,
    dashboard_router, specialization_router,
    notification_router, transaction_router
)

# 單獨匯入有 *兩個* router 的檔案
from consult_match.routers.project_router import (
    router as project_main_router,
    my_project_router
)
from consult_match.routers.proposal_router import (
    router as proposal_main_router,
    my_proposal_router
)

# --- 匯入所有 Model 檔案 ---
# 都在應用程式啟動時被 SQLAlchemy 註冊。
from consult_match.models import user
from consult_match.models import entrepreneur_profile
from consult_match.models import consultant_profile
from consult_match.models import project
from consult_match.models import proposal
from consult_match.models import message
from consult_match.models import favorite
from consult_match.models import portfolio_item
from consult_match.models import notification
from consult_match.models import transaction
from consult_match.models import specialization


# 設定基礎日誌
logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__) # 建立一個 logger 實例


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_CREATE_TABLES:
        await init_db()
    yield
    await close_db()


app = FastAPI(title="ConsultMatch API", lifespan=lifespan)

# --- 設定 CORS (跨來源資源共用) ---
# Session 使用 Cookie，所以需要 allow_credentials
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"], # 允許所有 HTTP 方法
    allow_headers=["*"], # 允許所有 HTTP 標頭
)


# --- 錯誤處理 ---
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": "請求資料格式錯誤", "errors": jsonable_encoder(exc.errors())},
    )

@app.exception_handler(IntegrityError)
async def integrity_exception_handler(request: Request, exc: IntegrityError):
    # 唯一鍵衝突 (e.g. 同一個使用者重複建立 Profile)
    logger.warning(f"資料衝突: {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "資料已存在或與現有資料衝突"},
    )

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"未預期的錯誤: {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "伺服器內部錯誤"},
    )


# --- 根路徑 ---
@app.get("/")
def read_root():
    return {"status": "success", "message": "Backend is running!"}

# --- 載入 API 路由 ---
app.include_router(auth_router.router)
app.include_router(profile_router.router)
app.include_router(project_main_router)
app.include_router(my_project_router)
app.include_router(proposal_main_router)
app.include_router(my_proposal_router)
app.include_router(consultant_router.router)
app.include_router(portfolio_router.router)
app.include_router(message_router.router)
app.include_router(favorite_router.router)
app.include_router(dashboard_router.router)
app.include_router(specialization_router.router)
app.include_router(notification_router.router)
app.include_router(transaction_router.router)
