import json
import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, declarative_base
from consult_match.core.config import settings

logger = logging.getLogger(__name__)


def json_serializer(value) -> str:
    # 保留非 ASCII 字元 (e.g. "Gestão")，陣列欄位的包含查詢依賴原文比對
    return json.dumps(value, ensure_ascii=False)


# 建立非同步引擎
engine = create_async_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True, # 每次從連線池取連線前，先 PING 一次，確保連線有效
    echo=settings.SQL_ECHO,
    json_serializer=json_serializer,
)

# 建立非同步 Session
AsyncSessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

# 建立 ORM Model 基底類別
Base = declarative_base()


def utcnow() -> datetime:
    """欄位預設時間 (UTC，含微秒，排序用)"""
    return datetime.now(timezone.utc)


# (重要) 取得 DB Session 的 Dependency
async def get_db() -> AsyncSession:
    """FastAPI Dependency: 取得非同步資料庫 session"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            # 發生錯誤時回滾
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db() -> None:
    """
    啟動時建立所有資料表 (AUTO_CREATE_TABLES)
    (注意) 所有 Model 模組須已在 main.py 匯入，才會註冊到 Base.metadata
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("資料表建立完成")


async def close_db() -> None:
    await engine.dispose()
    logger.info("資料庫連線已關閉")
