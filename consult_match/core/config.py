# consult_match/core/config.py
# 應用程式設定 (例如資料庫連線字串、Session 秘鑰、身分提供者設定等)
from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # 資料庫設定
    DATABASE_URL: str
    # (開發用) 啟動時自動建立資料表
    AUTO_CREATE_TABLES: bool = True
    # 設為 True 會在 console 印出 SQL 語句
    SQL_ECHO: bool = False

    # Session (JWT) 設定
    JWT_SECRET_KEY: str
    # JWT 演算法
    JWT_ALGORITHM: str = "HS256"
    # Session 過期時間（分鐘），預設 7 天
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7
    # Session 存放的 Cookie 名稱
    SESSION_COOKIE_NAME: str = "session"

    # 外部身分提供者 (登入 / 登出導向)
    IDENTITY_PROVIDER_URL: str = "http://localhost:8080/authorize"
    # 身分提供者回呼 token 的簽章秘鑰
    IDENTITY_PROVIDER_SECRET: str = "change-me"
    # 登入完成後導回的前端路徑
    POST_LOGIN_REDIRECT: str = "/"

    # CORS (生產環境請指定前端網域)
    CORS_ORIGINS: List[str] = ["*"]

    # 日誌等級
    LOG_LEVEL: str = "INFO"

    # 分頁設定
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # 環境變數檔案
    class Config:
        env_file = ".env"

# 建立設定實例
settings = Settings()
