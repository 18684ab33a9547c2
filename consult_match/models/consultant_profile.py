# consult_match/models/consultant_profile.py
import uuid
from sqlalchemy import Column, String, TEXT, ForeignKey, JSON, DECIMAL, CHAR, INT, Boolean, TIMESTAMP
from sqlalchemy.orm import relationship
from consult_match.core.database import Base, utcnow

class ConsultantProfile(Base):
    __tablename__ = "consultant_profiles"
    profile_id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(CHAR(36), ForeignKey("users.user_id", ondelete="CASCADE"), unique=True, nullable=False, index=True)

    # --- 專業資訊 ---
    title = Column(TEXT, nullable=False)
    bio = Column(TEXT, nullable=False)
    experience = Column(INT, nullable=False) # 年資
    hourly_rate = Column(DECIMAL(8, 2))
    project_rate = Column(DECIMAL(10, 2))
    education = Column(JSON, default=list)
    certifications = Column(JSON, default=list)
    languages = Column(JSON, default=lambda: ["português"])

    # --- 地區 / 時區 ---
    country = Column(String(100), default="Brasil", nullable=False)
    state = Column(String(100), nullable=False)
    city = Column(String(100), nullable=False)
    timezone = Column(String(64), default="America/Sao_Paulo")
    is_remote = Column(Boolean, default=True)
    availability = Column(JSON)

    # (重要) 顧問服務的產業，搜尋時以「包含」比對
    industries = Column(JSON, default=list)

    # --- 認證 ---
    is_verified = Column(Boolean, default=False)
    verified_at = Column(TIMESTAMP(timezone=True))
    documents_url = Column(JSON, default=list)

    # --- 統計欄位 (由系統維護，不接受前端寫入) ---
    total_projects = Column(INT, default=0)
    average_rating = Column(DECIMAL(3, 2))
    total_earnings = Column(DECIMAL(12, 2), default=0)
    response_time = Column(INT) # 小時
    profile_views = Column(INT, default=0, nullable=False)

    # 是否接案 (關閉後不會出現在搜尋結果)
    accepting_clients = Column(Boolean, default=True, nullable=False)
    instant_booking = Column(Boolean, default=False)

    created_at = Column(TIMESTAMP(timezone=True), default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), default=utcnow, onupdate=utcnow)

    # 1-to-1 反向關聯到 User
    user = relationship("User", back_populates="consultant_profile")

    # 指派給此顧問的案件
    projects = relationship(
        "Project",
        back_populates="consultant"
    )

    # 作品集 (刪除 Profile 時一併刪除)
    portfolio_items = relationship(
        "PortfolioItem",
        back_populates="consultant",
        cascade="all, delete-orphan"
    )
