# consult_match/models/entrepreneur_profile.py
import uuid
from sqlalchemy import Column, String, TEXT, ForeignKey, JSON, DECIMAL, CHAR, INT, Boolean, TIMESTAMP
from sqlalchemy.orm import relationship
from consult_match.core.database import Base, utcnow


class EntrepreneurProfile(Base):
    __tablename__ = "entrepreneur_profiles"
    profile_id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(CHAR(36), ForeignKey("users.user_id", ondelete="CASCADE"), unique=True, nullable=False, index=True)

    # --- 公司資訊 ---
    company_name = Column(TEXT, nullable=False)
    company_description = Column(TEXT)
    industry = Column(TEXT, nullable=False)
    founded_at = Column(TIMESTAMP(timezone=True))
    employee_count = Column(INT)
    monthly_revenue = Column(DECIMAL(12, 2))
    website = Column(TEXT)
    linkedin = Column(TEXT)
    instagram = Column(TEXT)
    business_stage = Column(String(20), nullable=False) # "idea", "prototype", "launch", "growth"
    pitch_deck_url = Column(TEXT)
    business_plan_url = Column(TEXT)

    # --- 地區 ---
    country = Column(String(100), default="Brasil", nullable=False)
    state = Column(String(100), nullable=False)
    city = Column(String(100), nullable=False)
    is_remote = Column(Boolean, default=False)

    # --- 需求 ---
    budget = Column(DECIMAL(10, 2))
    urgency_level = Column(String(20)) # "low", "medium", "high"
    consultation_areas = Column(JSON, default=list)

    # --- 統計欄位 (由系統維護，不接受前端寫入) ---
    total_projects = Column(INT, default=0)
    average_rating = Column(DECIMAL(3, 2))
    total_spent = Column(DECIMAL(12, 2), default=0)

    created_at = Column(TIMESTAMP(timezone=True), default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), default=utcnow, onupdate=utcnow)

    # 1-to-1 反向關聯到 User
    user = relationship("User", back_populates="entrepreneur_profile")

    # 此創業者刊登的案件
    projects = relationship(
        "Project",
        back_populates="entrepreneur"
    )
