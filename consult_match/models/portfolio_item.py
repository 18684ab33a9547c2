# consult_match/models/portfolio_item.py

import uuid
from sqlalchemy import Column, String, TEXT, CHAR, ForeignKey, TIMESTAMP, Boolean, JSON
from sqlalchemy.orm import relationship
from consult_match.core.database import Base, utcnow

class PortfolioItem(Base):
    __tablename__ = "portfolio_items"

    item_id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    # 擁有者：顧問 Profile (非 User)
    consultant_id = Column(CHAR(36), ForeignKey("consultant_profiles.profile_id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(TEXT, nullable=False)
    description = Column(TEXT, nullable=False)
    industry = Column(String(100))
    duration = Column(String(100))
    results = Column(TEXT)
    image_url = Column(String(500))
    case_study_url = Column(String(500))
    client_name = Column(String(255))
    testimonial = Column(TEXT)
    tags = Column(JSON, default=list)
    is_public = Column(Boolean, default=True, nullable=False)

    created_at = Column(TIMESTAMP(timezone=True), default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), default=utcnow, onupdate=utcnow)

    consultant = relationship("ConsultantProfile", back_populates="portfolio_items")
