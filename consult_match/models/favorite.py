# consult_match/models/favorite.py

import uuid
from sqlalchemy import Column, String, CHAR, ForeignKey, TIMESTAMP, UniqueConstraint
from sqlalchemy.orm import relationship
from consult_match.core.database import Base, utcnow

# 可收藏的目標類型 (target_id 不設外鍵，由 target_type 區分)
FAVORITE_TARGET_TYPES = ("consultant", "project")

class Favorite(Base):
    __tablename__ = "favorites"
    __table_args__ = (
        UniqueConstraint("user_id", "target_id", "target_type", name="uq_favorite_target"),
    )

    favorite_id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(CHAR(36), ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)
    target_id = Column(CHAR(36), nullable=False, index=True)
    target_type = Column(String(50), nullable=False) # "consultant", "project"
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow)

    user = relationship("User", back_populates="favorites")
