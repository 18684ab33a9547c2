# consult_match/models/specialization.py
import uuid
from sqlalchemy import Column, String, TEXT, Boolean, CHAR
from consult_match.core.database import Base

class Specialization(Base):
    __tablename__ = "specializations"
    specialization_id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), unique=True, nullable=False)
    description = Column(TEXT)
    category = Column(String(100), nullable=False)
    is_active = Column(Boolean, default=True)
