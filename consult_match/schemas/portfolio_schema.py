# consult_match/schemas/portfolio_schema.py
from pydantic import Field
from datetime import datetime
from typing import List, Optional
from consult_match.schemas.base_schema import CamelModel

class PortfolioItemBase(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    industry: Optional[str] = None
    duration: Optional[str] = None
    results: Optional[str] = None
    image_url: Optional[str] = None
    case_study_url: Optional[str] = None
    client_name: Optional[str] = None
    testimonial: Optional[str] = None
    tags: List[str] = []
    is_public: bool = True

class PortfolioItemCreate(PortfolioItemBase):
    pass

class PortfolioItemOut(PortfolioItemBase):
    item_id: str
    consultant_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
