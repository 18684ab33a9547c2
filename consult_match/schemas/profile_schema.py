# consult_match/schemas/profile_schema.py
from pydantic import Field, field_validator
from datetime import datetime
from typing import List, Literal, Optional
from consult_match.schemas.base_schema import CamelModel, reject_null

BusinessStage = Literal["idea", "prototype", "launch", "growth"]
UrgencyLevel = Literal["low", "medium", "high"]


# --- 創業者 (Entrepreneur) ---
class EntrepreneurProfileBase(CamelModel):
    company_name: str = Field(..., min_length=1, max_length=255)
    company_description: Optional[str] = None
    industry: str = Field(..., min_length=1)
    founded_at: Optional[datetime] = None
    employee_count: Optional[int] = Field(None, ge=0)
    monthly_revenue: Optional[float] = Field(None, ge=0)
    website: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None
    business_stage: BusinessStage
    pitch_deck_url: Optional[str] = None
    business_plan_url: Optional[str] = None
    country: str = "Brasil"
    state: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    is_remote: bool = False
    budget: Optional[float] = Field(None, ge=0)
    urgency_level: Optional[UrgencyLevel] = None
    consultation_areas: List[str] = []

class EntrepreneurProfileCreate(EntrepreneurProfileBase):
    pass

class EntrepreneurProfileUpdate(CamelModel):
    # 更新時全為選填 (只寫入有傳的欄位)
    company_name: Optional[str] = Field(None, min_length=1, max_length=255)
    company_description: Optional[str] = None
    industry: Optional[str] = Field(None, min_length=1)
    founded_at: Optional[datetime] = None
    employee_count: Optional[int] = Field(None, ge=0)
    monthly_revenue: Optional[float] = Field(None, ge=0)
    website: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None
    business_stage: Optional[BusinessStage] = None
    pitch_deck_url: Optional[str] = None
    business_plan_url: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = Field(None, min_length=1)
    city: Optional[str] = Field(None, min_length=1)
    is_remote: Optional[bool] = None
    budget: Optional[float] = Field(None, ge=0)
    urgency_level: Optional[UrgencyLevel] = None
    consultation_areas: Optional[List[str]] = None

    # (重要) 可不傳，但不可傳 null
    @field_validator(
        "company_name", "industry", "business_stage", "country",
        "state", "city", "is_remote", "consultation_areas"
    )
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

class EntrepreneurProfileOut(EntrepreneurProfileBase):
    profile_id: str
    user_id: str
    # 統計欄位 (讀取時計算)
    total_projects: int = 0
    average_rating: Optional[float] = None
    total_spent: float = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# --- 顧問 (Consultant) ---
class ConsultantProfileBase(CamelModel):
    title: str = Field(..., min_length=1)
    bio: str = Field(..., min_length=1)
    experience: int = Field(..., ge=0, description="年資")
    hourly_rate: Optional[float] = Field(None, ge=0)
    project_rate: Optional[float] = Field(None, ge=0)
    education: List[dict] = []
    certifications: List[dict] = []
    languages: List[str] = ["português"]
    country: str = "Brasil"
    state: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    timezone: str = "America/Sao_Paulo"
    is_remote: bool = True
    availability: Optional[dict] = None
    industries: List[str] = []
    accepting_clients: bool = True
    instant_booking: bool = False

class ConsultantProfileCreate(ConsultantProfileBase):
    pass

class ConsultantProfileUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    bio: Optional[str] = Field(None, min_length=1)
    experience: Optional[int] = Field(None, ge=0)
    hourly_rate: Optional[float] = Field(None, ge=0)
    project_rate: Optional[float] = Field(None, ge=0)
    education: Optional[List[dict]] = None
    certifications: Optional[List[dict]] = None
    languages: Optional[List[str]] = None
    country: Optional[str] = None
    state: Optional[str] = Field(None, min_length=1)
    city: Optional[str] = Field(None, min_length=1)
    timezone: Optional[str] = None
    is_remote: Optional[bool] = None
    availability: Optional[dict] = None
    industries: Optional[List[str]] = None
    accepting_clients: Optional[bool] = None
    instant_booking: Optional[bool] = None

    @field_validator(
        "title", "bio", "experience", "education", "certifications", "languages",
        "country", "state", "city", "timezone", "is_remote", "industries",
        "accepting_clients", "instant_booking"
    )
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

class ConsultantProfileOut(ConsultantProfileBase):
    profile_id: str
    user_id: str
    is_verified: bool = False
    verified_at: Optional[datetime] = None
    documents_url: List[str] = []
    # 統計欄位 (讀取時計算，profile_views 為事件計數)
    total_projects: int = 0
    average_rating: Optional[float] = None
    total_earnings: float = 0
    response_time: Optional[int] = None
    profile_views: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
