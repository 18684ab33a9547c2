# consult_match/schemas/specialization_schema.py
from pydantic import Field
from typing import Optional
from consult_match.schemas.base_schema import CamelModel

class SpecializationCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    category: str = Field(..., min_length=1, max_length=100)

class SpecializationOut(CamelModel):
    specialization_id: str
    name: str
    description: Optional[str] = None
    category: str
    is_active: bool
