# consult_match/schemas/favorite_schema.py
from datetime import datetime
from typing import Literal
from consult_match.schemas.base_schema import CamelModel

class FavoriteCreate(CamelModel):
    target_id: str
    target_type: Literal["consultant", "project"]

class FavoriteOut(CamelModel):
    favorite_id: str
    user_id: str
    target_id: str
    target_type: str
    created_at: datetime
