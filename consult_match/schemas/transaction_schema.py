# consult_match/schemas/transaction_schema.py
from pydantic import Field
from datetime import datetime
from typing import Optional
from consult_match.models.transaction import TransactionTypeEnum, PaymentStatusEnum
from consult_match.schemas.base_schema import CamelModel

class TransactionOut(CamelModel):
    transaction_id: str
    user_id: str
    project_id: Optional[str] = None
    type: TransactionTypeEnum
    amount: float
    fee: float = 0
    net_amount: float
    status: PaymentStatusEnum
    provider_id: Optional[str] = None
    description: Optional[str] = None
    # (注意) ORM 屬性為 extra_metadata，JSON 輸出為 metadata
    extra_metadata: Optional[dict] = Field(
        None, validation_alias="extra_metadata", serialization_alias="metadata"
    )
    processed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
