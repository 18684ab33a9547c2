# consult_match/models/transaction.py

import enum
import uuid
from sqlalchemy import Column, TEXT, DECIMAL, TIMESTAMP, ForeignKey, Enum, CHAR, JSON
from sqlalchemy.orm import relationship
from consult_match.core.database import Base, utcnow

class TransactionTypeEnum(str, enum.Enum):
    project_payment = "PROJECT_PAYMENT"
    subscription = "SUBSCRIPTION"
    refund = "REFUND"
    commission = "COMMISSION"

class PaymentStatusEnum(str, enum.Enum):
    pending = "PENDING"
    processing = "PROCESSING"
    completed = "COMPLETED"
    failed = "FAILED"
    refunded = "REFUNDED"
    disputed = "DISPUTED"

class Transaction(Base):
    """
    金流帳本 (僅記錄，尚未串接任何金流服務)
    """
    __tablename__ = "transactions"

    transaction_id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(CHAR(36), ForeignKey("users.user_id"), nullable=False, index=True)
    project_id = Column(CHAR(36), ForeignKey("projects.project_id"), nullable=True, index=True)

    type = Column(
        Enum(TransactionTypeEnum, name="transaction_type", values_callable=lambda obj: [e.value for e in obj]),
        nullable=False
    )
    amount = Column(DECIMAL(12, 2), nullable=False)
    fee = Column(DECIMAL(12, 2), default=0)
    net_amount = Column(DECIMAL(12, 2), nullable=False)
    status = Column(
        Enum(PaymentStatusEnum, name="payment_status", values_callable=lambda obj: [e.value for e in obj]),
        default=PaymentStatusEnum.pending,
        nullable=False
    )

    # 金流服務商的交易編號與原始回傳
    provider_id = Column(TEXT)
    provider_data = Column(JSON)
    description = Column(TEXT)
    # (注意) 'metadata' 是 Declarative Base 的保留屬性，Python 端改名
    extra_metadata = Column("metadata", JSON)

    processed_at = Column(TIMESTAMP(timezone=True))
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), default=utcnow, onupdate=utcnow)

    user = relationship("User")
    project = relationship("Project")
