# consult_match/models/proposal.py
import enum
import uuid
from sqlalchemy import Column, Text, ForeignKey, TIMESTAMP, DECIMAL, INT, CHAR, Enum
from sqlalchemy.orm import relationship
from consult_match.core.database import Base, utcnow

class ProposalStatusEnum(str, enum.Enum):
    sent = "SENT"
    viewed = "VIEWED"
    accepted = "ACCEPTED"
    declined = "DECLINED"
    counter_offered = "COUNTER_OFFERED"
    expired = "EXPIRED"

# --- 提案狀態機 ---
# SENT -> VIEWED -> {ACCEPTED | DECLINED | COUNTER_OFFERED | EXPIRED}
PROPOSAL_STATUS_TRANSITIONS = {
    ProposalStatusEnum.sent: {ProposalStatusEnum.viewed, ProposalStatusEnum.expired},
    ProposalStatusEnum.viewed: {
        ProposalStatusEnum.accepted,
        ProposalStatusEnum.declined,
        ProposalStatusEnum.counter_offered,
        ProposalStatusEnum.expired,
    },
    ProposalStatusEnum.accepted: set(),
    ProposalStatusEnum.declined: set(),
    ProposalStatusEnum.counter_offered: set(),
    ProposalStatusEnum.expired: set(),
}

# 已有結果 (終止) 的狀態
PROPOSAL_TERMINAL_STATUSES = {
    ProposalStatusEnum.accepted,
    ProposalStatusEnum.declined,
    ProposalStatusEnum.counter_offered,
    ProposalStatusEnum.expired,
}


def can_transition_proposal(current: ProposalStatusEnum, new: ProposalStatusEnum) -> bool:
    if current == new:
        return True
    return new in PROPOSAL_STATUS_TRANSITIONS.get(current, set())


class Proposal(Base):
    __tablename__ = "proposals"

    proposal_id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # ForeignKey 指向 "tablename.columnname"
    project_id = Column(CHAR(36), ForeignKey("projects.project_id", ondelete="CASCADE"), nullable=False, index=True)
    # (注意) sender / receiver 指向 User，不是 Profile
    sender_id = Column(CHAR(36), ForeignKey("users.user_id"), nullable=False, index=True)
    receiver_id = Column(CHAR(36), ForeignKey("users.user_id"), nullable=False, index=True)

    message = Column(Text, nullable=False)
    proposed_rate = Column(DECIMAL(10, 2), nullable=False)
    estimated_hours = Column(INT)
    delivery_date = Column(TIMESTAMP(timezone=True))

    status = Column(
        Enum(ProposalStatusEnum, name="proposal_status", values_callable=lambda obj: [e.value for e in obj]),
        default=ProposalStatusEnum.sent,
        nullable=False
    )

    # 還價 (counter-offer) 指回原始提案，形成協商鏈
    parent_id = Column(CHAR(36), ForeignKey("proposals.proposal_id"), nullable=True, index=True)

    viewed_at = Column(TIMESTAMP(timezone=True))
    responded_at = Column(TIMESTAMP(timezone=True))
    expires_at = Column(TIMESTAMP(timezone=True))

    created_at = Column(TIMESTAMP(timezone=True), default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), default=utcnow, onupdate=utcnow)

    # --- 建立關聯 (Relationships) ---
    project = relationship("Project", back_populates="proposals")

    sender = relationship("User", foreign_keys=[sender_id], back_populates="sent_proposals")
    receiver = relationship("User", foreign_keys=[receiver_id], back_populates="received_proposals")
