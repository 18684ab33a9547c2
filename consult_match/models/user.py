# models/user.py
import enum
from sqlalchemy import Column, String, Boolean, Enum, INT, TIMESTAMP, CHAR
from sqlalchemy.orm import relationship
from consult_match.core.database import Base, utcnow

# 對應 SQL 中的 ENUM 型別
class UserRoleEnum(str, enum.Enum):
    entrepreneur = "ENTREPRENEUR"
    consultant = "CONSULTANT"
    admin = "ADMIN"

class UserStatusEnum(str, enum.Enum):
    pending_verification = "PENDING_VERIFICATION"
    active = "ACTIVE"
    suspended = "SUSPENDED"
    inactive = "INACTIVE"

class User(Base):
    __tablename__ = "users"

    # 基本欄位 (user_id 由身分提供者的 'sub' 決定)
    user_id = Column(CHAR(36), primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True)
    first_name = Column(String(100))
    last_name = Column(String(100))
    profile_image_url = Column(String(500))

    # (重要) 角色在 Onboarding 完成前為 NULL，之後只會設定一次
    role = Column(Enum(UserRoleEnum, name="user_role", values_callable=lambda obj: [e.value for e in obj]), nullable=True)
    status = Column(
        Enum(UserStatusEnum, name="user_status", values_callable=lambda obj: [e.value for e in obj]),
        default=UserStatusEnum.pending_verification,
        nullable=False
    )

    phone = Column(String(50))
    email_verified = Column(Boolean, default=False)
    phone_verified = Column(Boolean, default=False)
    two_factor_enabled = Column(Boolean, default=False)

    # 登入紀錄
    last_login = Column(TIMESTAMP(timezone=True))
    login_count = Column(INT, default=0)

    created_at = Column(TIMESTAMP(timezone=True), default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), default=utcnow, onupdate=utcnow)

    # 關聯設定
    entrepreneur_profile = relationship(
        "EntrepreneurProfile", # <-- 使用字串
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan"
    )

    consultant_profile = relationship(
        "ConsultantProfile", # <-- 使用字串
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan"
    )

    sent_proposals = relationship(
        "Proposal",
        foreign_keys="[Proposal.sender_id]",
        back_populates="sender"
    )

    received_proposals = relationship(
        "Proposal",
        foreign_keys="[Proposal.receiver_id]",
        back_populates="receiver"
    )

    favorites = relationship(
        "Favorite",
        back_populates="user",
        cascade="all, delete-orphan"
    )

    notifications = relationship(
        "Notification",
        back_populates="user",
        cascade="all, delete-orphan"
    )
