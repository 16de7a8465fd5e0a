import enum
from sqlalchemy import Column, Integer, String, Enum, Index, Numeric, Text
from sqlalchemy.orm import relationship
from marketplace.core.database import Base
from marketplace.models.base import TimestampMixin


class RoleLevel(enum.IntEnum):
    MEMBER = 0
    ADMIN = 1
    SUPER_ADMIN = 2

    def at_least(self, other: "RoleLevel") -> bool:
        return self >= other


class OnlineStatus(str, enum.Enum):
    ONLINE = "online"
    AWAY = "away"
    OFFLINE = "offline"


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    full_name = Column(String(255), nullable=False)
    phone = Column(String(32), nullable=True)
    hashed_password = Column(String(255), nullable=False)
    wallet_balance = Column(Numeric(12, 2), nullable=False, default=0)
    role = Column(Enum(RoleLevel, name="rolelevel"), nullable=False, default=RoleLevel.MEMBER)
    profile_picture = Column(Text, nullable=True)
    bio = Column(Text, nullable=True)
    online_status = Column(
        Enum(OnlineStatus, name="onlinestatus", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=OnlineStatus.OFFLINE,
    )

    ads = relationship("Ad", back_populates="author")
    transactions = relationship("Transaction", back_populates="user")


Index("ix_users_role", User.role)
Index("ix_users_online_status", User.online_status)
