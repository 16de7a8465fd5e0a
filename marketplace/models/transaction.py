import enum
from sqlalchemy import Column, Integer, String, ForeignKey, Numeric, Enum, Index
from sqlalchemy.orm import relationship
from marketplace.core.database import Base
from marketplace.models.base import TimestampMixin


class TransactionStatus(str, enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class TransactionType(str, enum.Enum):
    DEPOSIT = "deposit"
    PAYMENT = "payment"
    WITHDRAWAL = "withdrawal"


def _values(enum_cls):
    return [member.value for member in enum_cls]


class Transaction(Base, TimestampMixin):
    """Append-only wallet audit row. ``amount`` is signed: credits positive, debits negative."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    tx_type = Column(Enum(TransactionType, name="transactiontype", values_callable=_values), nullable=False)
    status = Column(
        Enum(TransactionStatus, name="transactionstatus", values_callable=_values),
        nullable=False,
        default=TransactionStatus.COMPLETED,
    )
    description = Column(String(255), nullable=True)

    user = relationship("User", back_populates="transactions")


Index("ix_transactions_user_created", Transaction.user_id, Transaction.created_at)
Index("ix_transactions_type_created", Transaction.tx_type, Transaction.created_at)
