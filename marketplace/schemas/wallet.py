from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from marketplace.models.transaction import TransactionStatus, TransactionType


class WalletOut(BaseModel):
    balance: Decimal


class DepositRequest(BaseModel):
    amount: Decimal
    phone: str = Field(default="", max_length=32)
    provider: str = Field(default="Mobile Money", max_length=64)


class TransactionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    amount: Decimal
    tx_type: TransactionType
    status: TransactionStatus
    description: Optional[str] = None
    created_at: Optional[datetime] = None
