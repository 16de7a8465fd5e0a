from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict
from marketplace.models.user import RoleLevel


class AdminUserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None
    email: str
    full_name: str
    phone: Optional[str] = None
    wallet_balance: Decimal
    role: RoleLevel


class SetRoleRequest(BaseModel):
    role: RoleLevel


class RevenueOut(BaseModel):
    day: Decimal
    month: Decimal
    year: Decimal


class CountsOut(BaseModel):
    users: int
    ads: int
    visitors: int
    online: int


class CategoryCountOut(BaseModel):
    category: str
    count: int


class AdminStatsOut(BaseModel):
    revenue: RevenueOut
    counts: CountsOut
    ads_by_category: list[CategoryCountOut]
    activation_rate: float
