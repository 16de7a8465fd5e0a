from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict
from marketplace.models.user import OnlineStatus, RoleLevel


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    full_name: str
    phone: Optional[str] = None
    wallet_balance: Decimal
    role: RoleLevel
    profile_picture: Optional[str] = None
    bio: Optional[str] = None
    online_status: OnlineStatus
    created_at: Optional[datetime] = None
