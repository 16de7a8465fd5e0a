from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

MAX_IMAGES = 5


class AdOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    price: Decimal
    location: str
    category: str
    author_id: int
    author: Optional[str] = None
    images: list[str] = []
    expires_at: datetime
    created_at: Optional[datetime] = None


class Pagination(BaseModel):
    current_page: int
    total_pages: int
    total_ads: int
    page_size: int


class AdListResponse(BaseModel):
    ads: list[AdOut]
    pagination: Pagination


class PublishAdRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    price: Decimal = Field(default=Decimal("0"), ge=0)
    location: str = Field(default="", max_length=255)
    category: str = Field(default="", max_length=120)
    images: list[str] = Field(default_factory=list, max_length=MAX_IMAGES)
    plan_id: Optional[str] = None


class PublishAdResponse(BaseModel):
    success: bool = True
    ad_id: int
    new_balance: Decimal


class PlanOut(BaseModel):
    plan_id: str
    days: int
    cost: Decimal


class AdminEditAdRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    price: Decimal = Field(default=Decimal("0"), ge=0)
    location: str = Field(default="", max_length=255)
    category: str = Field(default="", max_length=120)
    expires_at: datetime
