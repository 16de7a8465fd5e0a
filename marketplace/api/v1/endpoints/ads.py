from typing import Optional

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from marketplace.core.config import get_settings
from marketplace.core.database import get_db
from marketplace.dependencies import get_current_user
from marketplace.middlewares.rate_limit import limiter
from marketplace.models import User
from marketplace.schemas.ad import AdListResponse, AdOut, PlanOut, PublishAdRequest, PublishAdResponse
from marketplace.services.ads import list_public_ads, list_user_ads
from marketplace.services.plans import list_plans
from marketplace.services.publication import publish_ad

router = APIRouter()
settings = get_settings()


@router.get("", response_model=AdListResponse)
def list_ads(
    db: Session = Depends(get_db),
    page: int = 1,
    page_size: Optional[int] = None,
    category: Optional[str] = None,
    q: Optional[str] = None,
):
    return list_public_ads(
        db,
        page=page,
        page_size=settings.default_page_size if page_size is None else page_size,
        max_page_size=settings.max_page_size,
        category=category,
        q=q,
    )


@router.get("/plans", response_model=list[PlanOut])
def get_plans():
    return [{"plan_id": plan.plan_id, "days": plan.days, "cost": plan.cost} for plan in list_plans()]


@router.get("/me", response_model=list[AdOut])
def my_ads(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return list_user_ads(db, user)


@router.post("", response_model=PublishAdResponse)
@limiter.limit("20/minute")
def create_ad(
    request: Request,
    payload: PublishAdRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    ad, new_balance = publish_ad(db, user.id, payload)
    return {"success": True, "ad_id": ad.id, "new_balance": new_balance}
