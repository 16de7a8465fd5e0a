import logging
import math
from datetime import datetime
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from marketplace.core.errors import NotFound, ValidationFailed
from marketplace.models import Ad, User
from marketplace.models.base import as_utc, utcnow
from marketplace.schemas.ad import AdminEditAdRequest

logger = logging.getLogger(__name__)


def ad_payload(ad: Ad, author: Optional[str] = None) -> dict:
    return {
        "id": ad.id,
        "title": ad.title,
        "description": ad.description,
        "price": ad.price,
        "location": ad.location,
        "category": ad.category,
        "author_id": ad.author_id,
        "author": author,
        "images": list(ad.images or []),
        "expires_at": ad.expires_at,
        "created_at": ad.created_at,
    }


def _newest_first(query):
    return query.order_by(Ad.created_at.desc(), Ad.id.desc())


def list_public_ads(
    db: Session,
    *,
    page: int,
    page_size: int,
    max_page_size: int = 100,
    category: Optional[str] = None,
    q: Optional[str] = None,
    now: Optional[datetime] = None,
) -> dict:
    if page < 1:
        raise ValidationFailed("page must be >= 1")
    if page_size < 1 or page_size > max_page_size:
        raise ValidationFailed(f"page_size must be between 1 and {max_page_size}")

    now = now or utcnow()
    query = (
        db.query(Ad, User.full_name.label("author"))
        .join(User, Ad.author_id == User.id)
        .filter(Ad.expires_at > now)
    )
    if category:
        query = query.filter(Ad.category == category.strip())
    if q and q.strip():
        needle = f"%{q.strip()}%"
        query = query.filter(
            or_(
                Ad.title.ilike(needle),
                Ad.location.ilike(needle),
                Ad.category.ilike(needle),
            )
        )

    total = query.count()
    rows = (
        _newest_first(query)
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )
    return {
        "ads": [ad_payload(ad, author) for ad, author in rows],
        "pagination": {
            "current_page": page,
            "total_pages": math.ceil(total / page_size),
            "total_ads": total,
            "page_size": page_size,
        },
    }


def list_user_ads(db: Session, user: User) -> list[dict]:
    # Owners see their expired ads too.
    ads = _newest_first(db.query(Ad).filter(Ad.author_id == user.id)).all()
    return [ad_payload(ad, user.full_name) for ad in ads]


def list_all_ads(db: Session) -> list[dict]:
    rows = _newest_first(
        db.query(Ad, User.full_name.label("author")).join(User, Ad.author_id == User.id)
    ).all()
    return [ad_payload(ad, author) for ad, author in rows]


def is_active(ad: Ad, now: Optional[datetime] = None) -> bool:
    return as_utc(ad.expires_at) > (now or utcnow())


def edit_ad(db: Session, ad_id: int, payload: AdminEditAdRequest) -> Ad:
    ad = db.query(Ad).filter(Ad.id == ad_id).first()
    if not ad:
        raise NotFound("Ad not found")

    ad.title = payload.title.strip()
    ad.description = payload.description
    ad.price = payload.price
    ad.location = payload.location
    ad.category = payload.category
    ad.expires_at = as_utc(payload.expires_at)
    db.commit()
    db.refresh(ad)
    logger.info("Admin edited ad_id=%s", ad_id)
    return ad


def delete_ad(db: Session, ad_id: int) -> None:
    ad = db.query(Ad).filter(Ad.id == ad_id).first()
    if not ad:
        raise NotFound("Ad not found")
    db.delete(ad)
    db.commit()
    logger.info("Admin deleted ad_id=%s", ad_id)
