import random
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from marketplace.models import Ad, OnlineStatus, Transaction, TransactionType, User
from marketplace.models.base import utcnow
from marketplace.services.wallet import to_money


def _period_starts(now: datetime) -> dict[str, datetime]:
    now = now.astimezone(timezone.utc)
    day = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return {
        "day": day,
        "month": day.replace(day=1),
        "year": day.replace(month=1, day=1),
    }


def revenue_since(db: Session, start: datetime) -> Decimal:
    # Payments are stored as negative amounts.
    total = (
        db.query(func.sum(Transaction.amount))
        .filter(Transaction.tx_type == TransactionType.PAYMENT, Transaction.created_at >= start)
        .scalar()
    )
    return abs(to_money(total))


def activation_rate(active: int, total: int) -> float:
    if not total:
        return 0.0
    return round(active / total * 100.0, 2)


def visitor_estimate(rng: Optional[random.Random] = None) -> int:
    # Synthetic figure for the dashboard; no visitor tracking exists.
    return (rng or random).randint(50, 149)


def admin_stats(db: Session, *, now: Optional[datetime] = None, rng: Optional[random.Random] = None) -> dict:
    now = now or utcnow()
    starts = _period_starts(now)

    total_ads = db.query(func.count(Ad.id)).scalar() or 0
    active_ads = db.query(func.count(Ad.id)).filter(Ad.expires_at > now).scalar() or 0
    by_category = (
        db.query(Ad.category, func.count(Ad.id))
        .group_by(Ad.category)
        .order_by(func.count(Ad.id).desc(), Ad.category.asc())
        .all()
    )

    return {
        "revenue": {period: revenue_since(db, start) for period, start in starts.items()},
        "counts": {
            "users": db.query(func.count(User.id)).scalar() or 0,
            "ads": total_ads,
            "visitors": visitor_estimate(rng),
            "online": db.query(func.count(User.id)).filter(User.online_status == OnlineStatus.ONLINE).scalar() or 0,
        },
        "ads_by_category": [{"category": category, "count": count} for category, count in by_category],
        "activation_rate": activation_rate(active_ads, total_ads),
    }
