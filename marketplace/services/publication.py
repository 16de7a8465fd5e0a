import logging
from datetime import datetime, timedelta
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from marketplace.core.errors import ApiError, InsufficientFunds, InternalError
from marketplace.models import Ad
from marketplace.models.base import utcnow
from marketplace.schemas.ad import PublishAdRequest
from marketplace.services.plans import resolve_plan
from marketplace.services.wallet import debit_wallet, get_balance

logger = logging.getLogger(__name__)


def publish_ad(
    db: Session,
    user_id: int,
    payload: PublishAdRequest,
    *,
    now: datetime | None = None,
) -> tuple[Ad, Decimal]:
    """
    Charge the plan cost to the author's wallet and create the ad.

    The debit, the payment row and the ad insert commit together or not at
    all. Returns the new ad and the wallet balance read back after commit.
    """
    plan = resolve_plan(payload.plan_id)
    balance = get_balance(db, user_id)
    if balance < plan.cost:
        logger.info("Publication refused user_id=%s balance=%s cost=%s", user_id, balance, plan.cost)
        raise InsufficientFunds()

    created_at = now or utcnow()
    ad = Ad(
        title=payload.title.strip(),
        description=payload.description,
        price=payload.price,
        location=payload.location,
        category=payload.category,
        author_id=user_id,
        images=list(payload.images),
        expires_at=created_at + timedelta(days=plan.days),
        created_at=created_at,
        updated_at=created_at,
    )

    try:
        debit_wallet(db, user_id, plan.cost, f"Ad publication: {ad.title}")
        db.add(ad)
        db.commit()
    except ApiError:
        db.rollback()
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning("Publication rolled back user_id=%s plan=%s error=%s", user_id, plan.plan_id, exc)
        raise InternalError("Ad publication failed") from exc

    db.refresh(ad)
    new_balance = get_balance(db, user_id)
    logger.info(
        "Published ad_id=%s user_id=%s plan=%s cost=%s balance=%s",
        ad.id,
        user_id,
        plan.plan_id,
        plan.cost,
        new_balance,
    )
    return ad, new_balance
