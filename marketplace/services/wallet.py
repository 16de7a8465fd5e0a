import logging
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from marketplace.core.config import get_settings
from marketplace.core.errors import ApiError, InsufficientFunds, InternalError, NotFound, ValidationFailed
from marketplace.models import Transaction, TransactionStatus, TransactionType, User

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    return Decimal(str(value if value is not None else 0)).quantize(CENT)


def get_balance(db: Session, user_id: int) -> Decimal:
    balance = db.query(User.wallet_balance).filter(User.id == user_id).scalar()
    if balance is None:
        raise NotFound("User not found")
    return to_money(balance)


def validate_amount(amount: Decimal, *, maximum: Decimal | None = None) -> Decimal:
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    if not amount.is_finite() or amount <= 0:
        raise ValidationFailed("Amount must be greater than zero")
    if amount != amount.quantize(CENT):
        raise ValidationFailed("Amount cannot have more than two decimal places")
    if maximum is not None and amount > maximum:
        raise ValidationFailed(f"Amount cannot exceed {maximum}")
    return amount


def debit_wallet(db: Session, user_id: int, amount: Decimal, description: str) -> Transaction:
    """
    Debit ``amount`` and stage the matching payment row. Does not commit.

    The balance check and the decrement are one conditional UPDATE, so two
    sessions racing on the same wallet cannot both pass the check.
    """
    updated = (
        db.query(User)
        .filter(User.id == user_id, User.wallet_balance >= amount)
        .update({User.wallet_balance: User.wallet_balance - amount}, synchronize_session=False)
    )
    if updated != 1:
        raise InsufficientFunds()

    entry = Transaction(
        user_id=user_id,
        amount=-amount,
        tx_type=TransactionType.PAYMENT,
        status=TransactionStatus.COMPLETED,
        description=description[:255],
    )
    db.add(entry)
    return entry


def credit_wallet(db: Session, user_id: int, amount: Decimal, description: str) -> Transaction:
    """Credit ``amount`` and stage the matching deposit row. Does not commit."""
    updated = (
        db.query(User)
        .filter(User.id == user_id)
        .update({User.wallet_balance: User.wallet_balance + amount}, synchronize_session=False)
    )
    if updated != 1:
        raise NotFound("User not found")

    entry = Transaction(
        user_id=user_id,
        amount=amount,
        tx_type=TransactionType.DEPOSIT,
        status=TransactionStatus.COMPLETED,
        description=description[:255],
    )
    db.add(entry)
    return entry


def deposit(db: Session, user_id: int, amount: Decimal, phone: str, provider: str) -> Decimal:
    # Simulated mobile-money top-up: nothing external confirms the payment.
    settings = get_settings()
    amount = validate_amount(amount, maximum=Decimal(settings.max_deposit_amount))
    provider = (provider or "").strip() or "Mobile Money"
    phone = (phone or "").strip()

    try:
        credit_wallet(db, user_id, amount, f"Top-up via {provider} ({phone})")
        db.commit()
    except ApiError:
        db.rollback()
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning("Deposit rolled back user_id=%s amount=%s error=%s", user_id, amount, exc)
        raise InternalError("Deposit failed") from exc

    balance = get_balance(db, user_id)
    logger.info("Deposit user_id=%s amount=%s provider=%s balance=%s", user_id, amount, provider, balance)
    return balance


def list_transactions(db: Session, user_id: int) -> list[Transaction]:
    return (
        db.query(Transaction)
        .filter(Transaction.user_id == user_id)
        .order_by(Transaction.created_at.desc(), Transaction.id.desc())
        .all()
    )
