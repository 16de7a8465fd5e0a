from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from marketplace.core.database import get_db
from marketplace.dependencies import get_current_user
from marketplace.middlewares.rate_limit import limiter
from marketplace.models import User
from marketplace.schemas.wallet import DepositRequest, TransactionOut, WalletOut
from marketplace.services.wallet import deposit, get_balance, list_transactions

router = APIRouter()


@router.get("/me", response_model=WalletOut)
def get_wallet(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return {"balance": get_balance(db, user.id)}


@router.get("/transactions", response_model=list[TransactionOut])
def get_transactions(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return list_transactions(db, user.id)


@router.post("/deposit", response_model=WalletOut)
@limiter.limit("10/minute")
def deposit_funds(
    request: Request,
    payload: DepositRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    balance = deposit(db, user.id, payload.amount, payload.phone, payload.provider)
    return {"balance": balance}
