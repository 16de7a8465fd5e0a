from decimal import Decimal

import pytest

from marketplace.core.errors import InsufficientFunds, ValidationFailed
from marketplace.models import Transaction, TransactionStatus, TransactionType
from marketplace.services.wallet import debit_wallet, deposit, get_balance, list_transactions


def test_deposit_credits_balance_and_records_one_transaction(db, make_user):
    user = make_user()

    balance = deposit(db, user.id, Decimal("1000"), "+22670000000", "Orange Money")

    assert balance == Decimal("1000.00")
    rows = list_transactions(db, user.id)
    assert len(rows) == 1
    assert rows[0].tx_type == TransactionType.DEPOSIT
    assert rows[0].status == TransactionStatus.COMPLETED
    assert Decimal(rows[0].amount) == Decimal("1000")
    assert rows[0].description == "Top-up via Orange Money (+22670000000)"


def test_repeated_deposits_do_not_drift(db, make_user):
    user = make_user()

    for _ in range(10):
        deposit(db, user.id, Decimal("0.10"), "", "Wave")

    assert get_balance(db, user.id) == Decimal("1.00")
    assert db.query(Transaction).filter(Transaction.user_id == user.id).count() == 10


@pytest.mark.parametrize("amount", ["0", "-50", "10.001", "2000000"])
def test_deposit_rejects_bad_amounts_without_side_effects(db, make_user, amount):
    user = make_user(balance="100")

    with pytest.raises(ValidationFailed):
        deposit(db, user.id, Decimal(amount), "", "Wave")

    assert get_balance(db, user.id) == Decimal("100.00")
    assert db.query(Transaction).count() == 0


def test_debit_refuses_to_overdraw(db, make_user):
    user = make_user(balance="400")

    with pytest.raises(InsufficientFunds):
        debit_wallet(db, user.id, Decimal("500"), "Ad publication: Too expensive")
    db.rollback()

    assert get_balance(db, user.id) == Decimal("400.00")
    assert db.query(Transaction).count() == 0


def test_debit_stages_negative_payment_row(db, make_user):
    user = make_user(balance="1500")

    entry = debit_wallet(db, user.id, Decimal("500"), "Ad publication: Lawn mowing")
    db.commit()

    assert Decimal(entry.amount) == Decimal("-500")
    assert entry.tx_type == TransactionType.PAYMENT
    assert get_balance(db, user.id) == Decimal("1000.00")


def test_wallet_endpoints(client):
    res = client.post(
        "/api/v1/auth/register",
        json={"email": "wallet@example.com", "password": "Password123!", "full_name": "Wallet User"},
    )
    headers = {"Authorization": f"Bearer {res.json()['token']}"}

    res = client.post(
        "/api/v1/wallet/deposit",
        headers=headers,
        json={"amount": "250.50", "phone": "70000000", "provider": "Moov"},
    )
    assert res.status_code == 200
    assert Decimal(res.json()["balance"]) == Decimal("250.50")

    res = client.post("/api/v1/wallet/deposit", headers=headers, json={"amount": "-10"})
    assert res.status_code == 422
    assert res.json()["code"] == "VALIDATION_FAILED"

    assert Decimal(client.get("/api/v1/wallet/me", headers=headers).json()["balance"]) == Decimal("250.50")
    txs = client.get("/api/v1/wallet/transactions", headers=headers).json()
    assert [tx["tx_type"] for tx in txs] == ["deposit"]
