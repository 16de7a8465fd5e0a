import os


def _set_test_env() -> None:
    defaults = {
        "APP_NAME": "Fesa Marketplace Test",
        "ENVIRONMENT": "test",
        "SECRET_KEY": "test-secret",
        "PASSWORD_BCRYPT_ROUNDS": "4",
        "DATABASE_URL": "sqlite://",
        "AUTO_CREATE_TABLES": "true",
        "RATE_LIMIT_ENABLED": "false",
        "FIRST_USER_IS_SUPER_ADMIN": "true",
        "BOOTSTRAP_SUPER_ADMIN_EMAILS": "",
        "MAX_DEPOSIT_AMOUNT": "1000000",
        "CORS_ORIGINS": "http://localhost:5173,http://localhost:3000",
    }
    for key, value in defaults.items():
        os.environ.setdefault(key, value)


_set_test_env()

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from marketplace.core.database import Base, get_db
from marketplace.main import app
from marketplace.models import RoleLevel, User


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    try:
        yield factory
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    app.dependency_overrides.clear()

    def _override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make(email="user@example.com", *, full_name="User", balance="0", role=RoleLevel.MEMBER):
        user = User(
            email=email,
            full_name=full_name,
            hashed_password="not-used",
            wallet_balance=Decimal(balance),
            role=role,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make
