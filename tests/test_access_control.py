from contextlib import contextmanager
from types import SimpleNamespace

from fastapi.testclient import TestClient

from marketplace.core.database import get_db
from marketplace.core.security import create_access_token
from marketplace.main import app
from marketplace.models import RoleLevel


class _StubQuery:
    def __init__(self, result):
        self._result = result

    def filter(self, *args, **kwargs):
        return self

    def order_by(self, *args, **kwargs):
        return self

    def first(self):
        return self._result

    def all(self):
        return [self._result] if self._result is not None else []


class _StubSession:
    def __init__(self, user):
        self._user = user
        self.commits = 0

    def query(self, *args, **kwargs):
        return _StubQuery(self._user)

    def commit(self):
        self.commits += 1

    def refresh(self, obj):
        return obj


@contextmanager
def _client_with_user(user):
    app.dependency_overrides.clear()
    session = _StubSession(user)

    def _override_get_db():
        yield session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        with TestClient(app) as client:
            client.stub_session = session
            yield client
    finally:
        app.dependency_overrides.clear()


def _auth_headers(user_id: str = "1"):
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


def _user(role: RoleLevel):
    return SimpleNamespace(id=1, email="user@example.com", full_name="User", role=role)


def test_missing_token_is_unauthenticated():
    with _client_with_user(_user(RoleLevel.MEMBER)) as client:
        res = client.get("/api/v1/ads/me")
    assert res.status_code == 401
    assert res.json()["code"] == "AUTHENTICATION_REQUIRED"


def test_garbage_token_is_forbidden():
    with _client_with_user(_user(RoleLevel.MEMBER)) as client:
        res = client.get("/api/v1/ads/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 403
    assert res.json()["code"] == "AUTHORIZATION_DENIED"


def test_token_for_unknown_user_is_forbidden():
    with _client_with_user(None) as client:
        res = client.get("/api/v1/wallet/me", headers=_auth_headers("99"))
    assert res.status_code == 403
    assert res.json()["code"] == "AUTHORIZATION_DENIED"


def test_member_cannot_reach_admin_endpoints():
    with _client_with_user(_user(RoleLevel.MEMBER)) as client:
        users_res = client.get("/api/v1/admin/users", headers=_auth_headers())
        stats_res = client.get("/api/v1/admin/stats", headers=_auth_headers())
        category_res = client.post("/api/v1/categories", headers=_auth_headers(), json={"name": "Jardinage"})

    for res in (users_res, stats_res, category_res):
        assert res.status_code == 403
        assert res.json()["detail"] == "Admin access required"


def test_admin_cannot_grant_super_admin():
    admin = _user(RoleLevel.ADMIN)
    with _client_with_user(admin) as client:
        res = client.put(
            "/api/v1/admin/users/2/role",
            headers=_auth_headers(),
            json={"role": int(RoleLevel.SUPER_ADMIN)},
        )
        commits = client.stub_session.commits

    assert res.status_code == 403
    assert res.json()["code"] == "INSUFFICIENT_PRIVILEGE"
    assert commits == 0


def test_admin_lists_users_without_password_hash():
    admin = SimpleNamespace(
        id=1,
        created_at=None,
        email="admin@example.com",
        full_name="Admin",
        phone=None,
        wallet_balance=0,
        role=RoleLevel.ADMIN,
        hashed_password="secret-hash",
    )
    with _client_with_user(admin) as client:
        res = client.get("/api/v1/admin/users", headers=_auth_headers())

    assert res.status_code == 200
    body = res.json()
    assert body[0]["email"] == "admin@example.com"
    assert body[0]["role"] == int(RoleLevel.ADMIN)
    assert "hashed_password" not in body[0]
