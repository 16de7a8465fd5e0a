def _register(client, email, **extra):
    body = {"email": email, "password": "Password123!", "full_name": "Awa Traoré", "phone": "70000000"}
    body.update(extra)
    return client.post("/api/v1/auth/register", json=body)


def test_first_user_is_super_admin_second_is_member(client):
    first = _register(client, "first@example.com")
    second = _register(client, "second@example.com")

    assert first.status_code == 200
    assert first.json()["user"]["role"] == 2
    assert second.json()["user"]["role"] == 0
    assert "hashed_password" not in second.json()["user"]
    assert second.json()["user"]["wallet_balance"] in ("0", "0.00")


def test_register_duplicate_email_conflicts(client):
    _register(client, "dup@example.com")
    res = _register(client, "DUP@example.com")

    assert res.status_code == 409
    assert res.json()["code"] == "CONFLICT"


def test_login_and_me(client):
    _register(client, "login@example.com")

    bad = client.post("/api/v1/auth/login", json={"email": "login@example.com", "password": "nope"})
    assert bad.status_code == 401
    assert bad.json()["code"] == "INVALID_CREDENTIALS"

    res = client.post("/api/v1/auth/login", json={"email": "login@example.com", "password": "Password123!"})
    assert res.status_code == 200
    token = res.json()["token"]

    me = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "login@example.com"
    assert me.json()["online_status"] == "offline"


def test_update_profile(client):
    token = _register(client, "profile@example.com").json()["token"]
    headers = {"Authorization": f"Bearer {token}"}

    res = client.put(
        "/api/v1/auth/profile",
        headers=headers,
        json={
            "full_name": "Awa T.",
            "phone": "76000000",
            "profile_picture": "data:image/png;base64,BBBB",
            "online_status": "online",
            "bio": "Couturière",
        },
    )

    assert res.status_code == 200
    body = res.json()
    assert body["full_name"] == "Awa T."
    assert body["online_status"] == "online"
    assert body["bio"] == "Couturière"

    res = client.put("/api/v1/auth/profile", headers=headers, json={"online_status": "busy"})
    assert res.status_code == 422


def test_password_too_long_rejected(client):
    res = _register(client, "long@example.com", password="x" * 73)
    assert res.status_code == 422
