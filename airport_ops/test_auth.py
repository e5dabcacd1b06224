# airport_ops/test_auth.py

from datetime import timedelta

from airport_ops.auth.argon import hash_password, verify_password
from airport_ops.services.token import SESSION_COOKIE, create_access_token, decode_access_token

CREDENTIALS = {"username": "admin", "password": "supersecret"}


def test_password_hashing():
    hashed = hash_password("supersecret")
    assert hashed != "supersecret"
    assert hashed != hash_password("supersecret")
    assert verify_password(hashed, "supersecret")
    assert not verify_password(hashed, "wrong-password")
    assert not verify_password("not-a-hash", "supersecret")


def test_token_round_trip(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "test-secret")
    token = create_access_token(data={"sub": 7})
    assert decode_access_token(token)["sub"] == "7"
    assert decode_access_token(token + "x") is None
    expired = create_access_token(data={"sub": 7}, expires_delta=timedelta(minutes=-1))
    assert decode_access_token(expired) is None


def test_register_sets_session(client):
    resp = client.post("/api/register", json=CREDENTIALS)
    assert resp.status_code == 201
    assert resp.json() == {"id": 1, "username": "admin"}
    assert SESSION_COOKIE in resp.cookies
    set_cookie = resp.headers["set-cookie"].lower()
    assert "httponly" in set_cookie
    assert "samesite=lax" in set_cookie
    assert client.get("/api/user").json() == {"id": 1, "username": "admin"}


def test_register_rejects_taken_username(client):
    client.post("/api/register", json=CREDENTIALS)
    resp = client.post("/api/register", json=CREDENTIALS)
    assert resp.status_code == 400
    assert resp.json() == {"message": "Validation error", "errors": "username: Username already exists"}


def test_register_validates_input(client):
    resp = client.post("/api/register", json={"username": "ad", "password": "short"})
    assert resp.status_code == 400
    errors = resp.json()["errors"]
    assert "username" in errors
    assert "password" in errors


def test_login(client):
    client.post("/api/register", json=CREDENTIALS)
    client.cookies.clear()
    assert client.get("/api/user").status_code == 401

    resp = client.post("/api/login", json={"username": "admin", "password": "wrong-password"})
    assert resp.status_code == 401
    assert resp.json() == {"message": "Invalid username or password"}

    resp = client.post("/api/login", json={"username": "ghost", "password": "supersecret"})
    assert resp.status_code == 401

    resp = client.post("/api/login", json=CREDENTIALS)
    assert resp.status_code == 200
    assert resp.json()["username"] == "admin"
    assert "password" not in resp.json()
    assert client.get("/api/user").status_code == 200


def test_logout_clears_session(client):
    client.post("/api/register", json=CREDENTIALS)
    resp = client.post("/api/logout")
    assert resp.json() == {"message": "Logged out"}
    assert "max-age=0" in resp.headers["set-cookie"].lower()
    assert client.get("/api/user").status_code == 401


def test_forged_session_is_rejected(client):
    client.post("/api/register", json=CREDENTIALS)
    client.cookies.clear()
    client.cookies.set(SESSION_COOKIE, "not-a-token")
    assert client.get("/api/flights").status_code == 401

    client.cookies.clear()
    # signed for a user that does not exist
    client.cookies.set(SESSION_COOKIE, create_access_token(data={"sub": 99}))
    assert client.get("/api/flights").status_code == 401
