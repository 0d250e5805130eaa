from datetime import timedelta

from sqlalchemy.exc import IntegrityError

from app.core.auth import AUTH_COOKIE_NAME, create_access_token, decode_token, hash_password
from app.services import user_service
from tests.conftest import FakePgError


def test_register_sets_cookie_and_returns_token(client, monkeypatch):
    created = {}

    def fake_create(email, password_hash):
        created["email"] = email
        created["hash"] = password_hash
        return {"id": "2f1c8c1e-0000-4000-8000-000000000001", "email": email}

    monkeypatch.setattr(user_service, "get_user_by_email", lambda email: None)
    monkeypatch.setattr(user_service, "create_user", fake_create)

    resp = client.post("/api/auth/register", json={"email": "  New@Example.com ", "password": "secret123"})

    assert resp.status_code == 201
    body = resp.json()
    assert body["user"] == {"id": "2f1c8c1e-0000-4000-8000-000000000001", "email": "new@example.com"}
    assert created["email"] == "new@example.com"
    assert created["hash"] != "secret123"
    assert resp.cookies.get(AUTH_COOKIE_NAME) == body["token"]
    assert "httponly" in resp.headers["set-cookie"].lower()

    payload = decode_token(body["token"])
    assert payload["sub"] == body["user"]["id"]
    assert payload["email"] == "new@example.com"


def test_register_duplicate_email(client, monkeypatch):
    monkeypatch.setattr(user_service, "get_user_by_email", lambda email: {"id": "x", "email": email})
    resp = client.post("/api/auth/register", json={"email": "taken@example.com", "password": "secret123"})
    assert resp.status_code == 409
    assert resp.json() == {"error": "Email already registered"}


def test_register_race_maps_unique_violation(client, monkeypatch):
    def fail(email, password_hash):
        raise IntegrityError("INSERT INTO users", {}, FakePgError("23505"))

    monkeypatch.setattr(user_service, "get_user_by_email", lambda email: None)
    monkeypatch.setattr(user_service, "create_user", fail)

    resp = client.post("/api/auth/register", json={"email": "race@example.com", "password": "secret123"})
    assert resp.status_code == 409


def test_register_validation_errors(client):
    resp = client.post("/api/auth/register", json={"email": "not-an-email", "password": "123"})
    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error.startswith("Validation error: ")
    assert "email" in error
    assert "password" in error


def test_login_unknown_email(client, monkeypatch):
    monkeypatch.setattr(user_service, "get_user_by_email", lambda email: None)
    resp = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "secret123"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid credentials"}


def test_login_wrong_password(client, monkeypatch):
    stored = {"id": "u1", "email": "a@example.com", "password_hash": hash_password("right-password")}
    monkeypatch.setattr(user_service, "get_user_by_email", lambda email: stored)
    resp = client.post("/api/auth/login", json={"email": "a@example.com", "password": "wrong-password"})
    assert resp.status_code == 401


def test_login_success(client, monkeypatch):
    stored = {"id": "u1", "email": "a@example.com", "password_hash": hash_password("right-password")}
    monkeypatch.setattr(user_service, "get_user_by_email", lambda email: stored)

    resp = client.post("/api/auth/login", json={"email": "A@example.com", "password": "right-password"})

    assert resp.status_code == 200
    assert resp.json()["user"] == {"id": "u1", "email": "a@example.com"}
    assert resp.cookies.get(AUTH_COOKIE_NAME)


def test_logout_clears_cookie(client):
    resp = client.post("/api/auth/logout")
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert f'{AUTH_COOKIE_NAME}=""' in resp.headers["set-cookie"]


def test_check_requires_token(client):
    resp = client.get("/api/auth/check")
    assert resp.status_code == 401
    assert resp.json() == {"error": "Authentication required"}


def test_check_rejects_bad_token(client):
    resp = client.get("/api/auth/check", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid or expired token"}


def test_check_rejects_expired_token(client, user):
    token = create_access_token(user["id"], user["email"], expires_delta=timedelta(seconds=-5))
    resp = client.get("/api/auth/check", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_check_with_bearer(client, user, auth_headers):
    resp = client.get("/api/auth/check", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {"authenticated": True, "user": user}


def test_me_with_cookie(client, user):
    token = create_access_token(user["id"], user["email"])
    client.cookies.set(AUTH_COOKIE_NAME, token)
    resp = client.get("/api/auth/me")
    assert resp.status_code == 200
    assert resp.json() == {"user": user}


def test_cookie_takes_precedence_over_header(client, user):
    client.cookies.set(AUTH_COOKIE_NAME, create_access_token(user["id"], user["email"]))
    other = create_access_token("someone-else", "other@example.com")
    resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {other}"})
    assert resp.json()["user"]["id"] == user["id"]
