"""
Tests for authentication endpoints.
"""
from datetime import timedelta
from types import SimpleNamespace

from jose import jwt

from tripledger.core.config import settings
from tripledger.core.security import create_access_token, decode_access_token
from tripledger.models.user import UserRole


def test_login(client):
    """Test admin login."""
    response = client.post(
        "/api/auth/login",
        json={
            "username": settings.ADMIN_USERNAME,
            "password": settings.ADMIN_PASSWORD
        }
    )
    assert response.status_code == 200
    body = response.json()
    assert "access_token" in body
    assert body["user"]["role"] == "admin"


def test_login_invalid_credentials(client):
    """Test login with invalid credentials."""
    response = client.post(
        "/api/auth/login",
        json={
            "username": "nonexistent",
            "password": "wrongpassword"
        }
    )
    assert response.status_code == 401


def test_login_wrong_password(client):
    response = client.post(
        "/api/auth/login",
        json={"username": settings.ADMIN_USERNAME, "password": "nope"}
    )
    assert response.status_code == 401


def test_guest_login(client):
    response = client.post("/api/auth/guest-login")
    assert response.status_code == 200
    assert response.json()["user"]["username"] == settings.GUEST_USERNAME
    assert response.json()["user"]["role"] == "guest"


def test_me_requires_token(client):
    assert client.get("/api/users/me").status_code == 401


def test_me_rejects_garbage_token(client):
    response = client.get("/api/users/me", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_me(client, admin_headers):
    response = client.get("/api/users/me", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["username"] == settings.ADMIN_USERNAME


def test_health_and_version(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/api/version").json()["version"] == settings.APP_VERSION


def test_login_token_carries_role(client):
    response = client.post(
        "/api/auth/login",
        json={"username": settings.ADMIN_USERNAME, "password": settings.ADMIN_PASSWORD}
    )
    payload = decode_access_token(response.json()["access_token"])
    assert payload["sub"] == settings.ADMIN_USERNAME
    assert payload["role"] == "admin"
    assert payload["user_id"] == response.json()["user"]["id"]

    guest = client.post("/api/auth/guest-login").json()
    assert decode_access_token(guest["access_token"])["role"] == "guest"


def test_expired_token_is_rejected(client):
    user = SimpleNamespace(id=1, username=settings.ADMIN_USERNAME, role=UserRole.ADMIN)
    token = create_access_token(user, expires_delta=timedelta(seconds=-1))

    assert decode_access_token(token) is None
    response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_token_without_role_is_rejected(client):
    token = jwt.encode({"sub": "admin", "user_id": 1}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    assert decode_access_token(token) is None
    assert client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"}).status_code == 401
