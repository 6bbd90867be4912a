"""
API tests for admin authentication and account management
"""
import pytest

from app.core.security import create_access_token, decode_access_token
from app.services.admin_service import AdminService


@pytest.fixture
def admin_account(db_session):
    return AdminService(db_session).create("editor", "correct-horse")


def test_login_returns_token(client, admin_account):
    response = client.post("/admin/login", json={"username": "editor", "password": "correct-horse"})

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["expires_in"] == 3600

    payload = decode_access_token(body["access_token"])
    assert payload["sub"] == "editor"
    assert payload["role"] == "admin"


def test_login_wrong_password(client, admin_account):
    response = client.post("/admin/login", json={"username": "editor", "password": "nope"})

    assert response.status_code == 401
    assert response.json()["message"] == "Incorrect username or password."


def test_login_unknown_user(client):
    response = client.post("/admin/login", json={"username": "ghost", "password": "whatever"})
    assert response.status_code == 401


def test_verify_token(client, auth_headers):
    response = client.get("/admin/verify", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"valid": True, "user": "admin"}


def test_verify_rejects_missing_and_non_admin_tokens(client):
    assert client.get("/admin/verify").status_code == 401

    token = create_access_token(data={"sub": "visitor", "role": "viewer"})
    response = client.get("/admin/verify", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_create_admin(client, auth_headers, admin_account):
    created = client.post("/admin", json={"username": "second", "password": "long-enough"}, headers=auth_headers)
    assert created.status_code == 201
    assert created.json()["username"] == "second"
    assert "password_hash" not in created.json()

    duplicate = client.post("/admin", json={"username": "editor", "password": "long-enough"}, headers=auth_headers)
    assert duplicate.status_code == 409

    assert client.post("/admin", json={"username": "third", "password": "long-enough"}).status_code == 401
