"""Tests for session API handlers."""

import pytest
from fastapi.testclient import TestClient

from src.inventoflow.auth.exceptions import ProviderAuthError
from src.inventoflow.auth.manager import AuthSessionManager
from src.inventoflow.auth.session_store import SessionStore
from src.inventoflow.dependencies import set_services


@pytest.fixture
def manager(fake_provider) -> AuthSessionManager:
    """Install a session manager backed by the fake provider."""
    session_manager = AuthSessionManager(fake_provider, SessionStore(fake_provider))
    set_services(session_manager, None)
    return session_manager


def test_get_session_while_loading(client: TestClient, manager) -> None:
    response = client.get("/api/v1/session")

    assert response.status_code == 200
    assert response.json() == {"is_authenticated": False, "is_loading": True, "user": None}


def test_login_success(client: TestClient, manager, fake_provider) -> None:
    fake_provider.attributes = {"email": "jane@example.com"}

    response = client.post(
        "/api/v1/session/login", json={"email": "jane@example.com", "password": "secret"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["is_authenticated"] is True
    assert data["user"]["name"] == "jane"
    assert data["user"]["email"] == "jane@example.com"
    assert "token" not in response.text


def test_login_rejected_returns_401(client: TestClient, manager, fake_provider) -> None:
    fake_provider.errors["authenticate"] = ProviderAuthError("Incorrect username or password.")

    response = client.post("/api/v1/session/login", json={"email": "a@b.com", "password": "x"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Incorrect username or password."
    assert manager.is_authenticated is False


def test_login_missing_email_attribute_returns_502(
    client: TestClient, manager, fake_provider
) -> None:
    fake_provider.attributes = {}

    response = client.post(
        "/api/v1/session/login", json={"email": "a@b.com", "password": "secret"}
    )

    assert response.status_code == 502


def test_signup(client: TestClient, manager) -> None:
    response = client.post(
        "/api/v1/session/signup", json={"email": "new@example.com", "password": "Passw0rd!"}
    )

    assert response.status_code == 201
    assert response.json() == {"user_id": "user-1", "confirmation_required": True}


def test_signup_rejected_returns_400(client: TestClient, manager, fake_provider) -> None:
    fake_provider.errors["sign_up"] = ProviderAuthError("User already exists")

    response = client.post(
        "/api/v1/session/signup", json={"email": "dup@example.com", "password": "Passw0rd!"}
    )

    assert response.status_code == 400
    assert "already exists" in response.json()["detail"]


def test_confirm_and_reset_flow(client: TestClient, manager, fake_provider) -> None:
    assert (
        client.post(
            "/api/v1/session/confirm", json={"email": "a@b.com", "code": "123456"}
        ).status_code
        == 200
    )
    assert (
        client.post("/api/v1/session/forgot-password", json={"email": "a@b.com"}).status_code
        == 200
    )
    response = client.post(
        "/api/v1/session/confirm-password",
        json={"email": "a@b.com", "code": "654321", "new_password": "N3wPass!"},
    )

    assert response.status_code == 200
    assert [call[0] for call in fake_provider.calls] == [
        "confirm_registration",
        "forgot_password",
        "confirm_password",
    ]


def test_invalid_code_returns_400(client: TestClient, manager, fake_provider) -> None:
    fake_provider.errors["confirm_registration"] = ProviderAuthError("Invalid verification code")

    response = client.post("/api/v1/session/confirm", json={"email": "a@b.com", "code": "1"})

    assert response.status_code == 400


def test_logout_is_idempotent(client: TestClient, manager) -> None:
    client.post("/api/v1/session/login", json={"email": "jane@example.com", "password": "s"})

    first = client.delete("/api/v1/session")
    second = client.delete("/api/v1/session")

    assert first.status_code == second.status_code == 200
    assert first.json()["is_authenticated"] is False
    assert second.json() == first.json()
