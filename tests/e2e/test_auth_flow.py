"""End-to-end tests for signup, approval and login."""

import asyncio
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from guard.domain.repository import UserRepository
from guard.domain.service import ChatClient, JWTService
from guard.domain.value import UserId, UserStatus
from guard.interface.api.app import create_app
from tests.di import build_test_container
from tests.harness import resolve

SIGNUP = {
    "name": "Ama Mensah",
    "email": "ama@example.com",
    "password": "s3cret-pass",
    "phone": "+233201234567",
    "identityDocument": "aWQtZG9jdW1lbnQ=",
    "selfieImage": "c2VsZmll",
}


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client."""
    return TestClient(create_app(container))


def approve(container, user_id: str) -> None:
    """Moderator approval, done directly against the repository."""
    repo = resolve(container, UserRepository)
    asyncio.run(repo.update_status(UserId(UUID(user_id)), UserStatus.APPROVED))


class TestSignup:
    """Tests for POST /signup."""

    def test_signup_creates_pending_account(self, client):
        # Act
        response = client.post("/signup", json=SIGNUP)

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "pending"
        assert UUID(data["userId"])
        assert "pending approval" in data["message"]

    def test_legacy_field_names(self, client):
        payload = {
            key: value
            for key, value in SIGNUP.items()
            if key not in ("identityDocument", "selfieImage")
        }
        payload.update(validId="aWQ=", selfie="c2VsZmll")

        response = client.post("/signup", json=payload)

        assert response.status_code == 201

    def test_missing_fields_return_400(self, client):
        response = client.post("/signup", json={"email": "ama@example.com"})

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "validation_error"
        assert "password" in data["message"]

    def test_duplicate_email_returns_400(self, client):
        client.post("/signup", json=SIGNUP)

        response = client.post(
            "/signup", json={**SIGNUP, "email": "AMA@example.com", "phone": "+233200000000"}
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": "conflict",
            "message": "User already exists",
        }

    def test_malformed_json_returns_400(self, client):
        response = client.post(
            "/signup",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"


class TestLogin:
    """Tests for POST /login."""

    def test_pending_account_is_forbidden(self, client):
        client.post("/signup", json=SIGNUP)

        response = client.post(
            "/login", json={"email": "ama@example.com", "password": "s3cret-pass"}
        )

        assert response.status_code == 403
        assert response.json()["error"] == "pending_approval"

    def test_approved_account_logs_in(self, client, container):
        # Arrange
        user_id = client.post("/signup", json=SIGNUP).json()["userId"]
        approve(container, user_id)

        # Act
        response = client.post(
            "/login", json={"email": "ama@example.com", "password": "s3cret-pass"}
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["userId"] == user_id
        assert data["name"] == "Ama Mensah"
        assert data["email"] == "ama@example.com"
        assert data["phone"] == "+233201234567"
        assert data["chatToken"] == f"mock-chat-token-{user_id}"

        jwt_service = resolve(container, JWTService)
        assert jwt_service.verify_token(data["sessionToken"]).user_id == user_id

    def test_login_without_chat_provider(self, client, container):
        user_id = client.post("/signup", json=SIGNUP).json()["userId"]
        approve(container, user_id)
        resolve(container, ChatClient).fail_upsert = True

        response = client.post(
            "/login", json={"email": "ama@example.com", "password": "s3cret-pass"}
        )

        assert response.status_code == 200
        assert response.json()["chatToken"] is None

    def test_wrong_password_returns_400(self, client, container):
        user_id = client.post("/signup", json=SIGNUP).json()["userId"]
        approve(container, user_id)

        response = client.post(
            "/login", json={"email": "ama@example.com", "password": "nope"}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_credentials"

    def test_unknown_email_returns_400(self, client):
        response = client.post(
            "/login", json={"email": "nobody@example.com", "password": "s3cret-pass"}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_credentials"


class TestChatToken:
    """Tests for POST /chat/token."""

    def test_bearer_session_gets_chat_token(self, client, container):
        # Arrange
        user_id = client.post("/signup", json=SIGNUP).json()["userId"]
        approve(container, user_id)
        session = client.post(
            "/login", json={"email": "ama@example.com", "password": "s3cret-pass"}
        ).json()["sessionToken"]

        # Act
        response = client.post(
            "/chat/token", headers={"Authorization": f"Bearer {session}"}
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "userId": user_id,
            "chatToken": f"mock-chat-token-{user_id}",
        }

    def test_missing_header_returns_401(self, client):
        response = client.post("/chat/token")

        assert response.status_code == 401
        assert response.json()["error"] == "not_authenticated"

    def test_invalid_token_returns_401(self, client):
        response = client.post(
            "/chat/token", headers={"Authorization": "Bearer garbage"}
        )

        assert response.status_code == 401
