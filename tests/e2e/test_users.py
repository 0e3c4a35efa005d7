"""End-to-end tests for the user endpoints."""

import asyncio
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from guard.domain.repository import UserRepository
from guard.domain.service import ChatClient
from guard.domain.value import UserStatus
from guard.interface.api.app import create_app
from tests.di import build_test_container
from tests.harness import make_user, resolve


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def user(container):
    repo = resolve(container, UserRepository)
    return asyncio.run(
        repo.save(
            make_user(
                status=UserStatus.PENDING,
                identity_document="aWQ=",
                selfie_image="c2VsZmll",
            )
        )
    )


@pytest.fixture
def client(container):
    """Create test client."""
    return TestClient(create_app(container))


class TestGetUser:
    """Tests for GET /api/users/{id}."""

    def test_returns_public_fields_only(self, client, user):
        response = client.get(f"/api/users/{user.id}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == str(user.id)
        assert data["status"] == "pending"
        assert data["role"] == "user"
        for hidden in ("passwordHash", "identityDocument", "selfieImage", "resetSecret"):
            assert hidden not in data

    def test_unknown_user_returns_404(self, client):
        response = client.get(f"/api/users/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    def test_malformed_id_returns_400(self, client):
        response = client.get("/api/users/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    def test_list_users(self, client, user):
        response = client.get("/api/users")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 1
        assert data["users"][0]["email"] == user.email


class TestDeleteUser:
    """Tests for DELETE /api/users/{id}."""

    def test_delete_succeeds(self, client, container, user):
        chat_client = resolve(container, ChatClient)
        asyncio.run(chat_client.upsert_identity(str(user.id), user.name))

        response = client.delete(f"/api/users/{user.id}")

        assert response.status_code == 200
        assert response.json()["chatIdentityDeleted"] is True
        assert client.get(f"/api/users/{user.id}").status_code == 404

    def test_chat_failure_returns_502_but_keeps_local_delete(
        self, client, container, user
    ):
        # Arrange
        resolve(container, ChatClient).fail_delete = True

        # Act
        response = client.delete(f"/api/users/{user.id}")

        # Assert
        assert response.status_code == 502
        data = response.json()
        assert data["error"] == "partial_failure"
        assert data["localDeleted"] is True
        assert data["chatIdentityDeleted"] is False
        assert client.get(f"/api/users/{user.id}").status_code == 404

    def test_unknown_user_returns_404(self, client):
        response = client.delete(f"/api/users/{uuid4()}")

        assert response.status_code == 404


class TestAvatarAndIdentity:
    """Tests for the avatar and identity document uploads."""

    def test_update_avatar(self, client, user):
        response = client.post(
            f"/api/users/{user.id}/avatar", json={"avatar": "avatars/ama.png"}
        )

        assert response.status_code == 200
        assert response.json()["avatar"] == "avatars/ama.png"

    def test_update_avatar_unknown_user(self, client):
        response = client.post(f"/api/users/{uuid4()}/avatar", json={"avatar": "x"})

        assert response.status_code == 404

    def test_submit_id_keeps_status(self, client, container, user):
        # Act
        response = client.post(
            "/submit-id", json={"userId": str(user.id), "base64Image": "bmV3"}
        )

        # Assert
        assert response.status_code == 200
        stored = asyncio.run(resolve(container, UserRepository).find_by_id(user.id))
        assert stored.identity_document == "bmV3"
        assert stored.status == UserStatus.PENDING

    def test_submit_id_requires_document(self, client, user):
        response = client.post("/submit-id", json={"userId": str(user.id)})

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
