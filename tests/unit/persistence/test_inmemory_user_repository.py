"""Unit tests for the conditional writes of InMemoryUserRepository."""

from datetime import datetime, timedelta, timezone

import pytest

from guard.domain.error import ConflictError
from guard.domain.value import RecoveryScheme
from guard.persistence.repository.inmemory import InMemoryUserRepository
from tests.harness import make_user


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TestUniqueness:
    """Email and phone are unique across users."""

    @pytest.mark.asyncio
    async def test_duplicate_email(self):
        repo = InMemoryUserRepository()
        await repo.save(make_user())

        with pytest.raises(ConflictError):
            await repo.save(make_user(phone="+233200000000"))

    @pytest.mark.asyncio
    async def test_duplicate_phone(self):
        repo = InMemoryUserRepository()
        await repo.save(make_user())

        with pytest.raises(ConflictError):
            await repo.save(make_user(email="kofi@example.com"))

    @pytest.mark.asyncio
    async def test_resaving_same_user_is_allowed(self):
        repo = InMemoryUserRepository()
        user = await repo.save(make_user())

        await repo.save(user.model_copy(update={"name": "Ama K. Mensah"}))

        assert (await repo.find_by_id(user.id)).name == "Ama K. Mensah"


class TestResetSecrets:
    """Store, discard and consume are conditional on the stored state."""

    @pytest.mark.asyncio
    async def test_store_refused_while_secret_active(self):
        # Arrange
        repo = InMemoryUserRepository()
        user = await repo.save(make_user())
        now = utcnow()
        await repo.store_reset_secret(
            user.id, RecoveryScheme.CODE, "111111", now + timedelta(minutes=10), now
        )

        # Act
        stored = await repo.store_reset_secret(
            user.id, RecoveryScheme.CODE, "222222", now + timedelta(minutes=10), now
        )

        # Assert
        assert stored is False
        assert (await repo.find_by_id(user.id)).reset_secret == "111111"

    @pytest.mark.asyncio
    async def test_store_allowed_once_expired(self):
        repo = InMemoryUserRepository()
        user = await repo.save(make_user())
        now = utcnow()
        await repo.store_reset_secret(
            user.id, RecoveryScheme.CODE, "111111", now - timedelta(seconds=1), now
        )

        stored = await repo.store_reset_secret(
            user.id, RecoveryScheme.TOKEN, "ab" * 20, now + timedelta(hours=1), now
        )

        assert stored is True
        assert (await repo.find_by_id(user.id)).reset_scheme == RecoveryScheme.TOKEN

    @pytest.mark.asyncio
    async def test_discard_only_clears_matching_secret(self):
        repo = InMemoryUserRepository()
        user = await repo.save(make_user())
        now = utcnow()
        await repo.store_reset_secret(
            user.id, RecoveryScheme.CODE, "111111", now + timedelta(minutes=10), now
        )

        await repo.discard_reset_secret(user.id, "999999")
        assert (await repo.find_by_id(user.id)).reset_secret == "111111"

        await repo.discard_reset_secret(user.id, "111111")
        assert (await repo.find_by_id(user.id)).reset_secret is None

    @pytest.mark.asyncio
    async def test_consume_clears_secret_and_sets_password(self):
        # Arrange
        repo = InMemoryUserRepository()
        user = await repo.save(make_user())
        now = utcnow()
        await repo.store_reset_secret(
            user.id, RecoveryScheme.CODE, "111111", now + timedelta(minutes=10), now
        )

        # Act
        first = await repo.consume_reset_secret(
            RecoveryScheme.CODE, "111111", "new-hash", utcnow(), email=user.email
        )
        second = await repo.consume_reset_secret(
            RecoveryScheme.CODE, "111111", "newer-hash", utcnow(), email=user.email
        )

        # Assert
        assert first == user.id
        assert second is None
        stored = await repo.find_by_id(user.id)
        assert stored.password_hash == "new-hash"
        assert stored.reset_secret is None
        assert stored.reset_expires_at is None

    @pytest.mark.asyncio
    async def test_same_code_for_two_users_is_told_apart_by_email(self):
        repo = InMemoryUserRepository()
        ama = await repo.save(make_user())
        kofi = await repo.save(make_user(email="kofi@example.com", phone="+233207654321"))
        now = utcnow()
        for user in (ama, kofi):
            await repo.store_reset_secret(
                user.id, RecoveryScheme.CODE, "123456", now + timedelta(minutes=10), now
            )

        consumed = await repo.consume_reset_secret(
            RecoveryScheme.CODE, "123456", "new-hash", utcnow(), email="kofi@example.com"
        )

        assert consumed == kofi.id
        assert (await repo.find_by_id(ama.id)).reset_secret == "123456"
