"""Unit tests for PasswordService."""

import pytest

from guard.domain.error import ValidationError
from guard.domain.service import PasswordService


class TestPasswordService:
    """Tests for bcrypt hashing and verification."""

    @pytest.mark.asyncio
    async def test_hash_is_bcrypt_digest_not_plaintext(
        self, password_service: PasswordService
    ):
        digest = await password_service.hash_password("s3cret-pass")

        assert digest != "s3cret-pass"
        assert digest.startswith("$2")

    @pytest.mark.asyncio
    async def test_verify_accepts_correct_password(
        self, password_service: PasswordService
    ):
        digest = await password_service.hash_password("s3cret-pass")

        assert await password_service.verify_password("s3cret-pass", digest) is True

    @pytest.mark.asyncio
    async def test_verify_rejects_wrong_password(
        self, password_service: PasswordService
    ):
        digest = await password_service.hash_password("s3cret-pass")

        assert await password_service.verify_password("wrong-pass", digest) is False

    @pytest.mark.asyncio
    async def test_same_password_hashes_differently(
        self, password_service: PasswordService
    ):
        """Each hash uses a fresh salt."""
        first = await password_service.hash_password("s3cret-pass")
        second = await password_service.hash_password("s3cret-pass")

        assert first != second

    @pytest.mark.asyncio
    async def test_hash_rejects_empty_password(self, password_service: PasswordService):
        with pytest.raises(ValidationError):
            await password_service.hash_password("")

    @pytest.mark.asyncio
    async def test_hash_rejects_password_longer_than_72_bytes(
        self, password_service: PasswordService
    ):
        with pytest.raises(ValidationError):
            await password_service.hash_password("x" * 73)

    @pytest.mark.asyncio
    async def test_verify_returns_false_for_malformed_digest(
        self, password_service: PasswordService
    ):
        assert await password_service.verify_password("s3cret", "not-bcrypt") is False
