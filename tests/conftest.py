"""Test configuration and fixtures."""

import pytest

from guard.domain.service import PasswordService
from tests.harness import TEST_BCRYPT_ROUNDS


@pytest.fixture(autouse=True)
def test_settings_env(monkeypatch):
    """Settings overrides read by containers built inside a test."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("AUTH__BCRYPT_ROUNDS", str(TEST_BCRYPT_ROUNDS))
    monkeypatch.setenv("AUTH__JWT_SECRET", "test-jwt-secret")


@pytest.fixture
def password_service() -> PasswordService:
    return PasswordService(rounds=TEST_BCRYPT_ROUNDS)
