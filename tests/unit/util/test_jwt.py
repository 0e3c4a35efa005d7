"""Unit tests for session JWT helpers."""

from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest

from guard.config import AuthSettings
from guard.util.jwt import JWTError, create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="unit-test-secret", jwt_expiry_minutes=15)


class TestSessionTokens:
    """Tests for create_token / verify_token."""

    def test_roundtrip_carries_user_id_and_expiry(self):
        before = datetime.now(timezone.utc)

        payload = verify_token(create_token("user-1", SETTINGS), SETTINGS)

        assert payload.user_id == "user-1"
        assert before + timedelta(minutes=14) < payload.exp
        assert payload.exp <= before + timedelta(minutes=16)

    def test_expired_token_is_rejected(self):
        token = pyjwt.encode(
            {
                "user_id": "user-1",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            SETTINGS.jwt_secret,
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, SETTINGS)

    def test_wrong_secret_is_rejected(self):
        other = AuthSettings(jwt_secret="someone-else")

        with pytest.raises(JWTError, match="Invalid"):
            verify_token(create_token("user-1", other), SETTINGS)

    def test_garbage_is_rejected(self):
        with pytest.raises(JWTError):
            verify_token("not.a.jwt", SETTINGS)
