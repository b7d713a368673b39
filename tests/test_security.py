"""
Token service and password hashing.
"""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from task_tracker.exceptions import ConfigurationError, InvalidToken
from task_tracker.utils.security import TokenService, hash_password, verify_password

pytestmark = pytest.mark.unit


class TestTokenService:
    def test_issued_token_verifies_to_same_user(self):
        tokens = TokenService("secret")
        assert tokens.verify(tokens.issue(42)) == 42

    def test_token_signed_with_other_secret_is_rejected(self):
        forged = TokenService("other-secret").issue(42)
        with pytest.raises(InvalidToken):
            TokenService("secret").verify(forged)

    def test_tampered_payload_is_rejected(self):
        tokens = TokenService("secret")
        header, _, signature = tokens.issue(1).split(".")
        _, other_payload, _ = tokens.issue(2).split(".")
        with pytest.raises(InvalidToken):
            tokens.verify(".".join([header, other_payload, signature]))

    def test_expired_token_is_rejected(self):
        tokens = TokenService("secret", expires_minutes=5)
        token = tokens.issue(7, now=datetime.now(timezone.utc) - timedelta(minutes=10))
        with pytest.raises(InvalidToken):
            tokens.verify(token)

    def test_token_within_lifetime_is_accepted(self):
        tokens = TokenService("secret", expires_minutes=5)
        token = tokens.issue(7, now=datetime.now(timezone.utc) - timedelta(minutes=1))
        assert tokens.verify(token) == 7

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_malformed_token_is_rejected(self, token):
        with pytest.raises(InvalidToken):
            TokenService("secret").verify(token)

    def test_non_numeric_subject_is_rejected(self):
        token = jwt.encode(
            {"sub": "someone@example.com", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
            "secret",
            algorithm="HS256",
        )
        with pytest.raises(InvalidToken):
            TokenService("secret").verify(token)

    def test_missing_subject_is_rejected(self):
        token = jwt.encode(
            {"exp": datetime.now(timezone.utc) + timedelta(minutes=5)}, "secret", algorithm="HS256"
        )
        with pytest.raises(InvalidToken):
            TokenService("secret").verify(token)

    def test_invalid_token_carries_no_detail(self):
        expired = TokenService("secret", expires_minutes=1).issue(
            1, now=datetime.now(timezone.utc) - timedelta(hours=1)
        )
        forged = TokenService("other").issue(1)
        errors = []
        for token in (expired, forged):
            with pytest.raises(InvalidToken) as exc_info:
                TokenService("secret", expires_minutes=1).verify(token)
            errors.append(str(exc_info.value))
        assert errors[0] == errors[1] == ""

    def test_empty_secret_is_a_configuration_error(self):
        with pytest.raises(ConfigurationError):
            TokenService("")


class TestPasswords:
    def test_hash_is_salted_and_verifies(self):
        first = hash_password("password123", rounds=4)
        second = hash_password("password123", rounds=4)
        assert first != second
        assert "password123" not in first
        assert verify_password("password123", first)
        assert verify_password("password123", second)

    def test_wrong_password_fails(self):
        hashed = hash_password("password123", rounds=4)
        assert not verify_password("password124", hashed)

    def test_non_bcrypt_hash_fails_closed(self):
        assert not verify_password("password123", "plaintext")
