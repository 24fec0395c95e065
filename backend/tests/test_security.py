"""Security module tests."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from cashvelo.core.exceptions import ForbiddenError, UnauthorizedError
from cashvelo.core.security import (
    create_access_token,
    decode_token,
    generate_reset_token,
    hash_password,
    hash_reset_token,
    verify_access_token,
    verify_password,
)


def test_hash_password():
    """Test password hashing."""
    hashed = hash_password("mypassword")
    assert hashed != "mypassword"
    assert hashed.startswith("$2b$")


def test_verify_password_correct():
    """Test verifying correct password."""
    hashed = hash_password("mypassword")
    assert verify_password("mypassword", hashed) is True


def test_verify_password_incorrect():
    """Test verifying incorrect password."""
    hashed = hash_password("mypassword")
    assert verify_password("wrongpassword", hashed) is False


def test_password_hash_uniqueness():
    """Test that same password gets different hashes (salted)."""
    hash1 = hash_password("samepassword")
    hash2 = hash_password("samepassword")
    assert hash1 != hash2
    assert verify_password("samepassword", hash1)
    assert verify_password("samepassword", hash2)


def test_access_token_carries_identity():
    """Token claims round-trip the user identity."""
    user_id = uuid4()
    token = create_access_token(user_id=str(user_id), email="a@b.com", username="alice")
    payload = decode_token(token)
    assert payload["userId"] == str(user_id)
    assert payload["email"] == "a@b.com"
    assert payload["username"] == "alice"
    assert payload["type"] == "access"

    claims = verify_access_token(token)
    assert claims.user_id == user_id
    assert claims.username == "alice"


def test_access_token_valid_for_seven_days():
    token = create_access_token(user_id=str(uuid4()), email="a@b.com", username="alice")
    payload = decode_token(token)
    expected = datetime.now(timezone.utc) + timedelta(days=7)
    assert abs(payload["exp"] - expected.timestamp()) < 60


def test_verify_missing_token_is_unauthorized():
    with pytest.raises(UnauthorizedError):
        verify_access_token(None)
    with pytest.raises(UnauthorizedError):
        verify_access_token("")


def test_verify_invalid_token_is_forbidden():
    with pytest.raises(ForbiddenError):
        verify_access_token("invalid.token.here")


def test_verify_token_signed_with_other_key_is_forbidden():
    token = create_access_token(
        user_id=str(uuid4()),
        email="a@b.com",
        username="alice",
        secret_key="another_secret_key_that_is_long_enough_123",
    )
    with pytest.raises(ForbiddenError):
        verify_access_token(token)


def test_verify_expired_token_is_forbidden():
    token = create_access_token(
        user_id=str(uuid4()),
        email="a@b.com",
        username="alice",
        expires_delta=timedelta(seconds=-1),
    )
    with pytest.raises(ForbiddenError):
        verify_access_token(token)


def test_decode_invalid_token():
    """Test decoding an invalid token."""
    assert decode_token("invalid.token.here") is None


def test_reset_token_only_hash_is_derived():
    token, hashed = generate_reset_token()
    assert len(token) == 64
    assert hashed != token
    assert hashed == hash_reset_token(token)


def test_reset_tokens_are_unique():
    first, _ = generate_reset_token()
    second, _ = generate_reset_token()
    assert first != second
