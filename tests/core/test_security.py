"""Tests for security utilities."""

import uuid
from datetime import UTC, datetime, timedelta

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt

from omni_auth.core.security import (
    create_access_token,
    get_current_user,
    get_password_hash,
    verify_password,
    verify_token,
)
from omni_auth.core.settings import get_settings


def test_password_hashing():
    """Test password hashing and verification."""
    password = "testpassword123"
    hashed = get_password_hash(password)

    assert hashed != password
    assert hashed.startswith("$argon2")
    assert verify_password(password, hashed) is True
    assert verify_password("wrongpassword", hashed) is False


def test_create_access_token_with_expiration():
    """Test JWT token creation with custom expiration."""
    expires_delta = timedelta(minutes=15)
    token = create_access_token({"sub": "123"}, expires_delta)

    settings = get_settings()
    payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])

    exp_time = datetime.fromtimestamp(payload["exp"], tz=UTC)
    expected_time = datetime.now(UTC) + expires_delta

    # Allow 1 minute tolerance
    assert abs((exp_time - expected_time).total_seconds()) < 60


def test_create_access_token_default_expiration():
    token = create_access_token({"sub": "123"})
    payload = verify_token(token)

    exp_time = datetime.fromtimestamp(payload["exp"], tz=UTC)
    expected = datetime.now(UTC) + timedelta(
        minutes=get_settings().access_token_expire_minutes
    )
    assert abs((exp_time - expected).total_seconds()) < 60


def test_verify_token_invalid():
    """Test token verification with invalid token."""
    with pytest.raises(HTTPException) as exc_info:
        verify_token("invalid.token.here")

    assert exc_info.value.status_code == 401
    assert "Could not validate credentials" in str(exc_info.value.detail)


def test_verify_token_expired():
    token = create_access_token({"sub": "123"}, timedelta(minutes=-5))

    with pytest.raises(HTTPException) as exc_info:
        verify_token(token)

    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
class TestGetCurrentUser:
    async def test_reads_identity_claims(self):
        user_id = uuid.uuid4()
        token = create_access_token(
            {"sub": str(user_id), "email": "a@optional.com", "username": "a"}
        )

        user = await get_current_user(
            HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)
        )

        assert user.user_id == user_id
        assert user.email == "a@optional.com"
        assert user.username == "a"

    async def test_missing_subject(self):
        token = create_access_token({"email": "a@optional.com"})

        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(
                HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)
            )

        assert exc_info.value.detail == "Token missing subject"

    async def test_non_uuid_subject(self):
        token = create_access_token({"sub": "123"})

        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(
                HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)
            )

        assert exc_info.value.detail == "Invalid user ID format"
