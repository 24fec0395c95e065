"""Password reset flow tests."""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from cashvelo.core.security import hash_reset_token
from cashvelo.models.user import User

GENERIC_MESSAGE = "If an account exists with this email, you will receive a password reset link."


async def _request_reset(client: AsyncClient, mailer) -> str:
    response = await client.post("/api/forgot-password", json={"email": "user@test.com"})
    assert response.status_code == 200
    reset_url = mailer.sent[-1]["reset_url"]
    return reset_url.rsplit("/", 1)[-1]


@pytest.mark.asyncio
async def test_forgot_password_unknown_email(client: AsyncClient, mailer, regular_user: User):
    """Unknown addresses get the same answer and nothing is sent or stored."""
    response = await client.post("/api/forgot-password", json={"email": "nobody@test.com"})
    assert response.status_code == 200
    assert response.json()["message"] == GENERIC_MESSAGE
    assert mailer.sent == []
    assert regular_user.password_reset_token is None


@pytest.mark.asyncio
async def test_forgot_password_known_email(client: AsyncClient, mailer, regular_user: User):
    response = await client.post("/api/forgot-password", json={"email": " USER@test.com "})
    assert response.status_code == 200
    assert response.json()["message"] == GENERIC_MESSAGE

    assert len(mailer.sent) == 1
    sent = mailer.sent[0]
    assert sent["to_email"] == "user@test.com"
    assert sent["username"] == "regular"
    assert sent["reset_url"].startswith("http://frontend.test/reset-password/")

    token = sent["reset_url"].rsplit("/", 1)[-1]
    # Only the hash is stored
    assert regular_user.password_reset_token == hash_reset_token(token)
    assert regular_user.password_reset_token != token
    assert regular_user.password_reset_expires is not None


@pytest.mark.asyncio
async def test_forgot_password_missing_email(client: AsyncClient):
    response = await client.post("/api/forgot-password", json={})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_forgot_password_send_failure(client: AsyncClient, mailer, regular_user: User):
    mailer.fail = True
    response = await client.post("/api/forgot-password", json={"email": "user@test.com"})
    assert response.status_code == 500
    assert response.json()["code"] == "email_delivery_failed"


@pytest.mark.asyncio
async def test_verify_reset_token(client: AsyncClient, mailer, regular_user: User):
    token = await _request_reset(client, mailer)

    response = await client.get(f"/api/verify-reset-token/{token}")
    assert response.status_code == 200
    assert response.json() == {"valid": True, "email": "user@test.com"}


@pytest.mark.asyncio
async def test_verify_wrong_reset_token(client: AsyncClient, mailer, regular_user: User):
    await _request_reset(client, mailer)

    response = await client.get(f"/api/verify-reset-token/{'0' * 64}")
    assert response.status_code == 400
    assert response.json()["valid"] is False


@pytest.mark.asyncio
async def test_expired_reset_token(
    client: AsyncClient,
    mailer,
    regular_user: User,
    db_session: AsyncSession,
):
    token = await _request_reset(client, mailer)

    regular_user.password_reset_expires = datetime.now(timezone.utc) - timedelta(minutes=1)
    await db_session.commit()

    response = await client.get(f"/api/verify-reset-token/{token}")
    assert response.status_code == 400
    assert response.json()["valid"] is False

    response = await client.post(f"/api/reset-password/{token}", json={"password": "newpass123"})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid or expired reset token"


@pytest.mark.asyncio
async def test_reset_password_round_trip(client: AsyncClient, mailer, regular_user: User):
    token = await _request_reset(client, mailer)

    response = await client.post(f"/api/reset-password/{token}", json={"password": "newpass123"})
    assert response.status_code == 200
    assert response.json()["message"] == "Password has been reset successfully"

    # Reset state is cleared
    assert regular_user.password_reset_token is None
    assert regular_user.password_reset_expires is None

    # New password works, old one does not
    response = await client.post(
        "/api/login", json={"email": "user@test.com", "password": "newpass123"}
    )
    assert response.status_code == 200
    response = await client.post(
        "/api/login", json={"email": "user@test.com", "password": "userpassword"}
    )
    assert response.status_code == 401

    # Single use
    response = await client.get(f"/api/verify-reset-token/{token}")
    assert response.status_code == 400
    response = await client.post(f"/api/reset-password/{token}", json={"password": "another123"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_new_request_replaces_previous_token(client: AsyncClient, mailer, regular_user: User):
    first = await _request_reset(client, mailer)
    second = await _request_reset(client, mailer)

    response = await client.get(f"/api/verify-reset-token/{first}")
    assert response.status_code == 400
    response = await client.get(f"/api/verify-reset-token/{second}")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_reset_password_too_short(client: AsyncClient, mailer, regular_user: User):
    token = await _request_reset(client, mailer)

    response = await client.post(f"/api/reset-password/{token}", json={"password": "12345"})
    assert response.status_code == 400

    # Token is still usable
    response = await client.get(f"/api/verify-reset-token/{token}")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_reset_password_missing_password(client: AsyncClient, mailer, regular_user: User):
    token = await _request_reset(client, mailer)
    response = await client.post(f"/api/reset-password/{token}", json={})
    assert response.status_code == 400
