"""Shared FastAPI dependencies."""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from cashvelo.core.security import TokenClaims, verify_access_token
from cashvelo.services.email_service import EmailService, email_service

# auto_error=False so a missing header yields our 401, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenClaims:
    """Verify the bearer token and attach its claims to the request.

    No database lookup happens here: sessions are stateless and every
    downstream query is scoped by ``claims.user_id``.
    """
    token = credentials.credentials if credentials else None
    claims = verify_access_token(token)
    request.state.user = claims
    return claims


def get_email_service() -> EmailService:
    return email_service
