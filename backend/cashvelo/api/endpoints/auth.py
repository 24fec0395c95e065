"""Authentication and password reset endpoints."""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from cashvelo.api.deps import get_current_user, get_email_service
from cashvelo.core.config import settings
from cashvelo.core.database import get_db
from cashvelo.core.exceptions import (
    BadRequestError,
    EmailDeliveryError,
    NotFoundError,
    UnauthorizedError,
)
from cashvelo.core.logging import mask_email
from cashvelo.core.rate_limit import RATE_LIMITS, limiter
from cashvelo.core.security import (
    TokenClaims,
    create_access_token,
    generate_reset_token,
    hash_password,
    reset_token_expiry,
)
from cashvelo.models.user import User
from cashvelo.schemas.auth import (
    AuthResponse,
    ForgotPasswordRequest,
    LoginRequest,
    ResetPasswordRequest,
    SignupRequest,
    VerifyResetTokenResponse,
)
from cashvelo.schemas.common import MessageResponse
from cashvelo.schemas.user import UserDetail, UserEnvelope, UserPublic
from cashvelo.services.email_service import EmailService
from cashvelo.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter()

FORGOT_PASSWORD_MESSAGE = (
    "If an account exists with this email, you will receive a password reset link."
)


def _auth_response(message: str, user: User) -> dict:
    token = create_access_token(
        user_id=str(user.id),
        email=user.email,
        username=user.username,
    )
    return {"message": message, "token": token, "user": UserPublic.model_validate(user)}


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_LIMITS["auth_signup"])
async def signup(
    request: Request,
    signup_data: SignupRequest,
    db: AsyncSession = Depends(get_db),
):
    """Create an account and log it in."""
    user = await user_service.create(
        db,
        username=signup_data.username,
        email=signup_data.email,
        password_hash=hash_password(signup_data.password),
        full_name=signup_data.full_name,
    )
    await db.commit()

    logger.info("User signed up", extra={"user_id": str(user.id)})
    return _auth_response("User created successfully", user)


@router.post("/login", response_model=AuthResponse)
@limiter.limit(RATE_LIMITS["auth_login"])
async def login(
    request: Request,
    login_data: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """Authenticate user and return a session token."""
    user = await user_service.authenticate(db, login_data.email, login_data.password)
    if not user:
        logger.warning("Failed login", extra={"email": mask_email(login_data.email)})
        raise UnauthorizedError("Invalid email or password")

    return _auth_response("Login successful", user)


@router.post("/forgot-password", response_model=MessageResponse)
@limiter.limit(RATE_LIMITS["auth_forgot_password"])
async def forgot_password(
    request: Request,
    data: ForgotPasswordRequest,
    db: AsyncSession = Depends(get_db),
    mailer: EmailService = Depends(get_email_service),
):
    """Email a password reset link. Same answer whether or not the email is known."""
    user = await user_service.find_by_email(db, data.email)
    if not user:
        return {"message": FORGOT_PASSWORD_MESSAGE}

    token, hashed_token = generate_reset_token()
    await user_service.set_reset_token(db, user, hashed_token, reset_token_expiry())
    await db.commit()

    reset_url = f"{settings.frontend_url}/reset-password/{token}"
    sent = await mailer.send_password_reset_email(
        to_email=user.email,
        username=user.username,
        reset_url=reset_url,
    )
    if not sent:
        raise EmailDeliveryError("Failed to send email. Please try again.")

    logger.info("Password reset email sent", extra={"user_id": str(user.id)})
    return {"message": FORGOT_PASSWORD_MESSAGE}


@router.get("/verify-reset-token/{token}", response_model=VerifyResetTokenResponse)
async def verify_reset_token(
    token: str,
    db: AsyncSession = Depends(get_db),
):
    """Tell the frontend whether a reset link is still usable."""
    try:
        user = await user_service.verify_reset_token(db, token)
    except NotFoundError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"valid": False, "error": e.message},
        )

    return {"valid": True, "email": user.email}


@router.post("/reset-password/{token}", response_model=MessageResponse)
@limiter.limit(RATE_LIMITS["auth_reset_password"])
async def reset_password(
    request: Request,
    token: str,
    data: ResetPasswordRequest,
    db: AsyncSession = Depends(get_db),
):
    """Set a new password with a token from the forgot-password email."""
    try:
        user = await user_service.verify_reset_token(db, token)
    except NotFoundError as e:
        raise BadRequestError(e.message)

    await user_service.set_password(db, user, hash_password(data.password))
    await db.commit()

    logger.info("Password reset completed", extra={"user_id": str(user.id)})
    return {"message": "Password has been reset successfully"}


@router.get("/user", response_model=UserEnvelope)
async def get_user(
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get current user information."""
    user = await user_service.find_by_id(db, current_user.user_id)
    if not user:
        raise NotFoundError("User not found")
    return {"user": UserDetail.model_validate(user)}


@router.post("/logout", response_model=MessageResponse)
async def logout(current_user: TokenClaims = Depends(get_current_user)):
    """Sessions are stateless; the client simply drops its token."""
    return {"message": "Logged out successfully"}
