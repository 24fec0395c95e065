"""Authentication schemas."""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from cashvelo.schemas.common import CamelModel
from cashvelo.schemas.user import UserPublic


class SignupRequest(CamelModel):
    """Schema for signup request."""

    username: str = Field(..., min_length=3, max_length=50)
    full_name: Optional[str] = Field(None, max_length=200)
    email: EmailStr
    password: str = Field(..., min_length=6)


class LoginRequest(BaseModel):
    """Schema for login request."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AuthResponse(BaseModel):
    """Schema for signup/login response."""

    message: str
    token: str
    user: UserPublic


class ForgotPasswordRequest(BaseModel):
    """Schema for password reset request."""

    email: str = Field(..., min_length=1)


class ResetPasswordRequest(BaseModel):
    """Schema for password reset confirmation. The token travels in the URL."""

    password: str = Field(..., min_length=6)


class VerifyResetTokenResponse(BaseModel):
    valid: bool
    email: Optional[str] = None
