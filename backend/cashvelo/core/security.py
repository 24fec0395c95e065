"""Security utilities: password hashing, session JWTs, password reset tokens."""

import hashlib
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple
from uuid import UUID

import bcrypt
from jose import JWTError, jwt

from cashvelo.core.config import settings
from cashvelo.core.exceptions import ForbiddenError, UnauthorizedError

RESET_TOKEN_BYTES = 32


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a session token."""

    user_id: UUID
    email: str
    username: str


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return bcrypt.checkpw(
        plain_password.encode("utf-8"), hashed_password.encode("utf-8")
    )


# JWT session tokens
def create_access_token(
    user_id: str,
    email: str,
    username: str,
    expires_delta: Optional[timedelta] = None,
    secret_key: Optional[str] = None,
) -> str:
    """Create a signed session token for the given identity."""
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(
            days=settings.ACCESS_TOKEN_EXPIRE_DAYS
        )

    to_encode = {
        "userId": str(user_id),
        "email": email,
        "username": username,
        "exp": expire,
        "type": "access",
    }
    return jwt.encode(
        to_encode, secret_key or settings.SECRET_KEY, algorithm=settings.ALGORITHM
    )


def decode_token(token: str, secret_key: Optional[str] = None) -> Optional[dict]:
    """Decode and validate a JWT token."""
    try:
        payload = jwt.decode(
            token, secret_key or settings.SECRET_KEY, algorithms=[settings.ALGORITHM]
        )
        return payload
    except JWTError:
        return None


def verify_access_token(
    token: Optional[str], secret_key: Optional[str] = None
) -> TokenClaims:
    """Return the claims of a valid session token.

    Raises UnauthorizedError when no token was supplied and ForbiddenError
    when the signature is bad, the token expired or the claims are incomplete.
    """
    if not token:
        raise UnauthorizedError("Access token required")

    payload = decode_token(token, secret_key=secret_key)
    if not payload or payload.get("type") != "access":
        raise ForbiddenError("Invalid or expired token")

    user_id = payload.get("userId")
    email = payload.get("email")
    username = payload.get("username")
    if not user_id or not email or not username:
        raise ForbiddenError("Invalid or expired token")
    try:
        user_uuid = UUID(str(user_id))
    except ValueError:
        raise ForbiddenError("Invalid or expired token")

    return TokenClaims(user_id=user_uuid, email=email, username=username)


# Password reset tokens
def hash_reset_token(token: str) -> str:
    """One-way hash stored in place of the reset token."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def generate_reset_token() -> Tuple[str, str]:
    """Return (plain token for the email link, hash for the database)."""
    token = secrets.token_hex(RESET_TOKEN_BYTES)
    return token, hash_reset_token(token)


def reset_token_expiry(now: Optional[datetime] = None) -> datetime:
    now = now or datetime.now(timezone.utc)
    return now + timedelta(minutes=settings.PASSWORD_RESET_EXPIRE_MINUTES)
