"""Credential store: user lookup, creation, password and reset-token state."""

import logging
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cashvelo.core.exceptions import ConflictError, NotFoundError
from cashvelo.core.security import hash_reset_token, verify_password
from cashvelo.models.user import User

logger = logging.getLogger(__name__)

EMAIL_TAKEN_MESSAGE = "Unable to create an account!"
USERNAME_TAKEN_MESSAGE = "Username already taken"
INVALID_RESET_TOKEN_MESSAGE = "Invalid or expired reset token"


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserService:
    """Persistence operations on user records."""

    async def find_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.email == normalize_email(email)))
        return result.scalar_one_or_none()

    async def find_by_username(self, db: AsyncSession, username: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.username == username.strip()))
        return result.scalar_one_or_none()

    async def find_by_id(self, db: AsyncSession, user_id: UUID) -> Optional[User]:
        result = await db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def find_existing(self, db: AsyncSession, email: str, username: str) -> Optional[User]:
        """Any user already holding this email or username, email match first."""
        result = await db.execute(
            select(User).where(or_(User.email == email, User.username == username))
        )
        users = result.scalars().all()
        for user in users:
            if user.email == email:
                return user
        return users[0] if users else None

    @staticmethod
    def _conflict_message(existing_user: User, email: str) -> str:
        if existing_user.email == email:
            return EMAIL_TAKEN_MESSAGE
        return USERNAME_TAKEN_MESSAGE

    async def create(
        self,
        db: AsyncSession,
        username: str,
        email: str,
        password_hash: str,
        full_name: Optional[str] = None,
    ) -> User:
        """Insert a new user, raising ConflictError if email or username is taken.

        The existence check and the insert are not atomic; the unique
        constraints on both columns catch the race and surface it the same way.
        """
        username = username.strip()
        email = normalize_email(email)

        existing_user = await self.find_existing(db, email, username)
        if existing_user:
            raise ConflictError(self._conflict_message(existing_user, email))

        user = User(
            username=username,
            full_name=(full_name or "").strip() or username,
            email=email,
            password_hash=password_hash,
        )
        db.add(user)
        try:
            await db.flush()
        except IntegrityError:
            await db.rollback()
            logger.warning("Signup lost a uniqueness race for username=%s", username)
            winner = await self.find_existing(db, email, username)
            message = self._conflict_message(winner, email) if winner else EMAIL_TAKEN_MESSAGE
            raise ConflictError(message)

        await db.refresh(user)
        return user

    async def authenticate(self, db: AsyncSession, email: str, password: str) -> Optional[User]:
        """Return the user if the credentials match, else None."""
        user = await self.find_by_email(db, email)
        if not user or not verify_password(password, user.password_hash):
            return None
        return user

    async def set_password(self, db: AsyncSession, user: User, new_hash: str) -> User:
        """Replace the password and drop any pending reset in the same update."""
        user.password_hash = new_hash
        user.password_reset_token = None
        user.password_reset_expires = None
        await db.flush()
        return user

    async def set_reset_token(
        self,
        db: AsyncSession,
        user: User,
        hashed_token: str,
        expires: datetime,
    ) -> User:
        """Store pending reset state, replacing any earlier request."""
        user.password_reset_token = hashed_token
        user.password_reset_expires = expires
        await db.flush()
        return user

    async def verify_reset_token(
        self,
        db: AsyncSession,
        token: str,
        now: Optional[datetime] = None,
    ) -> User:
        """Find the user holding this unexpired reset token.

        Wrong and expired tokens raise the same NotFoundError.
        """
        now = now or datetime.now(timezone.utc)
        result = await db.execute(
            select(User).where(
                User.password_reset_token == hash_reset_token(token),
                User.password_reset_expires > now,
            )
        )
        user = result.scalar_one_or_none()
        if not user:
            raise NotFoundError(INVALID_RESET_TOKEN_MESSAGE)
        return user


user_service = UserService()
