"""User schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from cashvelo.schemas.common import CamelModel


class UserPublic(CamelModel):
    """User fields returned after signup/login."""

    id: UUID
    username: str
    full_name: str
    email: str


class UserDetail(UserPublic):
    """User fields returned by the profile endpoint (no password data)."""

    created_at: datetime


class UserEnvelope(BaseModel):
    user: UserDetail
