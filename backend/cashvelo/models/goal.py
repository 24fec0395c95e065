"""Goal model."""

import enum
import uuid
from decimal import Decimal

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Numeric, String, Text, Uuid

from cashvelo.models import Base, utcnow


class GoalCategory(str, enum.Enum):
    VACATION = "vacation"
    DEBT = "debt"
    EMERGENCY = "emergency"
    PURCHASE = "purchase"
    EDUCATION = "education"
    HOME = "home"
    OTHER = "other"


class Goal(Base):
    __tablename__ = "goals"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    target_amount = Column(Numeric(precision=18, scale=2), nullable=False)
    current_amount = Column(Numeric(precision=18, scale=2), default=Decimal("0"), nullable=False)
    target_date = Column(DateTime(timezone=True), nullable=False)
    category = Column(Enum(GoalCategory), default=GoalCategory.OTHER, nullable=False)
    icon = Column(String(50), default="🎯", nullable=False)
    color = Column(String(7), default="#3b82f6", nullable=False)
    completed = Column(Boolean, default=False, nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
