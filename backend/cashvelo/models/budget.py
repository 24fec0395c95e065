"""Budget model."""

import enum
import uuid
from decimal import Decimal

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Numeric, String, Uuid

from cashvelo.models import Base, utcnow


class BudgetType(str, enum.Enum):
    RECURRING = "recurring"
    VARIABLE = "variable"


class Budget(Base):
    __tablename__ = "budgets"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    limit = Column(Numeric(precision=18, scale=2), default=Decimal("0"), nullable=False)
    type = Column(Enum(BudgetType), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
