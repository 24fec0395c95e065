"""Credit card model."""

import uuid
from decimal import Decimal

from sqlalchemy import Column, DateTime, ForeignKey, Numeric, String, Uuid

from cashvelo.models import Base, utcnow


class CreditCard(Base):
    __tablename__ = "credit_cards"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(200), default="", nullable=False)
    balance = Column(Numeric(precision=18, scale=2), default=Decimal("0"), nullable=False)
    pending = Column(Numeric(precision=18, scale=2), default=Decimal("0"), nullable=False)
    payment = Column(Numeric(precision=18, scale=2), default=Decimal("0"), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
