"""Expense model."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Numeric, String, Text, Uuid

from cashvelo.models import Base, utcnow


class Expense(Base):
    __tablename__ = "expenses"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Numeric(precision=18, scale=2), nullable=False)
    category = Column(String(100), default="", nullable=False)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    note = Column(Text, default="", nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
