"""Expense schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from cashvelo.schemas.common import CamelModel


class ExpenseCreate(CamelModel):
    """Schema for creating an expense."""

    amount: Decimal = Field(..., decimal_places=2)
    category: Optional[str] = Field(None, max_length=100)
    date: datetime
    note: Optional[str] = None

    @field_validator("amount")
    @classmethod
    def amount_not_zero(cls, v: Decimal) -> Decimal:
        """Zero is rejected; negative amounts are stored as entered."""
        if v == 0:
            raise ValueError("Amount is required")
        return v


class ExpenseResponse(CamelModel):
    """Schema for expense response."""

    id: UUID
    user_id: UUID
    amount: float
    category: str
    date: datetime
    note: str
    created_at: datetime
    updated_at: datetime
