"""Income schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from cashvelo.schemas.common import CamelModel


class IncomeCreate(CamelModel):
    """Schema for recording income."""

    type: str = Field(..., min_length=1, max_length=100)
    amount: Decimal = Field(..., decimal_places=2)
    date: Optional[datetime] = None
    note: Optional[str] = None

    @field_validator("amount")
    @classmethod
    def amount_not_zero(cls, v: Decimal) -> Decimal:
        if v == 0:
            raise ValueError("Amount is required")
        return v


class IncomeResponse(CamelModel):
    """Schema for income response."""

    id: UUID
    user_id: UUID
    type: str
    amount: float
    date: datetime
    note: str
    created_at: datetime
    updated_at: datetime
