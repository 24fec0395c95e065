"""Budget schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import Field

from cashvelo.models.budget import BudgetType
from cashvelo.schemas.common import CamelModel


class BudgetCreate(CamelModel):
    """Schema for creating a budget."""

    name: str = Field(..., min_length=1, max_length=200)
    limit: Optional[Decimal] = Field(None, decimal_places=2)
    type: BudgetType


class BudgetResponse(CamelModel):
    """Schema for budget response."""

    id: UUID
    user_id: UUID
    name: str
    limit: float
    type: BudgetType
    created_at: datetime
    updated_at: datetime
