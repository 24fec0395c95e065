"""Goal schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import Field

from cashvelo.models.goal import GoalCategory
from cashvelo.schemas.common import CamelModel


class GoalCreate(CamelModel):
    """Schema for creating a savings goal."""

    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    target_amount: Decimal = Field(..., gt=0, decimal_places=2)
    target_date: datetime
    category: GoalCategory = GoalCategory.OTHER
    icon: Optional[str] = Field(None, max_length=50)
    color: Optional[str] = Field(None, max_length=7)


class GoalUpdate(CamelModel):
    """Schema for updating a goal. Amount changes go through contribute/withdraw."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    target_amount: Optional[Decimal] = Field(None, gt=0, decimal_places=2)
    target_date: Optional[datetime] = None
    category: Optional[GoalCategory] = None
    icon: Optional[str] = Field(None, max_length=50)
    color: Optional[str] = Field(None, max_length=7)


class GoalAmountRequest(CamelModel):
    """Body of a contribution or withdrawal. Validated by the goal service."""

    amount: Optional[Decimal] = None


class GoalResponse(CamelModel):
    """Goal with its derived progress fields."""

    id: UUID
    user_id: UUID
    name: str
    description: Optional[str]
    target_amount: float
    current_amount: float
    target_date: datetime
    category: GoalCategory
    icon: str
    color: str
    completed: bool
    completed_at: Optional[datetime]
    progress: float
    remaining: float
    days_remaining: int
    created_at: datetime
    updated_at: datetime
