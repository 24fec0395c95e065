"""Credit card schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import Field

from cashvelo.schemas.common import CamelModel


class CreditCardCreate(CamelModel):
    """Schema for creating a credit card. Every field is optional."""

    name: Optional[str] = Field(None, max_length=200)
    balance: Optional[Decimal] = Field(None, decimal_places=2)
    pending: Optional[Decimal] = Field(None, decimal_places=2)
    payment: Optional[Decimal] = Field(None, decimal_places=2)


class CreditCardUpdate(CamelModel):
    """Schema for updating a credit card. Only supplied fields change."""

    name: Optional[str] = Field(None, max_length=200)
    balance: Optional[Decimal] = Field(None, decimal_places=2)
    pending: Optional[Decimal] = Field(None, decimal_places=2)
    payment: Optional[Decimal] = Field(None, decimal_places=2)


class CreditCardResponse(CamelModel):
    """Schema for credit card response."""

    id: UUID
    user_id: UUID
    name: str
    balance: float
    pending: float
    payment: float
    created_at: datetime
    updated_at: datetime
