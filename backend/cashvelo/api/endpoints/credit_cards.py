"""Credit card endpoints."""

from decimal import Decimal
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from cashvelo.api.deps import get_current_user
from cashvelo.core.database import get_db
from cashvelo.core.security import TokenClaims
from cashvelo.schemas.common import MessageResponse
from cashvelo.schemas.credit_card import (
    CreditCardCreate,
    CreditCardResponse,
    CreditCardUpdate,
)
from cashvelo.services.resource_store import credit_card_store

router = APIRouter()


@router.get("", response_model=List[CreditCardResponse])
async def list_credit_cards(
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """List all credit cards for the current user."""
    return await credit_card_store.list(db, current_user.user_id)


@router.post("", response_model=CreditCardResponse, status_code=status.HTTP_201_CREATED)
async def create_credit_card(
    data: CreditCardCreate,
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Add a credit card."""
    card = await credit_card_store.create(
        db,
        current_user.user_id,
        {
            "name": data.name or "",
            "balance": data.balance or Decimal("0"),
            "pending": data.pending or Decimal("0"),
            "payment": data.payment or Decimal("0"),
        },
    )
    await db.commit()
    return card


@router.put("/{card_id}", response_model=CreditCardResponse)
async def update_credit_card(
    card_id: UUID,
    data: CreditCardUpdate,
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a credit card."""
    card = await credit_card_store.update(
        db,
        current_user.user_id,
        card_id,
        data.model_dump(exclude_none=True),
    )
    await db.commit()
    return card


@router.delete("/{card_id}", response_model=MessageResponse)
async def delete_credit_card(
    card_id: UUID,
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a credit card."""
    await credit_card_store.delete(db, current_user.user_id, card_id)
    await db.commit()
    return {"message": "Credit card deleted successfully"}
