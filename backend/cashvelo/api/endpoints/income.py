"""Income endpoints."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from cashvelo.api.deps import get_current_user
from cashvelo.core.database import get_db
from cashvelo.core.security import TokenClaims
from cashvelo.schemas.common import MessageResponse
from cashvelo.schemas.income import IncomeCreate, IncomeResponse
from cashvelo.services.resource_store import income_store

router = APIRouter()


@router.get("", response_model=List[IncomeResponse])
async def list_income(
    type: Optional[str] = None,
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """List the current user's income, newest first, optionally by type."""
    return await income_store.list(db, current_user.user_id, type=type)


@router.post("", response_model=IncomeResponse, status_code=status.HTTP_201_CREATED)
async def create_income(
    data: IncomeCreate,
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Record income."""
    fields = {
        "type": data.type,
        "amount": data.amount,
        "note": data.note or "",
    }
    if data.date is not None:
        fields["date"] = data.date

    income = await income_store.create(db, current_user.user_id, fields)
    await db.commit()
    return income


@router.delete("/{income_id}", response_model=MessageResponse)
async def delete_income(
    income_id: UUID,
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete an income record."""
    await income_store.delete(db, current_user.user_id, income_id)
    await db.commit()
    return {"message": "Income deleted successfully"}
