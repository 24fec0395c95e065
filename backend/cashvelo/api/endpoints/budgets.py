"""Budget endpoints."""

from decimal import Decimal
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from cashvelo.api.deps import get_current_user
from cashvelo.core.database import get_db
from cashvelo.core.security import TokenClaims
from cashvelo.schemas.budget import BudgetCreate, BudgetResponse
from cashvelo.schemas.common import MessageResponse
from cashvelo.services.resource_store import budget_store

router = APIRouter()


@router.get("", response_model=List[BudgetResponse])
async def list_budgets(
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """List all budgets for the current user."""
    return await budget_store.list(db, current_user.user_id)


@router.post("", response_model=BudgetResponse, status_code=status.HTTP_201_CREATED)
async def create_budget(
    data: BudgetCreate,
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a new budget."""
    budget = await budget_store.create(
        db,
        current_user.user_id,
        {
            "name": data.name,
            "limit": data.limit or Decimal("0"),
            "type": data.type,
        },
    )
    await db.commit()
    return budget


@router.delete("/{budget_id}", response_model=MessageResponse)
async def delete_budget(
    budget_id: UUID,
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a budget."""
    await budget_store.delete(db, current_user.user_id, budget_id)
    await db.commit()
    return {"message": "Budget deleted successfully"}
