"""Expense endpoints."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from cashvelo.api.deps import get_current_user
from cashvelo.core.database import get_db
from cashvelo.core.security import TokenClaims
from cashvelo.schemas.common import MessageResponse
from cashvelo.schemas.expense import ExpenseCreate, ExpenseResponse
from cashvelo.services.resource_store import expense_store

router = APIRouter()


@router.get("", response_model=List[ExpenseResponse])
async def list_expenses(
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """List the current user's expenses, newest first."""
    return await expense_store.list(db, current_user.user_id)


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    data: ExpenseCreate,
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Record an expense."""
    expense = await expense_store.create(
        db,
        current_user.user_id,
        {
            "amount": data.amount,
            "category": data.category or "",
            "date": data.date,
            "note": data.note or "",
        },
    )
    await db.commit()
    return expense


@router.delete("/{expense_id}", response_model=MessageResponse)
async def delete_expense(
    expense_id: UUID,
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete an expense."""
    await expense_store.delete(db, current_user.user_id, expense_id)
    await db.commit()
    return {"message": "Expense deleted successfully"}
