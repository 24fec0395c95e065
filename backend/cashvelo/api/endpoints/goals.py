"""Savings goal endpoints."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from cashvelo.api.deps import get_current_user
from cashvelo.core.database import get_db
from cashvelo.core.security import TokenClaims
from cashvelo.schemas.common import MessageResponse
from cashvelo.schemas.goal import (
    GoalAmountRequest,
    GoalCreate,
    GoalResponse,
    GoalUpdate,
)
from cashvelo.services import goal_service
from cashvelo.services.resource_store import goal_store

router = APIRouter()


@router.get("", response_model=List[GoalResponse])
async def list_goals(
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """List all goals for the current user."""
    goals = await goal_store.list(db, current_user.user_id)
    return [goal_service.build_goal_response(g) for g in goals]


@router.post("", response_model=GoalResponse, status_code=status.HTTP_201_CREATED)
async def create_goal(
    data: GoalCreate,
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a new savings goal."""
    fields = data.model_dump(exclude_none=True)
    fields["name"] = data.name.strip()
    if data.description is not None:
        fields["description"] = data.description.strip()

    goal = await goal_store.create(db, current_user.user_id, fields)
    await db.commit()
    return goal_service.build_goal_response(goal)


@router.get("/{goal_id}", response_model=GoalResponse)
async def get_goal(
    goal_id: UUID,
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a specific goal."""
    goal = await goal_store.get(db, current_user.user_id, goal_id)
    return goal_service.build_goal_response(goal)


@router.put("/{goal_id}", response_model=GoalResponse)
async def update_goal(
    goal_id: UUID,
    data: GoalUpdate,
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a goal's details. Does not touch the saved amount or completion."""
    goal = await goal_store.update(
        db,
        current_user.user_id,
        goal_id,
        data.model_dump(exclude_none=True),
    )
    await db.commit()
    return goal_service.build_goal_response(goal)


@router.post("/{goal_id}/contribute", response_model=GoalResponse)
async def contribute_to_goal(
    goal_id: UUID,
    data: GoalAmountRequest,
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Add money to a goal."""
    goal = await goal_store.get(db, current_user.user_id, goal_id)
    goal_service.contribute(goal, data.amount)
    await db.commit()
    await db.refresh(goal)
    return goal_service.build_goal_response(goal)


@router.post("/{goal_id}/withdraw", response_model=GoalResponse)
async def withdraw_from_goal(
    goal_id: UUID,
    data: GoalAmountRequest,
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Take money out of a goal."""
    goal = await goal_store.get(db, current_user.user_id, goal_id)
    goal_service.withdraw(goal, data.amount)
    await db.commit()
    await db.refresh(goal)
    return goal_service.build_goal_response(goal)


@router.delete("/{goal_id}", response_model=MessageResponse)
async def delete_goal(
    goal_id: UUID,
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a goal."""
    await goal_store.delete(db, current_user.user_id, goal_id)
    await db.commit()
    return {"message": "Goal deleted successfully"}
