"""Goal progress: contributions, withdrawals and derived fields.

A goal is either active or completed. Completion is re-evaluated only when
money moves through ``contribute``/``withdraw``; editing the target does not
flip the flag.

Both operations are a plain read-modify-write of one row without row locks
or version checks, so two concurrent contributions to the same goal can lose
an update.
"""

import logging
import math
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from cashvelo.core.exceptions import InsufficientFundsError, InvalidAmountError
from cashvelo.models.goal import Goal

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60
CENT = Decimal("0.01")


def _utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; everything is stored in UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _validate_amount(amount: Optional[Decimal]) -> Decimal:
    """Money moves in whole cents, the precision the balance is stored at."""
    if amount is None or amount <= 0:
        raise InvalidAmountError("Amount must be greater than 0")
    amount = Decimal(amount)
    if amount != amount.quantize(CENT):
        raise InvalidAmountError("Amount cannot have more than 2 decimal places")
    return amount


def contribute(goal: Goal, amount: Optional[Decimal], now: Optional[datetime] = None) -> Goal:
    """Add money to a goal, completing it once the target is reached."""
    amount = _validate_amount(amount)
    goal.current_amount = (goal.current_amount or Decimal("0")) + amount

    if goal.current_amount >= goal.target_amount and not goal.completed:
        goal.completed = True
        goal.completed_at = now or datetime.now(timezone.utc)
        logger.info("Goal %s reached its target", goal.id)

    return goal


def withdraw(goal: Goal, amount: Optional[Decimal]) -> Goal:
    """Take money out of a goal, reopening it if it drops below target."""
    amount = _validate_amount(amount)
    current = goal.current_amount or Decimal("0")
    if amount > current:
        raise InsufficientFundsError("Withdrawal amount exceeds current savings")

    goal.current_amount = current - amount

    if goal.current_amount < goal.target_amount and goal.completed:
        goal.completed = False
        goal.completed_at = None
        logger.info("Goal %s reopened after withdrawal", goal.id)

    return goal


def progress_percent(goal: Goal) -> float:
    if not goal.target_amount:
        return 0.0
    return min(100.0, float(goal.current_amount / goal.target_amount * 100))


def remaining_amount(goal: Goal) -> float:
    return float(max(Decimal("0"), goal.target_amount - goal.current_amount))


def days_remaining(goal: Goal, now: Optional[datetime] = None) -> int:
    """Whole days until the target date, rounded up. Negative once overdue."""
    now = now or datetime.now(timezone.utc)
    delta = _utc(goal.target_date) - _utc(now)
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def build_goal_response(goal: Goal, now: Optional[datetime] = None) -> dict:
    """Build goal response with computed fields."""
    return {
        "id": goal.id,
        "user_id": goal.user_id,
        "name": goal.name,
        "description": goal.description,
        "target_amount": goal.target_amount,
        "current_amount": goal.current_amount,
        "target_date": goal.target_date,
        "category": goal.category,
        "icon": goal.icon,
        "color": goal.color,
        "completed": goal.completed,
        "completed_at": goal.completed_at,
        "progress": round(progress_percent(goal), 2),
        "remaining": remaining_amount(goal),
        "days_remaining": days_remaining(goal, now),
        "created_at": goal.created_at,
        "updated_at": goal.updated_at,
    }
