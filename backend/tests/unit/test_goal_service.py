"""Tests for goal progress rules."""

import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from cashvelo.core.exceptions import InsufficientFundsError, InvalidAmountError
from cashvelo.models.goal import Goal, GoalCategory
from cashvelo.services import goal_service

NOW = datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def goal():
    return Goal(
        id=uuid.uuid4(),
        user_id=uuid.uuid4(),
        name="Vacation",
        target_amount=Decimal("1000"),
        current_amount=Decimal("0"),
        target_date=NOW + timedelta(days=30),
        category=GoalCategory.VACATION,
        icon="🎯",
        color="#3b82f6",
        completed=False,
        completed_at=None,
        created_at=NOW,
        updated_at=NOW,
    )


class TestContribute:
    def test_partial_contribution(self, goal):
        goal_service.contribute(goal, Decimal("250"), now=NOW)
        assert goal.current_amount == Decimal("250")
        assert goal.completed is False
        assert goal.completed_at is None

    def test_reaching_target_completes(self, goal):
        goal_service.contribute(goal, Decimal("800"), now=NOW)
        goal_service.contribute(goal, Decimal("200"), now=NOW)
        assert goal.current_amount == Decimal("1000")
        assert goal.completed is True
        assert goal.completed_at == NOW

    def test_completion_timestamp_kept_on_extra_contribution(self, goal):
        goal_service.contribute(goal, Decimal("1000"), now=NOW)
        goal_service.contribute(goal, Decimal("50"), now=NOW + timedelta(days=1))
        assert goal.completed_at == NOW

    @pytest.mark.parametrize("amount", [Decimal("0.009"), Decimal("12.345")])
    def test_sub_cent_amount_rejected(self, goal, amount):
        goal_service.contribute(goal, Decimal("999.99"), now=NOW)
        with pytest.raises(InvalidAmountError):
            goal_service.contribute(goal, amount, now=NOW)
        assert goal.current_amount == Decimal("999.99")
        assert goal.completed is False

    def test_trailing_zero_cents_accepted(self, goal):
        goal_service.contribute(goal, Decimal("0.010"), now=NOW)
        assert goal.current_amount == Decimal("0.01")

    @pytest.mark.parametrize("amount", [None, Decimal("0"), Decimal("-1")])
    def test_invalid_amount(self, goal, amount):
        with pytest.raises(InvalidAmountError):
            goal_service.contribute(goal, amount)
        assert goal.current_amount == Decimal("0")


class TestWithdraw:
    def test_withdraw_reopens_completed_goal(self, goal):
        goal_service.contribute(goal, Decimal("1000"), now=NOW)
        goal_service.withdraw(goal, Decimal("500"))
        assert goal.current_amount == Decimal("500")
        assert goal.completed is False
        assert goal.completed_at is None

    def test_withdraw_everything(self, goal):
        goal_service.contribute(goal, Decimal("300"), now=NOW)
        goal_service.withdraw(goal, Decimal("300"))
        assert goal.current_amount == Decimal("0")

    def test_withdraw_more_than_saved(self, goal):
        goal_service.contribute(goal, Decimal("100"), now=NOW)
        with pytest.raises(InsufficientFundsError):
            goal_service.withdraw(goal, Decimal("150"))
        assert goal.current_amount == Decimal("100")

    def test_invalid_amount(self, goal):
        with pytest.raises(InvalidAmountError):
            goal_service.withdraw(goal, Decimal("0"))

    def test_sub_cent_withdrawal_keeps_goal_completed(self, goal):
        goal_service.contribute(goal, Decimal("1000"), now=NOW)
        with pytest.raises(InvalidAmountError):
            goal_service.withdraw(goal, Decimal("0.001"))
        assert goal.current_amount == Decimal("1000")
        assert goal.completed is True


class TestDerivedFields:
    def test_progress_and_remaining(self, goal):
        goal.current_amount = Decimal("333.33")
        assert goal_service.progress_percent(goal) == pytest.approx(33.333)
        assert goal_service.remaining_amount(goal) == pytest.approx(666.67)

    def test_progress_capped_when_over_target(self, goal):
        goal.current_amount = Decimal("1500")
        assert goal_service.progress_percent(goal) == 100.0
        assert goal_service.remaining_amount(goal) == 0.0

    def test_days_remaining_rounds_up(self, goal):
        goal.target_date = NOW + timedelta(days=2, hours=1)
        assert goal_service.days_remaining(goal, now=NOW) == 3

    def test_days_remaining_negative_when_overdue(self, goal):
        goal.target_date = NOW - timedelta(days=2)
        assert goal_service.days_remaining(goal, now=NOW) == -2

    def test_days_remaining_accepts_naive_dates(self, goal):
        goal.target_date = datetime(2026, 6, 11, 12, 0)
        assert goal_service.days_remaining(goal, now=NOW) == 10

    def test_build_goal_response(self, goal):
        goal.current_amount = Decimal("250")
        data = goal_service.build_goal_response(goal, now=NOW)
        assert data["progress"] == 25.0
        assert data["remaining"] == 750.0
        assert data["days_remaining"] == 30
        assert data["category"] == GoalCategory.VACATION
