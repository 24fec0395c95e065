"""Pydantic schemas."""

from cashvelo.schemas.common import MessageResponse
from cashvelo.schemas.user import (
    UserDetail,
    UserEnvelope,
    UserPublic,
)
from cashvelo.schemas.auth import (
    AuthResponse,
    ForgotPasswordRequest,
    LoginRequest,
    ResetPasswordRequest,
    SignupRequest,
    VerifyResetTokenResponse,
)
from cashvelo.schemas.budget import BudgetCreate, BudgetResponse
from cashvelo.schemas.expense import ExpenseCreate, ExpenseResponse
from cashvelo.schemas.income import IncomeCreate, IncomeResponse
from cashvelo.schemas.credit_card import (
    CreditCardCreate,
    CreditCardResponse,
    CreditCardUpdate,
)
from cashvelo.schemas.goal import (
    GoalAmountRequest,
    GoalCreate,
    GoalResponse,
    GoalUpdate,
)

__all__ = [
    "MessageResponse",
    "UserDetail",
    "UserEnvelope",
    "UserPublic",
    "AuthResponse",
    "ForgotPasswordRequest",
    "LoginRequest",
    "ResetPasswordRequest",
    "SignupRequest",
    "VerifyResetTokenResponse",
    "BudgetCreate",
    "BudgetResponse",
    "ExpenseCreate",
    "ExpenseResponse",
    "IncomeCreate",
    "IncomeResponse",
    "CreditCardCreate",
    "CreditCardResponse",
    "CreditCardUpdate",
    "GoalAmountRequest",
    "GoalCreate",
    "GoalResponse",
    "GoalUpdate",
]
