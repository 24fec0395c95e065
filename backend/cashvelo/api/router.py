"""API router."""

from fastapi import APIRouter

from cashvelo.api.endpoints import (
    auth,
    budgets,
    credit_cards,
    expenses,
    goals,
    income,
    system,
)

api_router = APIRouter()

api_router.include_router(auth.router, tags=["Authentication"])
api_router.include_router(budgets.router, prefix="/budgets", tags=["Budgets"])
api_router.include_router(expenses.router, prefix="/expenses", tags=["Expenses"])
api_router.include_router(
    credit_cards.router, prefix="/credit-cards", tags=["Credit Cards"]
)
api_router.include_router(income.router, prefix="/income", tags=["Income"])
api_router.include_router(goals.router, prefix="/goals", tags=["Goals"])
api_router.include_router(system.router, tags=["System"])
