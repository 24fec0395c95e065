"""Owner-scoped CRUD over any model that carries a ``user_id`` column.

Every query is filtered by the caller's id, so a record owned by someone
else is indistinguishable from one that does not exist.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cashvelo.core.exceptions import NotFoundError
from cashvelo.models.budget import Budget
from cashvelo.models.credit_card import CreditCard
from cashvelo.models.expense import Expense
from cashvelo.models.goal import Goal
from cashvelo.models.income import Income

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class OwnedResourceStore(Generic[ModelT]):
    """CRUD store for one model, scoped to an owner."""

    def __init__(
        self,
        model: Type[ModelT],
        label: str,
        default_order: Optional[Sequence[Any]] = None,
    ):
        self.model = model
        self.label = label
        self.default_order = list(default_order or [])

    def _not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.label} not found")

    async def list(
        self,
        db: AsyncSession,
        owner_id: UUID,
        **filters: Any,
    ) -> List[ModelT]:
        """All records of this owner, optionally narrowed by column equality."""
        query = select(self.model).where(self.model.user_id == owner_id)
        for column, value in filters.items():
            if value is not None:
                query = query.where(getattr(self.model, column) == value)
        if self.default_order:
            query = query.order_by(*self.default_order)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get(self, db: AsyncSession, owner_id: UUID, record_id: UUID) -> ModelT:
        result = await db.execute(
            select(self.model).where(
                self.model.id == record_id,
                self.model.user_id == owner_id,
            )
        )
        record = result.scalar_one_or_none()
        if record is None:
            raise self._not_found()
        return record

    async def create(
        self,
        db: AsyncSession,
        owner_id: UUID,
        fields: Dict[str, Any],
    ) -> ModelT:
        record = self.model(user_id=owner_id, **fields)
        db.add(record)
        await db.flush()
        await db.refresh(record)
        logger.debug("Created %s %s", self.label, record.id)
        return record

    async def update(
        self,
        db: AsyncSession,
        owner_id: UUID,
        record_id: UUID,
        fields: Dict[str, Any],
    ) -> ModelT:
        record = await self.get(db, owner_id, record_id)
        for field, value in fields.items():
            setattr(record, field, value)
        await db.flush()
        await db.refresh(record)
        return record

    async def delete(self, db: AsyncSession, owner_id: UUID, record_id: UUID) -> None:
        record = await self.get(db, owner_id, record_id)
        await db.delete(record)
        await db.flush()
        logger.debug("Deleted %s %s", self.label, record_id)


budget_store = OwnedResourceStore(Budget, "Budget")
expense_store = OwnedResourceStore(Expense, "Expense", default_order=[Expense.date.desc()])
income_store = OwnedResourceStore(Income, "Income record", default_order=[Income.date.desc()])
credit_card_store = OwnedResourceStore(CreditCard, "Credit card")
goal_store = OwnedResourceStore(Goal, "Goal", default_order=[Goal.created_at.desc()])
