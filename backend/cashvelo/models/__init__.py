"""SQLAlchemy models."""

from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    """Timezone-aware now, used for column defaults."""
    return datetime.now(timezone.utc)


# Import all models so Base.metadata.create_all() picks them up
from cashvelo.models.user import User  # noqa: E402, F401
from cashvelo.models.budget import Budget  # noqa: E402, F401
from cashvelo.models.expense import Expense  # noqa: E402, F401
from cashvelo.models.credit_card import CreditCard  # noqa: E402, F401
from cashvelo.models.income import Income  # noqa: E402, F401
from cashvelo.models.goal import Goal  # noqa: E402, F401
