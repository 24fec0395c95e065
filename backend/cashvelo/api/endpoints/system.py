"""Health endpoint."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from cashvelo.core.config import settings
from cashvelo.core.database import get_db
from cashvelo.core.rate_limit import limiter

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
@limiter.exempt
async def health_check(db: AsyncSession = Depends(get_db)):
    """Liveness plus a database round trip. Always 200."""
    status = {
        "status": "ok",
        "message": "Server is running",
        "app": settings.APP_NAME,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

    try:
        await db.execute(text("SELECT 1"))
        status["database"] = "ok"
    except Exception as e:
        logger.warning("Health check database probe failed: %s", e)
        status["database"] = "error"
        status["status"] = "degraded"

    return status
