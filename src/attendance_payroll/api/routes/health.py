"""Health check endpoints."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel
from sqlalchemy import text

from attendance_payroll import __version__
from attendance_payroll.api.dependencies import DbSession

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: datetime
    database: str


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
)
async def health_check(db: DbSession) -> HealthResponse:
    """Report API version and whether the payroll database answers."""
    try:
        await db.execute(text("SELECT 1"))
        db_status = "healthy"
    except Exception:
        logger.exception("Database health probe failed")
        db_status = "unhealthy"

    return HealthResponse(
        status="healthy" if db_status == "healthy" else "degraded",
        version=__version__,
        timestamp=datetime.now(timezone.utc),
        database=db_status,
    )


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_check(db: DbSession) -> dict[str, str]:
    """Ready once the payroll database accepts queries."""
    try:
        await db.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Database readiness probe failed")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database unavailable",
        )
    return {"status": "ready"}


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_check() -> dict[str, str]:
    """Liveness check for container orchestration."""
    return {"status": "alive"}
