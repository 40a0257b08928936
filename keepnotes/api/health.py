"""
Health Check Endpoints.

- /: Service banner
- /health: Liveness check (process running)
- /health/ready: Readiness check (database reachable)
"""

from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from keepnotes.core.database import session_scope
from keepnotes.core.logging import get_logger
from keepnotes.core.utils import utc_now

router = APIRouter()
logger = get_logger(__name__)


@router.get("/")
async def root() -> dict[str, str]:
    return {"message": "API is running..."}


@router.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: the process is up and serving requests."""
    return {"status": "healthy", "timestamp": utc_now().isoformat()}


@router.get("/health/ready")
async def ready() -> JSONResponse:
    """Readiness: the database answers a trivial query."""
    start = utc_now()
    try:
        async with session_scope() as session:
            await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Database readiness check failed", extra={"error": str(e)})
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "database": {"status": "unhealthy", "error": str(e)}},
        )

    latency_ms = int((utc_now() - start).total_seconds() * 1000)
    return JSONResponse(
        status_code=200,
        content={"status": "healthy", "database": {"status": "healthy", "latency_ms": latency_ms}},
    )
