"""Health check endpoints.

Checks system component availability:
- PostgreSQL database
- LLM provider configuration
"""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from quizmo.core.config import settings
from quizmo.db.prisma_client import get_prisma

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health")
async def health_check():
    """Report database connectivity and LLM configuration.

    Returns 503 when the database is unreachable, 200 otherwise.
    """
    health_status = {
        "database": "unknown",
        "llm": "unknown",
        "overall": "unknown",
    }

    try:
        await get_prisma().query_raw("SELECT 1")
        health_status["database"] = "ok"
    except Exception as e:
        health_status["database"] = "error"
        logger.error(f"Database health check failed: {e}")

    # Remote providers can't be probed without a billed call; check config only
    if settings.LLM_PROVIDER == "GOOGLE" and not settings.GOOGLE_API_KEY:
        health_status["llm"] = "warning"
    else:
        health_status["llm"] = "ok"

    if health_status["database"] == "error":
        health_status["overall"] = "unhealthy"
        status_code = 503
    elif health_status["llm"] == "ok":
        health_status["overall"] = "healthy"
        status_code = 200
    else:
        health_status["overall"] = "degraded"
        status_code = 200

    return JSONResponse(content=health_status, status_code=status_code)


@router.get("/health/simple")
async def simple_health_check():
    """Liveness probe, no component checks."""
    return {"status": "ok"}
