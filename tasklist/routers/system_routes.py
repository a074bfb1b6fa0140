"""Health endpoint."""

import logging
import sqlite3

from fastapi import APIRouter, Request

from ..database import integrity_check

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])


@router.get("/health")
def health_check(request: Request):
    """System health check: pool statistics plus a database integrity check."""
    pool = request.app.state.db_pool
    try:
        integrity = integrity_check(pool)
    except (sqlite3.Error, TimeoutError) as exc:
        logger.warning("DB integrity check failed: %s", exc)
        integrity = None

    return {
        "status": "healthy" if integrity == "ok" else "degraded",
        "service": "Task List",
        "database": {"integrity_check": integrity, "pool": pool.get_stats()},
    }
