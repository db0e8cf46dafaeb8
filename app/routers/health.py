# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# - GET /health: liveness; answers without touching Supabase
# - GET /health/ready: reads one row from every content table and looks up
#   the media bucket, reporting each one separately
# =============================================================================

import logging
from datetime import datetime, timezone
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import settings
from lib.supabase_client import SupabaseClient, SupabaseClientError

logger = logging.getLogger(__name__)

router = APIRouter()

CONTENT_TABLES = ("albums", "videos", "tours", "hero", "settings", "about")

OK = "ok"


class HealthResponse(BaseModel):
    status: str
    message: str


class ReadinessResponse(BaseModel):
    """Per-table and bucket status; `status` is "ready" only if all are ok."""
    status: Literal["ready", "degraded"]
    tables: dict[str, str]
    bucket: str
    timestamp: str


def _table_status(table: str) -> str:
    try:
        SupabaseClient.find_one(table, {})
    except SupabaseClientError as e:
        logger.warning(f"Readiness: table {table} unavailable: {e}")
        return f"unavailable: {e.message}"
    return OK


def _bucket_status() -> str:
    try:
        SupabaseClient.get_client().storage.get_bucket(settings.STORAGE_BUCKET)
    except Exception as e:
        logger.warning(f"Readiness: bucket {settings.STORAGE_BUCKET} unavailable: {e}")
        return f"unavailable: {e}"
    return OK


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Always answers while the process is serving requests."""
    return HealthResponse(status="OK", message="API is running")


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check():
    """
    Readiness check endpoint.

    Each table the site reads is queried once, and the configured
    STORAGE_BUCKET must exist for uploads to work.
    """
    tables = {table: _table_status(table) for table in CONTENT_TABLES}
    bucket = _bucket_status()
    ready = bucket == OK and all(status == OK for status in tables.values())

    return ReadinessResponse(
        status="ready" if ready else "degraded",
        tables=tables,
        bucket=bucket,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
