"""
ARQ Worker Configuration

Background job processing with Redis-backed task queue.
Runs the content version retention sweep on a schedule.

Run with:
    arq cms_versions.worker.WorkerSettings
"""

import logging
from datetime import datetime
from typing import Any

from arq import cron
from arq.connections import RedisSettings

from .config import settings
from .database import async_session_maker
from .services.retention_service import cleanup_old_versions

logger = logging.getLogger(__name__)


# Parse Redis URL into components for ARQ
# Format: redis://host:port/db or redis://:password@host:port/db
def parse_redis_url(url: str) -> RedisSettings:
    """Parse Redis URL into ARQ RedisSettings."""
    from urllib.parse import urlparse

    parsed = urlparse(url)
    return RedisSettings(
        host=parsed.hostname or "localhost",
        port=parsed.port or 6379,
        password=parsed.password,
        database=int(parsed.path.lstrip("/") or 0),
    )


# =============================================================================
# Version Cleanup Job
# =============================================================================


async def run_version_cleanup(ctx: dict[str, Any]) -> dict[str, Any]:
    """
    Delete one batch of content versions past the retention window.

    A full batch leaves the rest of the backlog for the next scheduled run.

    Returns:
        dict with the number of deleted versions
    """
    logger.info("Running scheduled version cleanup...")

    deleted = 0

    try:
        async with async_session_maker() as db:
            deleted = await cleanup_old_versions(db)
            logger.info(f"Version cleanup complete: {deleted} versions deleted")
    except Exception as e:
        logger.error(f"Error running version cleanup: {e}", exc_info=True)

    return {
        "deleted": deleted,
        "run_at": datetime.utcnow().isoformat(),
    }


# =============================================================================
# Startup/Shutdown Hooks
# =============================================================================


async def startup(ctx: dict[str, Any]) -> None:
    """Initialize resources when worker starts."""
    logger.info("ARQ worker starting up...")


async def shutdown(ctx: dict[str, Any]) -> None:
    """Cleanup resources when worker stops."""
    logger.info("ARQ worker shutting down...")


# =============================================================================
# Schedule Parsing
# =============================================================================


def parse_schedule_set(value: str) -> set[int]:
    """
    Parse a comma-separated string of integers into a set.

    Examples:
        "0,12" -> {0, 12}
        "0,15,30,45" -> {0, 15, 30, 45}
    """
    return {int(x.strip()) for x in value.split(",") if x.strip()}


def get_cleanup_hours() -> set[int] | None:
    """Get cleanup job hours from settings. Returns None if using minutes instead."""
    if settings.arq_cleanup_hours.strip():
        return parse_schedule_set(settings.arq_cleanup_hours)
    return None


def get_cleanup_minutes() -> set[int] | None:
    """Get cleanup job minutes from settings. Returns None if using hours instead."""
    if settings.arq_cleanup_minutes.strip():
        return parse_schedule_set(settings.arq_cleanup_minutes)
    return None


def build_cleanup_cron():
    """Build cleanup cron job based on config (hours or minutes)."""
    hours = get_cleanup_hours()
    minutes = get_cleanup_minutes()

    if minutes:
        # Run at specific minutes (for testing, e.g., every 2 mins)
        return cron(run_version_cleanup, minute=minutes, second=0)
    elif hours:
        # Run at specific hours (production default: once a day)
        return cron(run_version_cleanup, hour=hours, minute=0, second=0)
    else:
        # Fallback: run at 03:00
        return cron(run_version_cleanup, hour={3}, minute=0, second=0)


# =============================================================================
# Worker Settings
# =============================================================================


class WorkerSettings:
    """ARQ worker configuration."""

    # Redis connection
    redis_settings = parse_redis_url(settings.redis_url)

    # Job functions that can be called via arq.enqueue_job()
    functions = [
        run_version_cleanup,
    ]

    # Scheduled cron jobs (configured via .env)
    # ARQ_CLEANUP_HOURS: comma-separated hours (default "3" = once a day)
    # ARQ_CLEANUP_MINUTES: comma-separated minutes (used if ARQ_CLEANUP_HOURS is empty)
    cron_jobs = [
        build_cleanup_cron(),
    ]

    on_startup = startup
    on_shutdown = shutdown

    # Worker settings
    max_jobs = 1
    job_timeout = 300  # 5 minutes max per job
    keep_result = 3600  # Keep results for 1 hour
