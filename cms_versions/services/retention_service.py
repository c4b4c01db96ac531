"""
Version Retention Service

Deletes content version snapshots older than the retention window.
Each call removes at most one bounded batch (the oldest snapshots
first); the scheduler is expected to call again on its next tick until
the backlog is gone.
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.content_version import ContentVersion
from ..utils.clock import now_ms

logger = logging.getLogger(__name__)

# Snapshots older than 3 days are eligible for deletion
RETENTION_MS = 3 * 24 * 60 * 60 * 1000

# Maximum snapshots deleted per call
CLEANUP_BATCH_SIZE = 1000


async def cleanup_old_versions(db: AsyncSession) -> int:
    """
    Delete up to CLEANUP_BATCH_SIZE snapshots created before now - RETENTION_MS.

    Args:
        db: Database session

    Returns:
        int: Number of snapshots deleted
    """
    cutoff = now_ms() - RETENTION_MS

    result = await db.execute(
        select(ContentVersion.id)
        .where(ContentVersion.created_at < cutoff)
        .order_by(ContentVersion.created_at.asc())
        .limit(CLEANUP_BATCH_SIZE)
    )
    version_ids = [row[0] for row in result.all()]

    if not version_ids:
        logger.debug("No versions eligible for cleanup")
        return 0

    await db.execute(
        delete(ContentVersion).where(ContentVersion.id.in_(version_ids))
    )
    await db.commit()

    logger.info(f"Deleted {len(version_ids)} versions older than cutoff {cutoff}")
    if len(version_ids) == CLEANUP_BATCH_SIZE:
        logger.info("Cleanup batch was full; remaining backlog is left for the next run")

    return len(version_ids)
