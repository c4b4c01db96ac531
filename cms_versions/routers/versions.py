"""Content version history API endpoints.

Operator-facing endpoints for the version control switch, browsing a
content item's history, inspecting and diffing a snapshot, restoring it,
and aggregate stats.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..models.content_version import ContentType
from ..schemas.version import (
    RestoreResult,
    VersionControlToggle,
    VersionDetail,
    VersionDiff,
    VersionStats,
    VersionSummary,
)
from ..services import version_service

router = APIRouter(prefix="/api/versions", tags=["Versions"])


@router.get("/enabled", response_model=VersionControlToggle)
async def get_version_control(db: AsyncSession = Depends(get_db)) -> VersionControlToggle:
    """Return whether edits currently record version snapshots."""
    return VersionControlToggle(enabled=await version_service.is_enabled(db))


@router.put("/enabled", response_model=VersionControlToggle)
async def set_version_control(
    body: VersionControlToggle,
    db: AsyncSession = Depends(get_db),
) -> VersionControlToggle:
    """Turn version recording on or off."""
    await version_service.set_enabled(db, body.enabled)
    return VersionControlToggle(enabled=body.enabled)


@router.get("/stats", response_model=VersionStats)
async def get_version_stats(db: AsyncSession = Depends(get_db)) -> VersionStats:
    """Switch state, snapshot count and oldest/newest capture time."""
    return await version_service.get_stats(db)


@router.get("/history/{content_type}/{content_id}", response_model=List[VersionSummary])
async def get_version_history(
    content_type: ContentType,
    content_id: str,
    db: AsyncSession = Depends(get_db),
) -> List[VersionSummary]:
    """
    List a content item's snapshots, newest first.

    Returns an empty list when the item has no history.
    """
    return await version_service.get_version_history(db, content_type, content_id)


@router.get("/{version_id}", response_model=VersionDetail)
async def get_version(
    version_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> VersionDetail:
    """Get a snapshot's full content."""
    version = await version_service.get_version(db, version_id)
    if version is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=version_service.VERSION_NOT_FOUND,
        )
    return VersionDetail.model_validate(version)


@router.get("/{version_id}/diff", response_model=VersionDiff)
async def get_version_diff(
    version_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> VersionDiff:
    """Unified diff from the snapshot to the live item's current content."""
    diff = await version_service.diff_against_live(db, version_id)
    if diff is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=version_service.VERSION_NOT_FOUND,
        )
    return diff


@router.post("/{version_id}/restore", response_model=RestoreResult)
async def restore_version(
    version_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> RestoreResult:
    """
    Restore a snapshot onto its live item.

    Not-found outcomes are reported in the body (success=false) rather
    than as HTTP errors.
    """
    return await version_service.restore_version(db, version_id)
