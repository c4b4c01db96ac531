"""Content version history business logic.

Provides the version control switch, snapshot recording, history queries,
restore with backup-before-overwrite, aggregate stats and a diff of a
snapshot against the live item.

Every read of the switch goes to the database so that all service
instances observe the same state.
"""

import difflib
import logging
from typing import List, Optional, Union
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.content_version import ContentType, ContentVersion, VersionSource
from ..models.version_setting import ENABLED_KEY, VersionControlSetting
from ..schemas.version import (
    RestoreResult,
    VersionDiff,
    VersionStats,
    VersionSummary,
)
from ..utils.clock import now_ms
from . import content_repository

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 150
PREVIEW_ELLIPSIS = "..."

VERSION_NOT_FOUND = "Version not found"
CONTENT_NOT_FOUND = "Original content not found"
RESTORE_SUCCESS = "Version restored successfully"


# ============================================================================
# Version control switch
# ============================================================================


async def _get_setting(db: AsyncSession, key: str) -> Optional[VersionControlSetting]:
    result = await db.execute(
        select(VersionControlSetting).where(VersionControlSetting.key == key)
    )
    return result.scalars().first()


async def is_enabled(db: AsyncSession) -> bool:
    """Return True only if the "enabled" setting exists and is exactly True."""
    setting = await _get_setting(db, ENABLED_KEY)
    return setting is not None and setting.value is True


async def set_enabled(db: AsyncSession, enabled: bool) -> None:
    """
    Turn version recording on or off (upsert of the "enabled" setting).

    Args:
        db: Database session
        enabled: New switch value
    """
    setting = await _get_setting(db, ENABLED_KEY)
    if setting is not None:
        setting.value = enabled
    else:
        try:
            async with db.begin_nested():
                db.add(VersionControlSetting(key=ENABLED_KEY, value=enabled))
                await db.flush()
        except IntegrityError:
            # Another caller inserted the row first
            setting = await _get_setting(db, ENABLED_KEY)
            setting.value = enabled

    await db.commit()
    logger.info(f"Version control {'enabled' if enabled else 'disabled'}")


# ============================================================================
# Recording
# ============================================================================


def _insert_version(
    db: AsyncSession,
    *,
    content_type: ContentType,
    content_id: str,
    slug: str,
    title: str,
    content: str,
    description: Optional[str],
    source: VersionSource,
) -> ContentVersion:
    version = ContentVersion(
        content_type=ContentType(content_type).value,
        content_id=content_repository.normalize_content_id(content_id),
        slug=slug,
        title=title,
        content=content,
        description=description,
        created_at=now_ms(),
        source=VersionSource(source).value,
    )
    db.add(version)
    return version


async def create_version(
    db: AsyncSession,
    *,
    content_type: ContentType,
    content_id: Union[str, UUID],
    slug: str,
    title: str,
    content: str,
    description: Optional[str] = None,
    source: VersionSource,
) -> Optional[UUID]:
    """
    Record a snapshot of a content item, if version control is enabled.

    Called by the editing workflow around an edit. The snapshot is flushed
    but not committed; the caller commits together with its edit.

    Returns:
        UUID of the new snapshot, or None when version control is disabled
    """
    if not await is_enabled(db):
        return None

    version = _insert_version(
        db,
        content_type=content_type,
        content_id=str(content_id),
        slug=slug,
        title=title,
        content=content,
        description=description,
        source=source,
    )
    await db.flush()
    return version.id


# ============================================================================
# History
# ============================================================================


def build_content_preview(content: str) -> str:
    """First 150 characters of the content, with "..." appended if truncated."""
    if len(content) > PREVIEW_LENGTH:
        return content[:PREVIEW_LENGTH] + PREVIEW_ELLIPSIS
    return content


async def get_version_history(
    db: AsyncSession,
    content_type: ContentType,
    content_id: Union[str, UUID],
) -> List[VersionSummary]:
    """
    List all snapshots of a content item, newest first.

    Returns:
        List of summaries (empty if the item has no snapshots)
    """
    result = await db.execute(
        select(ContentVersion)
        .where(
            ContentVersion.content_type == ContentType(content_type).value,
            ContentVersion.content_id
            == content_repository.normalize_content_id(content_id),
        )
        .order_by(ContentVersion.created_at.desc())
    )
    versions = result.scalars().all()

    return [
        VersionSummary(
            id=v.id,
            title=v.title,
            created_at=v.created_at,
            source=v.source,
            content_preview=build_content_preview(v.content),
        )
        for v in versions
    ]


async def get_version(db: AsyncSession, version_id: UUID) -> Optional[ContentVersion]:
    """Fetch one snapshot by id, or None if it does not exist."""
    result = await db.execute(
        select(ContentVersion).where(ContentVersion.id == version_id)
    )
    return result.scalar_one_or_none()


# ============================================================================
# Restore
# ============================================================================


async def restore_version(db: AsyncSession, version_id: UUID) -> RestoreResult:
    """
    Restore a snapshot onto its live content item.

    The live item's current state is first saved as a new "restore"
    snapshot and committed, regardless of the version control switch.
    Only then is the live item overwritten. If the overwrite fails the
    exception propagates and the backup snapshot remains.

    Args:
        db: Database session
        version_id: Snapshot to restore

    Returns:
        RestoreResult with success flag and a distinguishable message
    """
    version = await get_version(db, version_id)
    if version is None:
        logger.warning(f"Restore requested for unknown version {version_id}")
        return RestoreResult(success=False, message=VERSION_NOT_FOUND)

    content_type = ContentType(version.content_type)
    current = await content_repository.read_content_item(
        db, content_type, version.content_id
    )
    if current is None:
        logger.warning(
            f"Restore of version {version_id} refused: "
            f"{content_type.value} {version.content_id} no longer exists"
        )
        return RestoreResult(success=False, message=CONTENT_NOT_FOUND)

    backup = _insert_version(
        db,
        content_type=content_type,
        content_id=version.content_id,
        slug=version.slug,
        title=current.title,
        content=current.content,
        description=current.description,
        source=VersionSource.RESTORE,
    )
    # Backup must be durable before the live item is touched
    await db.commit()
    logger.info(
        f"Saved backup version {backup.id} of {content_type.value} {version.content_id}"
    )

    await content_repository.patch_content_item(
        db,
        content_type,
        version.content_id,
        title=version.title,
        content=version.content,
        description=version.description,
        last_synced_at=now_ms(),
    )
    await db.commit()

    logger.info(f"Restored version {version_id} onto {content_type.value} {version.content_id}")
    return RestoreResult(success=True, message=RESTORE_SUCCESS)


# ============================================================================
# Stats and diff
# ============================================================================


async def get_stats(db: AsyncSession) -> VersionStats:
    """Switch state plus count and min/max created_at over all snapshots."""
    enabled = await is_enabled(db)

    result = await db.execute(
        select(
            func.count(ContentVersion.id),
            func.min(ContentVersion.created_at),
            func.max(ContentVersion.created_at),
        )
    )
    total, oldest, newest = result.one()

    return VersionStats(
        enabled=enabled,
        total_versions=total or 0,
        oldest_version=oldest,
        newest_version=newest,
    )


async def diff_against_live(db: AsyncSession, version_id: UUID) -> Optional[VersionDiff]:
    """
    Unified diff from a snapshot's content to the live item's current content.

    Returns:
        VersionDiff, or None if the snapshot does not exist
    """
    version = await get_version(db, version_id)
    if version is None:
        return None

    current = await content_repository.read_content_item(
        db, ContentType(version.content_type), version.content_id
    )
    if current is None:
        return VersionDiff(version_id=version.id, live_exists=False, patch="")

    patch = "".join(
        difflib.unified_diff(
            version.content.splitlines(keepends=True),
            current.content.splitlines(keepends=True),
            fromfile=f"{version.slug} (version)",
            tofile=f"{version.slug} (current)",
        )
    )
    return VersionDiff(version_id=version.id, live_exists=True, patch=patch)
