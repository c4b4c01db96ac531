"""Business logic services."""

from .content_repository import (
    ContentItem,
    patch_content_item,
    read_content_item,
)
from .retention_service import (
    CLEANUP_BATCH_SIZE,
    RETENTION_MS,
    cleanup_old_versions,
)
from .version_service import (
    build_content_preview,
    create_version,
    diff_against_live,
    get_stats,
    get_version,
    get_version_history,
    is_enabled,
    restore_version,
    set_enabled,
)

__all__ = [
    # Content repository
    "ContentItem",
    "patch_content_item",
    "read_content_item",
    # Retention
    "CLEANUP_BATCH_SIZE",
    "RETENTION_MS",
    "cleanup_old_versions",
    # Version history
    "build_content_preview",
    "create_version",
    "diff_against_live",
    "get_stats",
    "get_version",
    "get_version_history",
    "is_enabled",
    "restore_version",
    "set_enabled",
]
