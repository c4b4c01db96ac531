"""Pydantic schemas package for request/response validation."""

from .content import ContentItemResponse, ContentUpdate
from .version import (
    CleanupResult,
    RestoreResult,
    VersionControlToggle,
    VersionDetail,
    VersionDiff,
    VersionStats,
    VersionSummary,
)

__all__ = [
    # Content schemas
    "ContentItemResponse",
    "ContentUpdate",
    # Version schemas
    "CleanupResult",
    "RestoreResult",
    "VersionControlToggle",
    "VersionDetail",
    "VersionDiff",
    "VersionStats",
    "VersionSummary",
]
