"""Pydantic schemas for content version history."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from ..models.content_version import ContentType, VersionSource


class VersionControlToggle(BaseModel):
    """Request/response body for the version control switch."""

    enabled: bool = Field(
        ...,
        description="Whether ordinary edits record version snapshots",
    )


class VersionSummary(BaseModel):
    """Schema for a version history list item (preview only)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    created_at: int = Field(..., description="Capture time in epoch milliseconds")
    source: VersionSource
    content_preview: str = Field(
        ...,
        description="First 150 characters of the content, with '...' if truncated",
    )


class VersionDetail(BaseModel):
    """Schema for a full version snapshot."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    content_type: ContentType
    content_id: str
    slug: str
    title: str
    content: str
    description: Optional[str] = None
    created_at: int
    source: VersionSource


class RestoreResult(BaseModel):
    """Outcome of a restore request. Callers branch on `success`."""

    success: bool
    message: str


class VersionStats(BaseModel):
    """Aggregate figures over the whole snapshot store."""

    enabled: bool
    total_versions: int = 0
    oldest_version: Optional[int] = Field(None, description="Oldest created_at, null if empty")
    newest_version: Optional[int] = Field(None, description="Newest created_at, null if empty")


class VersionDiff(BaseModel):
    """Unified diff from a snapshot's content to the live item's content."""

    version_id: UUID
    live_exists: bool
    patch: str = Field(
        "",
        description="Unified diff text (empty when identical or when the live item is gone)",
    )


class CleanupResult(BaseModel):
    """Outcome of one retention sweep batch."""

    deleted: int
    run_at: str
