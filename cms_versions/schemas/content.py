"""Pydantic schemas for live content items (posts and pages)."""

from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from ..models.content_version import ContentType


class ContentUpdate(BaseModel):
    """Schema for editing a post or page.

    Omitted fields keep their current value. `description` is ignored for
    pages, which have no description.
    """

    title: Optional[str] = Field(
        None,
        description="New title",
    )
    content: Optional[str] = Field(
        None,
        description="New body text",
    )
    description: Optional[str] = Field(
        None,
        description="New description (posts only)",
    )
    source: Literal["sync", "dashboard"] = Field(
        "dashboard",
        description="Provenance tag recorded on the version snapshot",
    )


class ContentItemResponse(BaseModel):
    """Schema for a live content item."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    content_type: ContentType
    slug: str
    title: str
    content: str
    description: Optional[str] = None
    last_synced_at: Optional[int] = None
    version_id: Optional[UUID] = Field(
        None,
        description="Snapshot recorded for this edit (null when version control is off)",
    )
