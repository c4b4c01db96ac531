"""Access to live posts and pages for the versioning engine.

The content repository owns posts and pages. Versioning only reads an
item (to capture its state) and patches it (to apply a restore or an
edit). Dispatch is on the ContentType tag; the two kinds differ only in
that posts carry a description.
"""

from dataclasses import dataclass
from typing import Optional, Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.content import Page, Post
from ..models.content_version import ContentType

CONTENT_MODELS = {
    ContentType.POST: Post,
    ContentType.PAGE: Page,
}

# Content types whose live rows have a description column
DESCRIBED_TYPES = {ContentType.POST}


@dataclass
class ContentItem:
    """Editable state of a live content item."""

    id: UUID
    content_type: ContentType
    slug: str
    title: str
    content: str
    description: Optional[str] = None
    last_synced_at: Optional[int] = None


def _parse_content_id(content_id: Union[str, UUID]) -> Optional[UUID]:
    if isinstance(content_id, UUID):
        return content_id
    try:
        return UUID(str(content_id))
    except ValueError:
        return None


def normalize_content_id(content_id: Union[str, UUID]) -> str:
    """Canonical string key for a content id (UUIDs in lowercase hyphenated form)."""
    item_id = _parse_content_id(content_id)
    return str(item_id) if item_id is not None else str(content_id)


async def _load_row(
    db: AsyncSession,
    content_type: ContentType,
    content_id: Union[str, UUID],
) -> Optional[Union[Post, Page]]:
    item_id = _parse_content_id(content_id)
    if item_id is None:
        return None
    model = CONTENT_MODELS[ContentType(content_type)]
    result = await db.execute(select(model).where(model.id == item_id))
    return result.scalar_one_or_none()


def _to_item(content_type: ContentType, row: Union[Post, Page]) -> ContentItem:
    return ContentItem(
        id=row.id,
        content_type=content_type,
        slug=row.slug,
        title=row.title,
        content=row.content,
        description=row.description if content_type in DESCRIBED_TYPES else None,
        last_synced_at=row.last_synced_at,
    )


async def read_content_item(
    db: AsyncSession,
    content_type: ContentType,
    content_id: Union[str, UUID],
) -> Optional[ContentItem]:
    """
    Read the current state of a live post or page.

    Args:
        db: Database session
        content_type: "post" or "page"
        content_id: Identity of the live item

    Returns:
        ContentItem, or None if the item does not exist
    """
    content_type = ContentType(content_type)
    row = await _load_row(db, content_type, content_id)
    if row is None:
        return None
    return _to_item(content_type, row)


async def patch_content_item(
    db: AsyncSession,
    content_type: ContentType,
    content_id: Union[str, UUID],
    *,
    title: str,
    content: str,
    description: Optional[str] = None,
    last_synced_at: Optional[int] = None,
) -> ContentItem:
    """
    Overwrite the editable fields of a live post or page.

    `description` is written for posts only (None becomes ""); it is
    ignored for pages. The change is flushed but not committed.

    Raises:
        LookupError: If the live item does not exist
    """
    content_type = ContentType(content_type)
    row = await _load_row(db, content_type, content_id)
    if row is None:
        raise LookupError(f"{content_type.value} {content_id} not found")

    row.title = title
    row.content = content
    if content_type in DESCRIBED_TYPES:
        row.description = description or ""
    if last_synced_at is not None:
        row.last_synced_at = last_synced_at

    await db.flush()
    return _to_item(content_type, row)
