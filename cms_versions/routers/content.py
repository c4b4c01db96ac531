"""Live content editing endpoints.

Minimal editing workflow for posts and pages: every edit goes through
the content repository and records the resulting state as a version
snapshot (when version control is enabled).
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..models.content_version import ContentType, VersionSource
from ..schemas.content import ContentItemResponse, ContentUpdate
from ..services import content_repository, version_service
from ..utils.clock import now_ms

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/content", tags=["Content"])


@router.get("/{content_type}/{content_id}", response_model=ContentItemResponse)
async def get_content_item(
    content_type: ContentType,
    content_id: str,
    db: AsyncSession = Depends(get_db),
) -> ContentItemResponse:
    """Get the live state of a post or page."""
    item = await content_repository.read_content_item(db, content_type, content_id)
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{content_type.value.capitalize()} with ID {content_id} not found",
        )
    return ContentItemResponse.model_validate(item)


@router.patch("/{content_type}/{content_id}", response_model=ContentItemResponse)
async def update_content_item(
    content_type: ContentType,
    content_id: str,
    body: ContentUpdate,
    db: AsyncSession = Depends(get_db),
) -> ContentItemResponse:
    """
    Edit a post or page.

    Omitted fields keep their current value. The post-edit state is
    recorded as a snapshot with the request's source tag.
    """
    current = await content_repository.read_content_item(db, content_type, content_id)
    if current is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{content_type.value.capitalize()} with ID {content_id} not found",
        )

    title = body.title if body.title is not None else current.title
    content = body.content if body.content is not None else current.content
    description = body.description if body.description is not None else current.description
    source = VersionSource(body.source)

    version_id = await version_service.create_version(
        db,
        content_type=content_type,
        content_id=current.id,
        slug=current.slug,
        title=title,
        content=content,
        description=description if content_type == ContentType.POST else None,
        source=source,
    )

    item = await content_repository.patch_content_item(
        db,
        content_type,
        current.id,
        title=title,
        content=content,
        description=description,
        last_synced_at=now_ms() if source == VersionSource.SYNC else None,
    )
    await db.commit()

    if version_id is not None:
        logger.info(f"Recorded version {version_id} for {content_type.value} {current.id}")

    response = ContentItemResponse.model_validate(item)
    response.version_id = version_id
    return response
