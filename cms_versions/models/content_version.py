"""ContentVersion SQLAlchemy model for content version history.

A ContentVersion is an immutable snapshot of a post or page's editable
fields. Rows are only ever inserted (by edits and restores) and deleted
(by the retention sweep); they are never updated.
"""

import uuid
from enum import Enum

from sqlalchemy import BigInteger, Column, Index, String, Text, Uuid

from ..database import Base


class ContentType(str, Enum):
    """Kinds of live content that can be versioned."""

    POST = "post"
    PAGE = "page"


class VersionSource(str, Enum):
    """Where a snapshot came from."""

    SYNC = "sync"
    DASHBOARD = "dashboard"
    RESTORE = "restore"


class ContentVersion(Base):
    """
    ContentVersion model storing a point-in-time copy of a content item.

    Attributes:
        id: Unique identifier (UUID)
        content_type: Kind of live item ("post" or "page")
        content_id: Identity of the live item (opaque, may no longer exist)
        slug: Slug of the live item at capture time
        title: Captured title
        content: Captured body text
        description: Captured description (posts only, optional)
        created_at: Capture time in epoch milliseconds
        source: Provenance tag ("sync", "dashboard" or "restore")
    """

    __tablename__ = "contentVersions"
    __allow_unmapped__ = True

    # Primary key
    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        nullable=False,
    )

    # Content key
    content_type = Column(
        String(16),
        nullable=False,
    )

    content_id = Column(
        String(64),
        nullable=False,
    )

    # Captured state
    slug = Column(
        String(255),
        nullable=False,
    )

    title = Column(
        Text,
        nullable=False,
    )

    content = Column(
        Text,
        nullable=False,
    )

    description = Column(
        Text,
        nullable=True,
    )

    # Epoch millis, sole ordering and retention key
    created_at = Column(
        BigInteger,
        nullable=False,
    )

    source = Column(
        String(16),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_contentVersions_content", "content_type", "content_id", "created_at"),
        Index("ix_contentVersions_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        """String representation of ContentVersion."""
        return (
            f"<ContentVersion(id={self.id}, {self.content_type}:{self.content_id}, "
            f"source={self.source}, created_at={self.created_at})>"
        )
