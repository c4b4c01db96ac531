"""Post and Page SQLAlchemy models for live content.

These tables belong to the content repository. Only the columns the
versioning engine reads and patches are mapped here. Pages have no
description column.
"""

import uuid

from sqlalchemy import BigInteger, Column, String, Text, Uuid

from ..database import Base


class Post(Base):
    """
    Live blog post.

    Attributes:
        id: Unique identifier (UUID)
        slug: URL slug
        title: Post title
        content: Post body (markdown)
        description: Short summary
        last_synced_at: Last sync/restore time in epoch milliseconds
    """

    __tablename__ = "posts"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False, default="")
    description = Column(Text, nullable=True)
    last_synced_at = Column(BigInteger, nullable=True)

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, slug={self.slug})>"


class Page(Base):
    """
    Live static page.

    Attributes:
        id: Unique identifier (UUID)
        slug: URL slug
        title: Page title
        content: Page body (markdown)
        last_synced_at: Last sync/restore time in epoch milliseconds
    """

    __tablename__ = "pages"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False, default="")
    last_synced_at = Column(BigInteger, nullable=True)

    def __repr__(self) -> str:
        return f"<Page(id={self.id}, slug={self.slug})>"
