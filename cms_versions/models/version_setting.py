"""VersionControlSetting SQLAlchemy model.

Keyed boolean switches for the versioning engine. The only key in use is
"enabled", which gates snapshot recording for ordinary edits.
"""

import uuid

from sqlalchemy import Boolean, Column, String, Uuid

from ..database import Base

ENABLED_KEY = "enabled"


class VersionControlSetting(Base):
    """
    Single keyed setting row. At most one row exists per key.

    Attributes:
        id: Unique identifier (UUID)
        key: Setting name (unique)
        value: Boolean value
    """

    __tablename__ = "versionControlSettings"

    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        nullable=False,
    )

    key = Column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
    )

    value = Column(
        Boolean,
        nullable=False,
        default=False,
    )

    def __repr__(self) -> str:
        return f"<VersionControlSetting(key={self.key}, value={self.value})>"
