"""SQLAlchemy ORM models package."""

from .content import Page, Post
from .content_version import ContentType, ContentVersion, VersionSource
from .version_setting import ENABLED_KEY, VersionControlSetting

__all__ = [
    "ContentType",
    "ContentVersion",
    "ENABLED_KEY",
    "Page",
    "Post",
    "VersionControlSetting",
    "VersionSource",
]
