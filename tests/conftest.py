"""Shared pytest fixtures for backend tests."""

import os
from typing import AsyncGenerator
from uuid import uuid4

# Point the application at SQLite BEFORE importing app modules
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite:///:memory:")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from cms_versions.database import Base, get_db
from cms_versions.main import app
from cms_versions.models import ContentType, ContentVersion, Page, Post, VersionSource
from cms_versions.services import version_service
from cms_versions.utils.clock import now_ms

# Use in-memory SQLite for testing
SQLALCHEMY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine():
    """Create a test database engine with SQLite."""
    engine = create_async_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Clean up
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_maker(engine) -> async_sessionmaker:
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with database dependency override."""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_post(db_session: AsyncSession) -> Post:
    """Create a live post."""
    post = Post(
        id=uuid4(),
        slug="hello-world",
        title="Hello World",
        content="First post body",
        description="An introduction",
    )
    db_session.add(post)
    await db_session.commit()
    await db_session.refresh(post)
    return post


@pytest_asyncio.fixture
async def test_page(db_session: AsyncSession) -> Page:
    """Create a live page."""
    page = Page(
        id=uuid4(),
        slug="about",
        title="About",
        content="About this site",
    )
    db_session.add(page)
    await db_session.commit()
    await db_session.refresh(page)
    return page


@pytest_asyncio.fixture
async def versions_enabled(db_session: AsyncSession) -> None:
    """Turn version recording on."""
    await version_service.set_enabled(db_session, True)


async def add_version(
    db_session: AsyncSession,
    *,
    content_type: ContentType = ContentType.POST,
    content_id: str = "missing",
    slug: str = "slug",
    title: str = "Title",
    content: str = "Body",
    description: str | None = None,
    source: VersionSource = VersionSource.DASHBOARD,
    created_at: int | None = None,
) -> ContentVersion:
    """Insert a snapshot directly, bypassing the version control switch."""
    version = ContentVersion(
        content_type=content_type.value,
        content_id=str(content_id),
        slug=slug,
        title=title,
        content=content,
        description=description,
        created_at=created_at if created_at is not None else now_ms(),
        source=source.value,
    )
    db_session.add(version)
    await db_session.commit()
    await db_session.refresh(version)
    return version


@pytest.fixture
def make_version(db_session: AsyncSession):
    """Factory fixture for inserting snapshots with explicit fields."""
    async def _make(**kwargs) -> ContentVersion:
        return await add_version(db_session, **kwargs)

    return _make
