"""Tests for the version retention sweep and its ARQ job."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from cms_versions import worker
from cms_versions.config import settings
from cms_versions.models import ContentVersion, VersionSource
from cms_versions.services import retention_service
from cms_versions.services.retention_service import (
    CLEANUP_BATCH_SIZE,
    RETENTION_MS,
    cleanup_old_versions,
)

NOW = 10_000_000_000_000
CUTOFF = NOW - RETENTION_MS


@pytest.fixture
def frozen_now(monkeypatch):
    """Pin the sweep's clock so the cutoff is exact."""
    monkeypatch.setattr(retention_service, "now_ms", lambda: NOW)
    return NOW


async def remaining_created_at(db_session: AsyncSession) -> list[int]:
    result = await db_session.execute(
        select(ContentVersion.created_at).order_by(ContentVersion.created_at)
    )
    return [row[0] for row in result.all()]


async def add_many(db_session: AsyncSession, created_ats) -> None:
    db_session.add_all(
        [
            ContentVersion(
                content_type="post",
                content_id="bulk",
                slug="bulk",
                title=f"v{created_at}",
                content="",
                created_at=created_at,
                source=VersionSource.SYNC.value,
            )
            for created_at in created_ats
        ]
    )
    await db_session.commit()


def test_retention_window_is_three_days():
    assert RETENTION_MS == 3 * 24 * 60 * 60 * 1000
    assert CLEANUP_BATCH_SIZE == 1000


@pytest.mark.asyncio
class TestCleanupOldVersions:
    """Tests for cleanup_old_versions."""

    async def test_nothing_to_delete(self, db_session: AsyncSession, frozen_now):
        assert await cleanup_old_versions(db_session) == 0

    async def test_boundary(self, db_session: AsyncSession, frozen_now):
        """Only versions strictly older than the cutoff are deleted."""
        await add_many(db_session, [CUTOFF - 1, CUTOFF, CUTOFF + 1, NOW])

        deleted = await cleanup_old_versions(db_session)

        assert deleted == 1
        assert await remaining_created_at(db_session) == [CUTOFF, CUTOFF + 1, NOW]

    async def test_single_call_deletes_one_batch(self, db_session: AsyncSession, frozen_now):
        """A backlog larger than the batch takes several calls, oldest first."""
        old = [CUTOFF - 10_000 + i for i in range(CLEANUP_BATCH_SIZE + 5)]
        await add_many(db_session, old + [NOW])

        assert await cleanup_old_versions(db_session) == CLEANUP_BATCH_SIZE
        assert await remaining_created_at(db_session) == old[-5:] + [NOW]

        assert await cleanup_old_versions(db_session) == 5
        assert await cleanup_old_versions(db_session) == 0
        assert await remaining_created_at(db_session) == [NOW]


@pytest.mark.asyncio
class TestRunVersionCleanupJob:
    """Tests for the ARQ cleanup job."""

    async def test_job_reports_deleted_count(
        self, db_session: AsyncSession, session_maker, frozen_now, monkeypatch
    ):
        monkeypatch.setattr(worker, "async_session_maker", session_maker)
        await add_many(db_session, [CUTOFF - 2, CUTOFF - 1, NOW])

        result = await worker.run_version_cleanup({})

        assert result["deleted"] == 2
        assert "run_at" in result

        result = await db_session.execute(select(func.count(ContentVersion.id)))
        assert result.scalar_one() == 1

    async def test_job_swallows_errors(self, monkeypatch):
        """A failing run is logged and reported as zero; the next tick retries."""
        async def failing_cleanup(db):
            raise RuntimeError("database unavailable")

        monkeypatch.setattr(worker, "cleanup_old_versions", failing_cleanup)

        result = await worker.run_version_cleanup({})

        assert result["deleted"] == 0


class TestWorkerSettings:
    """Tests for ARQ WorkerSettings configuration."""

    def test_redis_settings_parsed_from_url(self):
        redis_settings = worker.parse_redis_url("redis://:secret@cache.local:6380/2")

        assert redis_settings.host == "cache.local"
        assert redis_settings.port == 6380
        assert redis_settings.password == "secret"
        assert redis_settings.database == 2

    def test_parse_schedule_set(self):
        assert worker.parse_schedule_set("0,12") == {0, 12}
        assert worker.parse_schedule_set(" 3 , ,5") == {3, 5}
        assert worker.parse_schedule_set("") == set()

    def test_default_cron_runs_daily(self):
        job = worker.build_cleanup_cron()

        assert job.hour == {3}
        assert job.minute == 0

    def test_minutes_override_hours(self, monkeypatch):
        monkeypatch.setattr(settings, "arq_cleanup_hours", "")
        monkeypatch.setattr(settings, "arq_cleanup_minutes", "0,30")

        job = worker.build_cleanup_cron()

        assert job.minute == {0, 30}

    def test_functions_registered(self):
        function_names = [f.__name__ for f in worker.WorkerSettings.functions]
        assert function_names == ["run_version_cleanup"]
        assert len(worker.WorkerSettings.cron_jobs) == 1
