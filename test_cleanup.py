# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Feedback retention job."""
import asyncio
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from conftest import account_count, row_count
from debsoc.core.database import reset_data
from debsoc.models.domain import Role
from debsoc.models.tables import anonymous_feedback, anonymous_messages
from debsoc.services.cleanup_job import FeedbackCleanupJob


def _seed(api, container):
    president = api.register("President")
    member = api.register("Member")
    now = datetime.now(timezone.utc)
    repo = container.message_repo
    repo.create_feedback("old", member["id"], Role.PRESIDENT, president["id"],
                         created_at=now - timedelta(days=16))
    repo.create_feedback("fresh", member["id"], Role.PRESIDENT, president["id"],
                         created_at=now - timedelta(days=14))
    repo.create_message("keep me", president["id"], Role.MEMBER, member["id"])
    return member


class TestCleanupJob:
    def test_deletes_only_expired_feedback(self, api, container):
        member = _seed(api, container)
        deleted = container.cleanup_job.run_once()
        assert deleted == 1
        remaining = container.message_repo.feedback_for_member(member["id"])
        assert [f["feedback"] for f in remaining] == ["fresh"]

    def test_messages_are_never_deleted(self, api, container):
        _seed(api, container)
        container.cleanup_job.run_once(now=datetime.now(timezone.utc) + timedelta(days=365))
        assert row_count(container.engine, anonymous_feedback) == 0
        assert row_count(container.engine, anonymous_messages) == 1

    def test_second_run_is_a_no_op(self, api, container):
        _seed(api, container)
        assert container.cleanup_job.run_once() == 1
        assert container.cleanup_job.run_once() == 0

    def test_overlapping_run_is_skipped(self):
        repo = MagicMock()
        job = FeedbackCleanupJob(repo)
        job._lock.acquire()
        try:
            assert job.run_once() is None
        finally:
            job._lock.release()
        repo.delete_feedback_before.assert_not_called()

    def test_retention_cutoff(self):
        repo = MagicMock()
        repo.delete_feedback_before.return_value = 0
        now = datetime(2026, 5, 20, tzinfo=timezone.utc)
        FeedbackCleanupJob(repo, retention_days=15).run_once(now=now)
        repo.delete_feedback_before.assert_called_once_with(now - timedelta(days=15))

    def test_start_runs_immediately_and_stop_cancels(self):
        repo = MagicMock()
        repo.delete_feedback_before.return_value = 0

        async def scenario():
            job = FeedbackCleanupJob(repo, interval_hours=24)
            job.start()
            for _ in range(50):
                if repo.delete_feedback_before.called:
                    break
                await asyncio.sleep(0.01)
            await job.stop()

        asyncio.run(scenario())
        repo.delete_feedback_before.assert_called_once()

    def test_loop_survives_errors(self):
        repo = MagicMock()
        repo.delete_feedback_before.side_effect = RuntimeError("db down")

        async def scenario():
            job = FeedbackCleanupJob(repo, interval_hours=0)
            job.start()
            for _ in range(50):
                if repo.delete_feedback_before.call_count >= 2:
                    break
                await asyncio.sleep(0.01)
            await job.stop()

        asyncio.run(scenario())
        assert repo.delete_feedback_before.call_count >= 2


class TestResetData:
    def test_reset_keeps_only_techhead(self, api, container):
        _seed(api, container)
        counts = reset_data(container.engine)
        assert counts["anonymous_feedback"] == 2
        assert counts["anonymous_messages"] == 1
        assert account_count(container.engine, Role.MEMBER) == 0
        assert account_count(container.engine, Role.PRESIDENT) == 0
        assert account_count(container.engine, Role.TECH_HEAD) == 1
