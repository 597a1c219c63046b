# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Background job: purge anonymous feedback past its retention period.

Runs once when started and then on a fixed interval. Anonymous messages are
left alone; only feedback expires.
"""

import asyncio
import threading
from datetime import datetime, timedelta, timezone
from typing import Optional

from debsoc.core.logging import get_logger
from debsoc.metrics import FEEDBACK_PURGED
from debsoc.repositories.message_repository import MessageRepository

logger = get_logger(__name__)


class FeedbackCleanupJob:
    def __init__(self, message_repo: MessageRepository, retention_days: int = 15,
                 interval_hours: float = 24) -> None:
        self._messages = message_repo
        self._retention = timedelta(days=retention_days)
        self._interval_seconds = interval_hours * 3600
        self._lock = threading.Lock()
        self._task: Optional[asyncio.Task] = None

    def run_once(self, now: Optional[datetime] = None) -> Optional[int]:
        """Delete expired feedback. Returns the count, or None if a run was already active."""
        if not self._lock.acquire(blocking=False):
            logger.warning("Cleanup: previous run still in progress, skipping")
            return None
        try:
            cutoff = (now or datetime.now(timezone.utc)) - self._retention
            deleted = self._messages.delete_feedback_before(cutoff)
            FEEDBACK_PURGED.inc(deleted)
            if deleted:
                logger.info("Cleanup: deleted %d expired feedback(s)", deleted)
            else:
                logger.debug("Cleanup: nothing to delete")
            return deleted
        finally:
            self._lock.release()

    async def _loop(self) -> None:
        while True:
            try:
                await asyncio.to_thread(self.run_once)
            except asyncio.CancelledError:
                raise
            except Exception:
                logger.exception("Cleanup: error deleting expired feedback")
            await asyncio.sleep(self._interval_seconds)

    def start(self) -> None:
        if self._task is None or self._task.done():
            self._task = asyncio.get_running_loop().create_task(self._loop())
            logger.info(
                "Cleanup schedule started: every %.1f hours, retention %d days",
                self._interval_seconds / 3600, self._retention.days,
            )

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Cleanup schedule stopped")
