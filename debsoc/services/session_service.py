# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: sessions and attendance recording.
Every attendee in a batch is checked before anything is written, and the
batch is inserted in a single transaction.
"""

from collections import Counter as Tally
from datetime import datetime
from typing import Any, Optional

from debsoc.core.errors import NotFoundError, ValidationError
from debsoc.core.logging import get_logger
from debsoc.metrics import ATTENDANCE_RECORDED, SESSIONS_CREATED
from debsoc.models.domain import AttendanceEntry, Attendee, AttendeeKind
from debsoc.repositories.session_repository import SessionRepository
from debsoc.repositories.user_repository import UserRepository

logger = get_logger(__name__)


class SessionService:
    def __init__(self, session_repo: SessionRepository, user_repo: UserRepository) -> None:
        self._sessions = session_repo
        self._users = user_repo

    # ── Commands ──

    def create_session(self, session_date: datetime, motion_type: str, chair: str,
                       entries: Optional[list[AttendanceEntry]] = None) -> dict[str, Any]:
        entries = entries or []
        self._check_attendees(entries)
        session = self._sessions.create_session(session_date, motion_type, chair, entries)
        SESSIONS_CREATED.inc()
        self._count(entries)
        logger.info("Session created id=%s attendance_rows=%d", session["id"], len(entries))
        return session

    def mark_attendance(self, session_id: str, entries: list[AttendanceEntry]) -> dict[str, Any]:
        if not entries:
            raise ValidationError("Please provide attendance data")
        self._check_attendees(entries)
        session = self._sessions.add_attendance(session_id, entries)
        if session is None:
            raise NotFoundError("Session not found")
        self._count(entries)
        logger.info("Attendance marked session=%s rows=%d", session_id, len(entries))
        return session

    # ── Queries ──

    def list_sessions(self) -> list[dict[str, Any]]:
        return self._sessions.list_sessions()

    def attendance_for(self, attendee: Attendee) -> list[dict[str, Any]]:
        return self._sessions.attendance_for(attendee)

    def attendance_report(self) -> list[dict[str, Any]]:
        return self._sessions.attendance_report()

    # ── Internal ──

    def _check_attendees(self, entries: list[AttendanceEntry]) -> None:
        seen: set[Attendee] = set()
        for entry in entries:
            if entry.attendee in seen:
                raise ValidationError(
                    f"Duplicate attendance record for {entry.attendee.kind.value} {entry.attendee.id}"
                )
            seen.add(entry.attendee)

        for kind in AttendeeKind:
            ids = [e.attendee.id for e in entries if e.attendee.kind is kind]
            missing = self._users.find_missing(kind.role, ids)
            if missing:
                raise ValidationError(f"Invalid {kind.value.lower()} IDs: {', '.join(missing)}")

    @staticmethod
    def _count(entries: list[AttendanceEntry]) -> None:
        for status, n in Tally(e.status.value for e in entries).items():
            ATTENDANCE_RECORDED.labels(status=status).inc(n)
