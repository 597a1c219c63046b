# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for sessions and their attendance rows."""
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import and_, select
from sqlalchemy.engine import Connection

from debsoc.models.domain import AttendanceEntry, AttendanceStatus, Attendee, AttendeeKind
from debsoc.models.tables import attendance, cabinet, members, sessions
from debsoc.repositories.base import SqlRepository, iso, new_id, utcnow


def _session_to_dict(row) -> dict[str, Any]:
    m = row._mapping
    return {
        "id": m["id"],
        "sessionDate": iso(m["session_date"]),
        "motiontype": m["motion_type"],
        "Chair": m["chair"],
        "createdAt": iso(m["created_at"]),
    }


def _attendee_of(m) -> Attendee:
    if m["member_id"] is not None:
        return Attendee.member(m["member_id"])
    return Attendee.cabinet(m["cabinet_id"])


def _attendance_to_dict(row) -> dict[str, Any]:
    m = row._mapping
    attendee = _attendee_of(m)
    return {
        "id": m["id"],
        "sessionId": m["session_id"],
        "attendeeType": attendee.kind.value,
        "memberId": m["member_id"],
        "cabinetId": m["cabinet_id"],
        "status": m["status"],
        "speakerScore": m["speaker_score"] or 0,
        "createdAt": iso(m["created_at"]),
    }


class SessionRepository(SqlRepository):

    # ── Write ──────────────────────────────────────────────────────────

    def create_session(self, session_date: datetime, motion_type: str, chair: str,
                       entries: list[AttendanceEntry]) -> dict[str, Any]:
        """Insert a session and its attendance rows in one transaction."""
        session_id = new_id()
        with self._begin() as conn:
            conn.execute(sessions.insert().values(
                id=session_id, session_date=session_date, motion_type=motion_type,
                chair=chair, created_at=utcnow(),
            ))
            self._insert_attendance(conn, session_id, entries)
            session = self._load_session(conn, session_id)
        return session

    def add_attendance(self, session_id: str,
                       entries: list[AttendanceEntry]) -> Optional[dict[str, Any]]:
        """Append attendance rows to an existing session; None if it is missing."""
        with self._begin() as conn:
            exists = conn.execute(
                select(sessions.c.id).where(sessions.c.id == session_id)
            ).fetchone()
            if not exists:
                return None
            self._insert_attendance(conn, session_id, entries)
            session = self._load_session(conn, session_id)
        return session

    # ── Read ───────────────────────────────────────────────────────────

    def list_sessions(self) -> list[dict[str, Any]]:
        with self._connect() as conn:
            rows = conn.execute(
                select(sessions).order_by(sessions.c.session_date.desc(), sessions.c.id)
            ).fetchall()
        return [_session_to_dict(r) for r in rows]

    def attendance_for(self, attendee: Attendee) -> list[dict[str, Any]]:
        """An attendee's rows joined with their session, newest session first."""
        column = (attendance.c.member_id if attendee.kind is AttendeeKind.MEMBER
                  else attendance.c.cabinet_id)
        stmt = (
            select(attendance, sessions.c.session_date, sessions.c.motion_type,
                   sessions.c.chair, sessions.c.created_at.label("session_created_at"))
            .join(sessions, sessions.c.id == attendance.c.session_id)
            .where(column == attendee.id)
            .order_by(sessions.c.session_date.desc(), attendance.c.id)
        )
        with self._connect() as conn:
            rows = conn.execute(stmt).fetchall()
        result = []
        for r in rows:
            m = r._mapping
            item = _attendance_to_dict(r)
            item["session"] = {
                "id": m["session_id"],
                "sessionDate": iso(m["session_date"]),
                "motiontype": m["motion_type"],
                "Chair": m["chair"],
                "createdAt": iso(m["session_created_at"]),
            }
            result.append(item)
        return result

    def attendance_report(self) -> list[dict[str, Any]]:
        """Every session (newest first) with its attendance rows and attendee names."""
        stmt = (
            select(
                attendance,
                members.c.name.label("member_name"),
                cabinet.c.name.label("cabinet_name"),
            )
            .outerjoin(members, members.c.id == attendance.c.member_id)
            .outerjoin(cabinet, cabinet.c.id == attendance.c.cabinet_id)
            .order_by(attendance.c.created_at, attendance.c.id)
        )
        with self._connect() as conn:
            session_rows = conn.execute(
                select(sessions).order_by(sessions.c.session_date.desc(), sessions.c.id)
            ).fetchall()
            rows = conn.execute(stmt).fetchall()

        by_session: dict[str, list[dict[str, Any]]] = {}
        for r in rows:
            m = r._mapping
            item = _attendance_to_dict(r)
            item["name"] = m["member_name"] if m["member_id"] is not None else m["cabinet_name"]
            by_session.setdefault(m["session_id"], []).append(item)

        report = []
        for s in session_rows:
            session = _session_to_dict(s)
            rows_for = by_session.get(session["id"], [])
            session["attendance"] = rows_for
            session["presentCount"] = sum(
                1 for a in rows_for if a["status"] == AttendanceStatus.PRESENT.value
            )
            session["absentCount"] = len(rows_for) - session["presentCount"]
            report.append(session)
        return report

    def present_scores(self, since: Optional[datetime] = None) -> list[tuple[Attendee, float]]:
        """(attendee, speaker score) for every Present row, optionally since a date."""
        condition = attendance.c.status == AttendanceStatus.PRESENT.value
        if since is not None:
            condition = and_(condition, sessions.c.session_date >= since)
        stmt = (
            select(attendance.c.member_id, attendance.c.cabinet_id, attendance.c.speaker_score)
            .join(sessions, sessions.c.id == attendance.c.session_id)
            .where(condition)
        )
        with self._connect() as conn:
            rows = conn.execute(stmt).fetchall()
        return [(_attendee_of(r._mapping), r._mapping["speaker_score"] or 0) for r in rows]

    # ── Private ────────────────────────────────────────────────────────

    def _insert_attendance(self, conn: Connection, session_id: str,
                           entries: list[AttendanceEntry]) -> None:
        if not entries:
            return
        now = utcnow()
        conn.execute(attendance.insert(), [
            {
                "id": new_id(),
                "session_id": session_id,
                "member_id": e.attendee.id if e.attendee.kind is AttendeeKind.MEMBER else None,
                "cabinet_id": e.attendee.id if e.attendee.kind is AttendeeKind.CABINET else None,
                "status": e.status.value,
                "speaker_score": e.speaker_score,
                "created_at": now,
            }
            for e in entries
        ])

    def _load_session(self, conn: Connection, session_id: str) -> dict[str, Any]:
        row = conn.execute(select(sessions).where(sessions.c.id == session_id)).fetchone()
        session = _session_to_dict(row)
        rows = conn.execute(
            select(attendance)
            .where(attendance.c.session_id == session_id)
            .order_by(attendance.c.created_at, attendance.c.id)
        ).fetchall()
        session["attendance"] = [_attendance_to_dict(r) for r in rows]
        return session
