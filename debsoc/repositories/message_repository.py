# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: anonymous messages (to a president) and anonymous feedback
(to a member). Sender columns are written here but only the
sender-facing reads return them.
"""
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import select

from debsoc.models.domain import Role, SenderType
from debsoc.models.tables import anonymous_feedback, anonymous_messages, members, presidents
from debsoc.repositories.base import SqlRepository, iso, new_id, utcnow

_MESSAGE_SENDER_COLUMNS = {
    Role.MEMBER: "sender_member_id",
    Role.CABINET: "sender_cabinet_id",
}

_FEEDBACK_SENDER_COLUMNS = {
    Role.CABINET: "sender_cabinet_id",
    Role.PRESIDENT: "sender_president_id",
}


class MessageRepository(SqlRepository):

    # ── Anonymous messages ─────────────────────────────────────────────

    def create_message(self, message: str, president_id: str,
                       sender_role: Role, sender_id: str) -> dict[str, Any]:
        values = {
            "id": new_id(),
            "message": message,
            "president_id": president_id,
            "sender_type": SenderType.for_role(sender_role).value,
            "sender_member_id": None,
            "sender_cabinet_id": None,
            "created_at": utcnow(),
        }
        values[_MESSAGE_SENDER_COLUMNS[sender_role]] = sender_id
        with self._begin() as conn:
            conn.execute(anonymous_messages.insert().values(**values))
        return {
            "id": values["id"],
            "message": message,
            "presidentId": president_id,
            "senderType": values["sender_type"],
            "createdAt": iso(values["created_at"]),
        }

    def messages_for_president(self, president_id: str) -> list[dict[str, Any]]:
        """Inbox view: no sender columns are selected."""
        t = anonymous_messages
        with self._connect() as conn:
            rows = conn.execute(
                select(t.c.id, t.c.message, t.c.created_at)
                .where(t.c.president_id == president_id)
                .order_by(t.c.created_at.desc(), t.c.id)
            ).fetchall()
        return [
            {"id": r.id, "message": r.message, "createdAt": iso(r.created_at)}
            for r in rows
        ]

    def messages_sent_by(self, sender_role: Role, sender_id: str) -> list[dict[str, Any]]:
        if sender_role not in _MESSAGE_SENDER_COLUMNS:
            return []
        t = anonymous_messages
        column = t.c[_MESSAGE_SENDER_COLUMNS[sender_role]]
        with self._connect() as conn:
            rows = conn.execute(
                select(t.c.id, t.c.message, t.c.president_id, t.c.created_at,
                       presidents.c.name.label("president_name"))
                .join(presidents, presidents.c.id == t.c.president_id)
                .where(column == sender_id)
                .order_by(t.c.created_at.desc(), t.c.id)
            ).fetchall()
        return [
            {"id": r.id, "message": r.message, "presidentId": r.president_id,
             "presidentName": r.president_name, "createdAt": iso(r.created_at)}
            for r in rows
        ]

    # ── Anonymous feedback ─────────────────────────────────────────────

    def create_feedback(self, feedback: str, member_id: str, sender_role: Role,
                        sender_id: str, created_at: Optional[datetime] = None) -> dict[str, Any]:
        values = {
            "id": new_id(),
            "feedback": feedback,
            "member_id": member_id,
            "sender_type": SenderType.for_role(sender_role).value,
            "sender_cabinet_id": None,
            "sender_president_id": None,
            "created_at": created_at or utcnow(),
        }
        values[_FEEDBACK_SENDER_COLUMNS[sender_role]] = sender_id
        with self._begin() as conn:
            conn.execute(anonymous_feedback.insert().values(**values))
        return {
            "id": values["id"],
            "feedback": feedback,
            "memberId": member_id,
            "senderType": values["sender_type"],
            "createdAt": iso(values["created_at"]),
        }

    def feedback_for_member(self, member_id: str) -> list[dict[str, Any]]:
        t = anonymous_feedback
        with self._connect() as conn:
            rows = conn.execute(
                select(t.c.id, t.c.feedback, t.c.sender_type, t.c.created_at)
                .where(t.c.member_id == member_id)
                .order_by(t.c.created_at.desc(), t.c.id)
            ).fetchall()
        return [
            {"id": r.id, "feedback": r.feedback, "senderType": r.sender_type,
             "createdAt": iso(r.created_at)}
            for r in rows
        ]

    def feedback_sent_by(self, sender_role: Role, sender_id: str) -> list[dict[str, Any]]:
        t = anonymous_feedback
        column = t.c[_FEEDBACK_SENDER_COLUMNS[sender_role]]
        with self._connect() as conn:
            rows = conn.execute(
                select(t.c.id, t.c.feedback, t.c.member_id, t.c.created_at,
                       members.c.name.label("member_name"))
                .join(members, members.c.id == t.c.member_id)
                .where(column == sender_id)
                .order_by(t.c.created_at.desc(), t.c.id)
            ).fetchall()
        return [
            {"id": r.id, "feedback": r.feedback, "memberId": r.member_id,
             "memberName": r.member_name, "createdAt": iso(r.created_at)}
            for r in rows
        ]

    def delete_feedback_before(self, cutoff: datetime) -> int:
        """Delete feedback created strictly before cutoff. Messages are never touched."""
        with self._begin() as conn:
            result = conn.execute(
                anonymous_feedback.delete().where(anonymous_feedback.c.created_at < cutoff)
            )
        return result.rowcount or 0
