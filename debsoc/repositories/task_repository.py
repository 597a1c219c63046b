# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for tasks."""
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import select

from debsoc.models.domain import Attendee, AttendeeKind
from debsoc.models.tables import tasks
from debsoc.repositories.base import SqlRepository, iso, new_id, utcnow


def _task_to_dict(row) -> dict[str, Any]:
    m = row._mapping
    return {
        "id": m["id"],
        "name": m["name"],
        "description": m["description"],
        "deadline": iso(m["deadline"]),
        "assigneeType": (AttendeeKind.MEMBER.value if m["assigned_member_id"] is not None
                         else AttendeeKind.CABINET.value),
        "assignedToId": m["assigned_cabinet_id"],
        "assignedToMemberId": m["assigned_member_id"],
        "assignedBy": m["assigned_by"],
        "createdAt": iso(m["created_at"]),
    }


class TaskRepository(SqlRepository):

    def create(self, name: str, description: str, deadline: datetime,
               assignee: Attendee, assigned_by: Optional[str]) -> dict[str, Any]:
        values = {
            "id": new_id(),
            "name": name,
            "description": description,
            "deadline": deadline,
            "assigned_cabinet_id": assignee.id if assignee.kind is AttendeeKind.CABINET else None,
            "assigned_member_id": assignee.id if assignee.kind is AttendeeKind.MEMBER else None,
            "assigned_by": assigned_by,
            "created_at": utcnow(),
        }
        with self._begin() as conn:
            conn.execute(tasks.insert().values(**values))
            row = conn.execute(select(tasks).where(tasks.c.id == values["id"])).fetchone()
        return _task_to_dict(row)

    def list_for(self, assignee: Attendee) -> list[dict[str, Any]]:
        column = (tasks.c.assigned_member_id if assignee.kind is AttendeeKind.MEMBER
                  else tasks.c.assigned_cabinet_id)
        with self._connect() as conn:
            rows = conn.execute(
                select(tasks).where(column == assignee.id)
                .order_by(tasks.c.deadline, tasks.c.id)
            ).fetchall()
        return [_task_to_dict(r) for r in rows]

    def list_all(self) -> list[dict[str, Any]]:
        with self._connect() as conn:
            rows = conn.execute(select(tasks).order_by(tasks.c.deadline, tasks.c.id)).fetchall()
        return [_task_to_dict(r) for r in rows]
