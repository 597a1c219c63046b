# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Relational schema (SQLAlchemy Core)."""
from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)

from debsoc.models.domain import Role

metadata = MetaData()

ID = String(36)


def _id_column() -> Column:
    return Column("id", ID, primary_key=True)


def _created_at() -> Column:
    return Column("created_at", DateTime(timezone=True), nullable=False)


def _account_columns() -> list[Column]:
    return [
        _id_column(),
        Column("name", String(120), nullable=False),
        Column("email", String(255), nullable=False, unique=True),
        Column("password", String(255), nullable=False),
        _created_at(),
    ]


def _verifiable_columns() -> list[Column]:
    return [
        Column("is_verified", Boolean, nullable=False, default=False),
        Column(
            "verified_by",
            ID,
            ForeignKey("tech_heads.id", ondelete="SET NULL"),
            nullable=True,
        ),
    ]


tech_heads = Table("tech_heads", metadata, *_account_columns())

presidents = Table("presidents", metadata, *_account_columns(), *_verifiable_columns())

cabinet = Table(
    "cabinet",
    metadata,
    *_account_columns(),
    Column("position", String(120), nullable=False),
    *_verifiable_columns(),
)

members = Table("members", metadata, *_account_columns(), *_verifiable_columns())

sessions = Table(
    "sessions",
    metadata,
    _id_column(),
    Column("session_date", DateTime(timezone=True), nullable=False),
    Column("motion_type", String(255), nullable=False),
    Column("chair", String(120), nullable=False),
    _created_at(),
)

attendance = Table(
    "attendance",
    metadata,
    _id_column(),
    Column("session_id", ID, ForeignKey("sessions.id", ondelete="CASCADE"), nullable=False),
    Column("member_id", ID, ForeignKey("members.id", ondelete="CASCADE"), nullable=True),
    Column("cabinet_id", ID, ForeignKey("cabinet.id", ondelete="CASCADE"), nullable=True),
    Column("status", String(16), nullable=False),
    Column("speaker_score", Float, nullable=False, default=0),
    _created_at(),
    CheckConstraint(
        "(member_id IS NULL AND cabinet_id IS NOT NULL) "
        "OR (member_id IS NOT NULL AND cabinet_id IS NULL)",
        name="ck_attendance_single_attendee",
    ),
    CheckConstraint("status IN ('Present', 'Absent')", name="ck_attendance_status"),
)

tasks = Table(
    "tasks",
    metadata,
    _id_column(),
    Column("name", String(255), nullable=False),
    Column("description", Text, nullable=False),
    Column("deadline", DateTime(timezone=True), nullable=False),
    Column("assigned_cabinet_id", ID, ForeignKey("cabinet.id", ondelete="CASCADE"), nullable=True),
    Column("assigned_member_id", ID, ForeignKey("members.id", ondelete="CASCADE"), nullable=True),
    Column("assigned_by", ID, ForeignKey("presidents.id", ondelete="SET NULL"), nullable=True),
    _created_at(),
    CheckConstraint(
        "(assigned_member_id IS NULL AND assigned_cabinet_id IS NOT NULL) "
        "OR (assigned_member_id IS NOT NULL AND assigned_cabinet_id IS NULL)",
        name="ck_tasks_single_assignee",
    ),
)

anonymous_messages = Table(
    "anonymous_messages",
    metadata,
    _id_column(),
    Column("message", Text, nullable=False),
    Column("president_id", ID, ForeignKey("presidents.id", ondelete="CASCADE"), nullable=False),
    Column("sender_type", String(16), nullable=False),
    Column("sender_member_id", ID, ForeignKey("members.id", ondelete="CASCADE"), nullable=True),
    Column("sender_cabinet_id", ID, ForeignKey("cabinet.id", ondelete="CASCADE"), nullable=True),
    _created_at(),
)

anonymous_feedback = Table(
    "anonymous_feedback",
    metadata,
    _id_column(),
    Column("feedback", Text, nullable=False),
    Column("member_id", ID, ForeignKey("members.id", ondelete="CASCADE"), nullable=False),
    Column("sender_type", String(16), nullable=False),
    Column("sender_cabinet_id", ID, ForeignKey("cabinet.id", ondelete="CASCADE"), nullable=True),
    Column("sender_president_id", ID, ForeignKey("presidents.id", ondelete="CASCADE"), nullable=True),
    _created_at(),
    Index("ix_anonymous_feedback_created_at", "created_at"),
)

USER_TABLES: dict[Role, Table] = {
    Role.TECH_HEAD: tech_heads,
    Role.PRESIDENT: presidents,
    Role.CABINET: cabinet,
    Role.MEMBER: members,
}

# Child tables first so a bulk delete never trips a foreign key.
RESET_ORDER: tuple[Table, ...] = (
    anonymous_feedback,
    anonymous_messages,
    tasks,
    attendance,
    sessions,
    members,
    cabinet,
    presidents,
)
