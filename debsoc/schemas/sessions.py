# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Session and attendance request bodies."""
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from debsoc.models.domain import AttendanceEntry, AttendanceStatus, Attendee
from debsoc.schemas import RequestModel, as_utc


class AttendanceRecord(RequestModel):
    member_id: Optional[str] = Field(None, alias="memberId", min_length=1)
    cabinet_id: Optional[str] = Field(None, alias="cabinetId", min_length=1)
    status: AttendanceStatus
    speaker_score: float = Field(0, alias="speakerScore", ge=0)

    @model_validator(mode="after")
    def exactly_one_attendee(self) -> "AttendanceRecord":
        if (self.member_id is None) == (self.cabinet_id is None):
            raise ValueError("each attendance record needs exactly one of memberId or cabinetId")
        return self

    def to_entry(self) -> AttendanceEntry:
        attendee = (Attendee.member(self.member_id) if self.member_id is not None
                    else Attendee.cabinet(self.cabinet_id))
        return AttendanceEntry(attendee=attendee, status=self.status,
                               speaker_score=self.speaker_score)


class SessionDetails(RequestModel):
    session_date: Optional[datetime] = Field(None, alias="sessionDate")
    motion_type: Optional[str] = Field(None, alias="motiontype", min_length=1, max_length=255)
    chair: Optional[str] = Field(None, alias="Chair", min_length=1, max_length=120)

    @field_validator("session_date")
    @classmethod
    def normalise_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v) if v is not None else None

    def has_session_details(self) -> bool:
        return None not in (self.session_date, self.motion_type, self.chair)


class SessionCreateRequest(SessionDetails):
    attendance_data: list[AttendanceRecord] = Field(default_factory=list, alias="attendanceData")

    @model_validator(mode="after")
    def details_required(self) -> "SessionCreateRequest":
        if not self.has_session_details():
            raise ValueError("Please provide sessionDate, motiontype and Chair")
        return self

    def entries(self) -> list[AttendanceEntry]:
        return [r.to_entry() for r in self.attendance_data]


class MarkAttendanceRequest(SessionDetails):
    """Either ``sessionId`` of an existing session, or the details of a new one."""

    session_id: Optional[str] = Field(None, alias="sessionId", min_length=1)
    attendance_data: list[AttendanceRecord] = Field(..., alias="attendanceData", min_length=1)

    @model_validator(mode="after")
    def session_reference(self) -> "MarkAttendanceRequest":
        if self.session_id is None and not self.has_session_details():
            raise ValueError(
                "Please provide sessionId or all session details (sessionDate, motiontype, Chair)"
            )
        return self

    def entries(self) -> list[AttendanceEntry]:
        return [r.to_entry() for r in self.attendance_data]
