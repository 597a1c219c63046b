# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from debsoc.models.domain import Attendee
from debsoc.schemas import RequestModel, as_utc


class TaskAssignRequest(RequestModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1, max_length=5000)
    deadline: datetime
    assigned_to_id: Optional[str] = Field(None, alias="assignedToId", min_length=1)
    assigned_to_member_id: Optional[str] = Field(None, alias="assignedToMemberId", min_length=1)

    @field_validator("deadline")
    @classmethod
    def normalise_deadline(cls, v: datetime) -> datetime:
        return as_utc(v)

    @model_validator(mode="after")
    def exactly_one_assignee(self) -> "TaskAssignRequest":
        if (self.assigned_to_id is None) == (self.assigned_to_member_id is None):
            raise ValueError(
                "Please assign task to either a cabinet member (assignedToId) "
                "or a member (assignedToMemberId)"
            )
        return self

    @property
    def assignee(self) -> Attendee:
        if self.assigned_to_member_id is not None:
            return Attendee.member(self.assigned_to_member_id)
        return Attendee.cabinet(self.assigned_to_id)
