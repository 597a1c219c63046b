# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models: pure data structures, NO FastAPI dependency.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Role(str, Enum):
    """The four account kinds. Values are the role strings carried in tokens."""

    TECH_HEAD = "TechHead"
    PRESIDENT = "President"
    CABINET = "cabinet"
    MEMBER = "Member"

    @property
    def label(self) -> str:
        return {
            Role.TECH_HEAD: "TechHead",
            Role.PRESIDENT: "President",
            Role.CABINET: "Cabinet member",
            Role.MEMBER: "Member",
        }[self]


# Roles that need TechHead approval before using operational endpoints.
VERIFIABLE_ROLES: tuple[Role, ...] = (Role.PRESIDENT, Role.CABINET, Role.MEMBER)


class AttendanceStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"


class AttendeeKind(str, Enum):
    MEMBER = "Member"
    CABINET = "Cabinet"

    @property
    def role(self) -> Role:
        return Role.MEMBER if self is AttendeeKind.MEMBER else Role.CABINET


class Attendee(BaseModel):
    """Either a member or a cabinet officer, referenced by id.

    Used for attendance rows and task assignees, which may point at exactly
    one of the two populations.
    """

    model_config = ConfigDict(frozen=True)

    kind: AttendeeKind
    id: str

    @classmethod
    def member(cls, member_id: str) -> "Attendee":
        return cls(kind=AttendeeKind.MEMBER, id=member_id)

    @classmethod
    def cabinet(cls, cabinet_id: str) -> "Attendee":
        return cls(kind=AttendeeKind.CABINET, id=cabinet_id)


class Principal(BaseModel):
    """The authenticated caller, decoded from a bearer token."""

    model_config = ConfigDict(frozen=True)

    id: str
    email: str
    role: Role
    is_verified: bool = False


class SenderType(str, Enum):
    MEMBER = "Member"
    CABINET = "cabinet"
    PRESIDENT = "President"

    @classmethod
    def for_role(cls, role: Role) -> "SenderType":
        return {
            Role.MEMBER: cls.MEMBER,
            Role.CABINET: cls.CABINET,
            Role.PRESIDENT: cls.PRESIDENT,
        }[role]


class AttendanceEntry(BaseModel):
    """One attendance row to be written for a session."""

    model_config = ConfigDict(frozen=True)

    attendee: Attendee
    status: AttendanceStatus
    speaker_score: float = 0
