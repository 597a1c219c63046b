# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Member controller: own attendance, tasks, feedback, and messages to the
president. The President may read a member's records by passing memberId.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from debsoc.controllers import envelope
from debsoc.core.dependencies import (
    get_auth_service,
    get_directory_service,
    get_messaging_service,
    get_session_service,
    get_task_service,
)
from debsoc.core.errors import NotFoundError, ValidationError
from debsoc.core.security import require_verified
from debsoc.models.domain import Attendee, Principal, Role
from debsoc.schemas.auth import LoginRequest, RegisterRequest
from debsoc.schemas.messages import MessageRequest
from debsoc.services.auth_service import AuthService
from debsoc.services.directory_service import DirectoryService
from debsoc.services.messaging_service import MessagingService
from debsoc.services.session_service import SessionService
from debsoc.services.task_service import TaskService

router = APIRouter(prefix="/api/member", tags=["Member"])

member_only = require_verified(Role.MEMBER)
member_or_president = require_verified(Role.MEMBER, Role.PRESIDENT)


def target_member(
    member_id: Optional[str] = Query(default=None, alias="memberId"),
    principal: Principal = Depends(member_or_president),
    directory: DirectoryService = Depends(get_directory_service),
) -> str:
    """The member whose records are read: the caller, or memberId for a President."""
    if principal.role is Role.MEMBER:
        return principal.id
    if not member_id:
        raise ValidationError("memberId query parameter is required")
    if not directory.member_exists(member_id):
        raise NotFoundError("Member not found")
    return member_id


@router.post("/register", status_code=201)
def register(body: RegisterRequest, auth: AuthService = Depends(get_auth_service)):
    result = auth.register(Role.MEMBER, body.name, body.email, body.password)
    return envelope("Member registered successfully", **result)


@router.post("/login")
def login(body: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    return envelope("Login successful", **auth.login(Role.MEMBER, body.email, body.password))


@router.get("/attendance")
def my_attendance(member_id: str = Depends(target_member),
                  service: SessionService = Depends(get_session_service)):
    return envelope("Attendance retrieved",
                    attendance=service.attendance_for(Attendee.member(member_id)))


@router.get("/tasks")
def assigned_tasks(member_id: str = Depends(target_member),
                   service: TaskService = Depends(get_task_service)):
    return envelope("Tasks retrieved", tasks=service.tasks_for(Attendee.member(member_id)))


@router.post("/messages/president", status_code=201)
def message_president(body: MessageRequest,
                      principal: Principal = Depends(member_only),
                      service: MessagingService = Depends(get_messaging_service)):
    data = service.send_message(principal, body.president_id, body.message)
    return envelope("Anonymous message sent to President successfully", data=data)


@router.get("/feedback")
def my_feedback(member_id: str = Depends(target_member),
                service: MessagingService = Depends(get_messaging_service)):
    return envelope("Feedback retrieved", feedbacks=service.feedback_for(member_id))


@router.get("/messages/sent")
def sent_messages(principal: Principal = Depends(member_only),
                  service: MessagingService = Depends(get_messaging_service)):
    return envelope("Sent messages retrieved", messages=service.sent_messages(principal))


@router.get("/presidents")
def presidents(_: Principal = Depends(member_only),
               service: DirectoryService = Depends(get_directory_service)):
    return envelope("Presidents retrieved", presidents=service.presidents())
