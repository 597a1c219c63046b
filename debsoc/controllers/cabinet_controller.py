# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Cabinet controller: sessions, attendance, tasks, feedback and messages.
Several read routes are shared with the President.
"""

from fastapi import APIRouter, Depends

from debsoc.controllers import envelope
from debsoc.core.dependencies import (
    get_auth_service,
    get_directory_service,
    get_messaging_service,
    get_session_service,
    get_task_service,
)
from debsoc.core.security import require_verified
from debsoc.models.domain import Attendee, Principal, Role
from debsoc.schemas.auth import CabinetRegisterRequest, LoginRequest
from debsoc.schemas.messages import FeedbackRequest, MessageRequest
from debsoc.schemas.sessions import MarkAttendanceRequest, SessionCreateRequest
from debsoc.services.auth_service import AuthService
from debsoc.services.directory_service import DirectoryService
from debsoc.services.messaging_service import MessagingService
from debsoc.services.session_service import SessionService
from debsoc.services.task_service import TaskService

router = APIRouter(prefix="/api/cabinet", tags=["Cabinet"])

cabinet_only = require_verified(Role.CABINET)
cabinet_or_president = require_verified(Role.CABINET, Role.PRESIDENT)


@router.post("/register", status_code=201)
def register(body: CabinetRegisterRequest, auth: AuthService = Depends(get_auth_service)):
    result = auth.register(Role.CABINET, body.name, body.email, body.password,
                           position=body.position)
    return envelope("Cabinet member registered successfully", **result)


@router.post("/login")
def login(body: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    return envelope("Login successful", **auth.login(Role.CABINET, body.email, body.password))


@router.post("/session/create", status_code=201)
def create_session(body: SessionCreateRequest,
                   _: Principal = Depends(cabinet_or_president),
                   service: SessionService = Depends(get_session_service)):
    session = service.create_session(body.session_date, body.motion_type, body.chair,
                                     body.entries())
    return envelope("Session created successfully", session=session)


@router.post("/attendance/mark", status_code=201)
def mark_attendance(body: MarkAttendanceRequest,
                    _: Principal = Depends(cabinet_or_president),
                    service: SessionService = Depends(get_session_service)):
    if body.session_id is not None:
        session = service.mark_attendance(body.session_id, body.entries())
    else:
        session = service.create_session(body.session_date, body.motion_type, body.chair,
                                         body.entries())
    return envelope("Session attendance marked successfully", session=session)


@router.get("/tasks")
def assigned_tasks(principal: Principal = Depends(cabinet_or_president),
                   service: TaskService = Depends(get_task_service)):
    if principal.role is Role.PRESIDENT:
        tasks = service.all_tasks()
    else:
        tasks = service.tasks_for(Attendee.cabinet(principal.id))
    return envelope("Tasks retrieved", tasks=tasks)


@router.post("/feedback/give", status_code=201)
def give_feedback(body: FeedbackRequest,
                  principal: Principal = Depends(cabinet_only),
                  service: MessagingService = Depends(get_messaging_service)):
    feedback = service.give_feedback(principal, body.member_id, body.feedback)
    return envelope("Anonymous feedback sent successfully", feedback=feedback)


@router.get("/sessions")
def session_reports(_: Principal = Depends(cabinet_or_president),
                    service: SessionService = Depends(get_session_service)):
    return envelope("Sessions retrieved", sessions=service.list_sessions())


@router.post("/messages/president", status_code=201)
def message_president(body: MessageRequest,
                      principal: Principal = Depends(cabinet_only),
                      service: MessagingService = Depends(get_messaging_service)):
    data = service.send_message(principal, body.president_id, body.message)
    return envelope("Anonymous message sent to President successfully", data=data)


@router.get("/dashboard")
def dashboard(_: Principal = Depends(cabinet_or_president),
              service: DirectoryService = Depends(get_directory_service)):
    return envelope("Dashboard data retrieved", **service.dashboard())


@router.get("/messages/sent")
def sent_messages(principal: Principal = Depends(cabinet_or_president),
                  service: MessagingService = Depends(get_messaging_service)):
    return envelope("Sent messages retrieved", messages=service.sent_messages(principal))


@router.get("/feedback/sent")
def sent_feedback(principal: Principal = Depends(cabinet_or_president),
                  service: MessagingService = Depends(get_messaging_service)):
    return envelope("Sent feedback retrieved", feedbacks=service.sent_feedback(principal))


@router.get("/attendance/my")
def my_attendance(principal: Principal = Depends(cabinet_only),
                  service: SessionService = Depends(get_session_service)):
    attendance = service.attendance_for(Attendee.cabinet(principal.id))
    return envelope("Attendance retrieved", attendance=attendance)
