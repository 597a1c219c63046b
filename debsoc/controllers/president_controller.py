# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""President controller: tasks, feedback, reports and the anonymous inbox."""
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
from debsoc.models.domain import Principal, Role
from debsoc.schemas.auth import LoginRequest, RegisterRequest
from debsoc.schemas.messages import FeedbackRequest
from debsoc.schemas.tasks import TaskAssignRequest
from debsoc.services.auth_service import AuthService
from debsoc.services.directory_service import DirectoryService
from debsoc.services.messaging_service import MessagingService
from debsoc.services.session_service import SessionService
from debsoc.services.task_service import TaskService

router = APIRouter(prefix="/api/president", tags=["President"])

president_only = require_verified(Role.PRESIDENT)


@router.post("/register", status_code=201)
def register(body: RegisterRequest, auth: AuthService = Depends(get_auth_service)):
    result = auth.register(Role.PRESIDENT, body.name, body.email, body.password)
    return envelope("President registered successfully", **result)


@router.post("/login")
def login(body: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    return envelope("Login successful", **auth.login(Role.PRESIDENT, body.email, body.password))


@router.post("/tasks/assign", status_code=201)
def assign_task(body: TaskAssignRequest,
                principal: Principal = Depends(president_only),
                service: TaskService = Depends(get_task_service)):
    task = service.assign(body.name, body.description, body.deadline, body.assignee, principal.id)
    return envelope("Task assigned successfully", task=task)


@router.post("/feedback/give", status_code=201)
def give_feedback(body: FeedbackRequest,
                  principal: Principal = Depends(president_only),
                  service: MessagingService = Depends(get_messaging_service)):
    feedback = service.give_feedback(principal, body.member_id, body.feedback)
    return envelope("Anonymous feedback sent successfully", feedback=feedback)


@router.get("/sessions")
def session_reports(_: Principal = Depends(president_only),
                    service: SessionService = Depends(get_session_service)):
    return envelope("Sessions retrieved", sessions=service.list_sessions())


@router.get("/dashboard")
def dashboard(_: Principal = Depends(president_only),
              service: DirectoryService = Depends(get_directory_service)):
    return envelope("Dashboard data retrieved", **service.dashboard())


@router.get("/attendance-report")
def attendance_report(_: Principal = Depends(president_only),
                      service: SessionService = Depends(get_session_service)):
    return envelope("Attendance report retrieved", sessions=service.attendance_report())


@router.get("/messages")
def anonymous_messages(principal: Principal = Depends(president_only),
                       service: MessagingService = Depends(get_messaging_service)):
    return envelope("Anonymous messages retrieved", messages=service.inbox(principal.id))


@router.get("/feedback/sent")
def sent_feedback(principal: Principal = Depends(president_only),
                  service: MessagingService = Depends(get_messaging_service)):
    return envelope("Sent feedback retrieved", feedbacks=service.sent_feedback(principal))
