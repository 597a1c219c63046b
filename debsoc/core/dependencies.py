# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection: wire repositories and services.

The container is built by the application lifespan from an explicit engine
and stored on ``app.state``; dependency functions read it from the request.
"""

from fastapi import Request
from sqlalchemy.engine import Engine

from debsoc.core.config import Settings
from debsoc.repositories.message_repository import MessageRepository
from debsoc.repositories.session_repository import SessionRepository
from debsoc.repositories.task_repository import TaskRepository
from debsoc.repositories.user_repository import UserRepository
from debsoc.services.auth_service import AuthService
from debsoc.services.cleanup_job import FeedbackCleanupJob
from debsoc.services.directory_service import DirectoryService
from debsoc.services.leaderboard_service import LeaderboardService
from debsoc.services.messaging_service import MessagingService
from debsoc.services.session_service import SessionService
from debsoc.services.task_service import TaskService
from debsoc.services.techhead_service import TechHeadService


class Container:
    """Repositories and services sharing one engine."""

    def __init__(self, engine: Engine, config: Settings) -> None:
        self.engine = engine
        self.settings = config

        # ── Repositories ──
        self.user_repo = UserRepository(engine)
        self.session_repo = SessionRepository(engine)
        self.task_repo = TaskRepository(engine)
        self.message_repo = MessageRepository(engine)

        # ── Services ──
        self.auth_service = AuthService(self.user_repo, config)
        self.techhead_service = TechHeadService(self.user_repo)
        self.session_service = SessionService(self.session_repo, self.user_repo)
        self.task_service = TaskService(self.task_repo, self.user_repo)
        self.messaging_service = MessagingService(self.message_repo, self.user_repo)
        self.directory_service = DirectoryService(self.user_repo)
        self.leaderboard_service = LeaderboardService(self.session_repo, self.user_repo)
        self.cleanup_job = FeedbackCleanupJob(
            self.message_repo,
            retention_days=config.FEEDBACK_RETENTION_DAYS,
            interval_hours=config.CLEANUP_INTERVAL_HOURS,
        )


# ── FastAPI dependency functions ──
def get_container(request: Request) -> Container:
    return request.app.state.container


def get_auth_service(request: Request) -> AuthService:
    return get_container(request).auth_service


def get_techhead_service(request: Request) -> TechHeadService:
    return get_container(request).techhead_service


def get_session_service(request: Request) -> SessionService:
    return get_container(request).session_service


def get_task_service(request: Request) -> TaskService:
    return get_container(request).task_service


def get_messaging_service(request: Request) -> MessagingService:
    return get_container(request).messaging_service


def get_directory_service(request: Request) -> DirectoryService:
    return get_container(request).directory_service


def get_leaderboard_service(request: Request) -> LeaderboardService:
    return get_container(request).leaderboard_service


def get_user_repo(request: Request) -> UserRepository:
    return get_container(request).user_repo
