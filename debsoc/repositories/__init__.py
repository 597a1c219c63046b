# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package: re-exports the SQL repositories."""
from debsoc.repositories.message_repository import MessageRepository
from debsoc.repositories.session_repository import SessionRepository
from debsoc.repositories.task_repository import TaskRepository
from debsoc.repositories.user_repository import UserRepository

__all__ = ["MessageRepository", "SessionRepository", "TaskRepository", "UserRepository"]
