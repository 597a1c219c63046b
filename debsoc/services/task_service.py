# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Service: task assignment by the president."""
from datetime import datetime
from typing import Any

from debsoc.core.errors import NotFoundError
from debsoc.core.logging import get_logger
from debsoc.models.domain import Attendee
from debsoc.repositories.task_repository import TaskRepository
from debsoc.repositories.user_repository import UserRepository

logger = get_logger(__name__)


class TaskService:
    def __init__(self, task_repo: TaskRepository, user_repo: UserRepository) -> None:
        self._tasks = task_repo
        self._users = user_repo

    def assign(self, name: str, description: str, deadline: datetime,
               assignee: Attendee, president_id: str) -> dict[str, Any]:
        if self._users.get_by_id(assignee.kind.role, assignee.id) is None:
            raise NotFoundError(f"{assignee.kind.role.label} not found")
        task = self._tasks.create(name, description, deadline, assignee, president_id)
        logger.info("Task assigned id=%s to %s %s", task["id"], assignee.kind.value, assignee.id)
        return task

    def tasks_for(self, assignee: Attendee) -> list[dict[str, Any]]:
        return self._tasks.list_for(assignee)

    def all_tasks(self) -> list[dict[str, Any]]:
        return self._tasks.list_all()
