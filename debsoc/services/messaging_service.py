# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: anonymous messages to the president and anonymous feedback to members.
"""

from typing import Any

from debsoc.core.errors import NotFoundError
from debsoc.core.logging import get_logger
from debsoc.models.domain import Principal, Role
from debsoc.repositories.message_repository import MessageRepository
from debsoc.repositories.user_repository import UserRepository

logger = get_logger(__name__)


class MessagingService:
    def __init__(self, message_repo: MessageRepository, user_repo: UserRepository) -> None:
        self._messages = message_repo
        self._users = user_repo

    def send_message(self, sender: Principal, president_id: str, message: str) -> dict[str, Any]:
        if self._users.get_by_id(Role.PRESIDENT, president_id) is None:
            raise NotFoundError("President not found")
        created = self._messages.create_message(message, president_id, sender.role, sender.id)
        logger.info("Anonymous message stored id=%s", created["id"])
        return created

    def give_feedback(self, sender: Principal, member_id: str, feedback: str) -> dict[str, Any]:
        if self._users.get_by_id(Role.MEMBER, member_id) is None:
            raise NotFoundError("Member not found")
        created = self._messages.create_feedback(feedback, member_id, sender.role, sender.id)
        logger.info("Anonymous feedback stored id=%s", created["id"])
        return created

    def inbox(self, president_id: str) -> list[dict[str, Any]]:
        return self._messages.messages_for_president(president_id)

    def sent_messages(self, sender: Principal) -> list[dict[str, Any]]:
        return self._messages.messages_sent_by(sender.role, sender.id)

    def feedback_for(self, member_id: str) -> list[dict[str, Any]]:
        return self._messages.feedback_for_member(member_id)

    def sent_feedback(self, sender: Principal) -> list[dict[str, Any]]:
        return self._messages.feedback_sent_by(sender.role, sender.id)
