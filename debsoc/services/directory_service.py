# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Service: read-only views across the role tables."""
from typing import Any

from debsoc.models.domain import Role
from debsoc.repositories.user_repository import UserRepository


class DirectoryService:
    def __init__(self, user_repo: UserRepository) -> None:
        self._users = user_repo

    def dashboard(self) -> dict[str, list[dict[str, Any]]]:
        members = [
            {"id": a["id"], "name": a["name"], "email": a["email"], "isVerified": a["isVerified"]}
            for a in self._users.list_accounts(Role.MEMBER)
        ]
        cabinet = [
            {"id": a["id"], "name": a["name"], "email": a["email"],
             "position": a["position"], "isVerified": a["isVerified"]}
            for a in self._users.list_accounts(Role.CABINET)
        ]
        return {"members": members, "cabinet": cabinet}

    def presidents(self) -> list[dict[str, Any]]:
        return [
            {"id": a["id"], "name": a["name"]}
            for a in self._users.list_accounts(Role.PRESIDENT, verified=True)
        ]

    def member_exists(self, member_id: str) -> bool:
        return self._users.get_by_id(Role.MEMBER, member_id) is not None
