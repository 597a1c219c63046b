# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
TechHead administration: verification state and account removal.
"""

from typing import Any

from debsoc.core.errors import ConflictError, NotFoundError, ValidationError
from debsoc.core.logging import get_logger
from debsoc.metrics import VERIFICATION_ACTIONS
from debsoc.models.domain import VERIFIABLE_ROLES, Role
from debsoc.repositories.user_repository import UserRepository

logger = get_logger(__name__)

# Response keys for the grouped listings, per role.
_LISTING_KEYS = {
    Role.PRESIDENT: "Presidents",
    Role.CABINET: "Cabinet",
    Role.MEMBER: "Members",
}


class TechHeadService:
    def __init__(self, user_repo: UserRepository) -> None:
        self._users = user_repo

    def verify(self, role: Role, user_id: str, tech_head_id: str) -> dict[str, Any]:
        account = self._require(role, user_id)
        if account["isVerified"]:
            raise ConflictError(f"{role.label} is already verified")
        updated = self._users.set_verification(role, user_id, True, tech_head_id)
        VERIFICATION_ACTIONS.labels(role=role.value, action="verify").inc()
        logger.info("Verified %s id=%s by techhead=%s", role.value, user_id, tech_head_id)
        return self._summary(updated)

    def unverify(self, role: Role, user_id: str, tech_head_id: str) -> dict[str, Any]:
        account = self._require(role, user_id)
        if not account["isVerified"]:
            raise ConflictError(f"{role.label} is not verified")
        updated = self._users.set_verification(role, user_id, False, None)
        VERIFICATION_ACTIONS.labels(role=role.value, action="unverify").inc()
        logger.info("Unverified %s id=%s by techhead=%s", role.value, user_id, tech_head_id)
        return self._summary(updated)

    def delete(self, role: Role, user_id: str, tech_head_id: str) -> dict[str, Any]:
        account = self._require(role, user_id)
        self._users.delete(role, user_id)
        VERIFICATION_ACTIONS.labels(role=role.value, action="delete").inc()
        logger.info("Deleted %s id=%s by techhead=%s", role.value, user_id, tech_head_id)
        return {"id": account["id"], "name": account["name"]}

    def list_by_state(self, verified: bool) -> dict[str, list[dict[str, Any]]]:
        prefix = "verified" if verified else "unverified"
        return {
            f"{prefix}{_LISTING_KEYS[role]}": [
                self._listing(role, a) for a in self._users.list_accounts(role, verified=verified)
            ]
            for role in VERIFIABLE_ROLES
        }

    # ── Internal ──

    def _require(self, role: Role, user_id: str) -> dict[str, Any]:
        if role not in VERIFIABLE_ROLES:
            raise ValidationError(f"{role.value} accounts are not managed here")
        if not user_id:
            raise ValidationError(f"{role.label} ID is required")
        account = self._users.get_by_id(role, user_id)
        if account is None:
            raise NotFoundError(f"{role.label} not found")
        return account

    @staticmethod
    def _summary(account: dict[str, Any]) -> dict[str, Any]:
        return {
            "id": account["id"],
            "name": account["name"],
            "isVerified": account["isVerified"],
            "verifiedBy": account["verifiedBy"],
        }

    @staticmethod
    def _listing(role: Role, account: dict[str, Any]) -> dict[str, Any]:
        item = {
            "id": account["id"],
            "name": account["name"],
            "email": account["email"],
            "createdAt": account["createdAt"],
        }
        if role is Role.CABINET:
            item["position"] = account["position"]
        return item
