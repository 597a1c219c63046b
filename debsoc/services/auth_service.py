# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: registration, login and bearer-token handling for every role.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from debsoc.core.config import Settings
from debsoc.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ValidationError,
)
from debsoc.core.logging import get_logger
from debsoc.metrics import LOGINS, REGISTRATIONS
from debsoc.models.domain import Principal, Role
from debsoc.repositories.user_repository import UserRepository

logger = get_logger(__name__)


class AuthService:
    """Credentials, tokens and the verification gate."""

    def __init__(self, user_repo: UserRepository, config: Settings) -> None:
        self._users = user_repo
        self._config = config

    # ── Tokens ──

    def issue_token(self, account: dict[str, Any], role: Role) -> str:
        if not self._config.JWT_SECRET:
            raise RuntimeError("JWT_SECRET is not configured")
        now = datetime.now(timezone.utc)
        claims = {
            "id": account["id"],
            "email": account["email"],
            "role": role.value,
            "isVerified": True if role is Role.TECH_HEAD else account["isVerified"],
            "iat": now,
            "exp": now + timedelta(hours=self._config.JWT_EXPIRES_HOURS),
        }
        return jwt.encode(claims, self._config.JWT_SECRET, algorithm=self._config.JWT_ALGORITHM)

    def decode_token(self, token: str) -> Principal:
        if not self._config.JWT_SECRET:
            raise AuthenticationError("Unauthorized: Invalid token")
        try:
            claims = jwt.decode(
                token,
                self._config.JWT_SECRET,
                algorithms=[self._config.JWT_ALGORITHM],
                options={"require": ["exp", "id", "role"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Unauthorized: Token expired")
        except jwt.InvalidTokenError:
            raise AuthenticationError("Unauthorized: Invalid token")
        try:
            role = Role(claims["role"])
        except ValueError:
            raise AuthenticationError("Unauthorized: Invalid token")
        return Principal(
            id=str(claims["id"]),
            email=str(claims.get("email", "")),
            role=role,
            is_verified=bool(claims.get("isVerified", False)),
        )

    # ── Commands ──

    def register(self, role: Role, name: str, email: str, password: str,
                 position: Optional[str] = None) -> dict[str, Any]:
        """Create an unverified account. Raises ConflictError on duplicate email."""
        if role is Role.TECH_HEAD:
            raise AuthorizationError("TechHead accounts cannot be registered")
        if role is Role.CABINET and not position:
            raise ValidationError("Please provide all fields")
        if self._users.email_exists(role, email):
            raise ConflictError(f"{role.label} already exists")

        account = self._users.create(
            role, name=name, email=email,
            password_hash=generate_password_hash(password),
            position=position,
        )
        REGISTRATIONS.labels(role=role.value).inc()
        logger.info("Registered %s id=%s", role.value, account["id"])
        return {"token": self.issue_token(account, role), "user": self._public_user(account, role)}

    def login(self, role: Role, email: str, password: str) -> dict[str, Any]:
        account = self._users.get_credentials(role, email)
        if not account or not check_password_hash(account.pop("passwordHash"), password):
            LOGINS.labels(role=role.value, outcome="failure").inc()
            logger.warning("Failed login for role=%s", role.value)
            raise AuthenticationError("Invalid credentials")
        LOGINS.labels(role=role.value, outcome="success").inc()
        return {"token": self.issue_token(account, role), "user": self._public_user(account, role)}

    def ensure_tech_head(self, name: str, email: str, password: str) -> bool:
        """Seed the TechHead account if it does not exist. Returns True when created."""
        email = email.strip().lower()
        if self._users.email_exists(Role.TECH_HEAD, email):
            logger.info("TechHead account present")
            return False
        self._users.create(Role.TECH_HEAD, name=name, email=email,
                           password_hash=generate_password_hash(password))
        logger.info("TechHead account seeded")
        return True

    # ── Gate ──

    def require_verified(self, principal: Principal) -> None:
        """Check the live record so verification changes apply without re-login."""
        if principal.role is Role.TECH_HEAD:
            return
        account = self._users.get_by_id(principal.role, principal.id)
        if account is None:
            raise AuthenticationError("Unauthorized: User not found")
        if not account["isVerified"]:
            raise AuthorizationError(
                "Forbidden: Your account is pending verification by the TechHead"
            )

    @staticmethod
    def _public_user(account: dict[str, Any], role: Role) -> dict[str, Any]:
        user = {
            "id": account["id"],
            "name": account["name"],
            "email": account["email"],
            "role": role.value,
        }
        if role is Role.CABINET:
            user["position"] = account.get("position")
        if role is not Role.TECH_HEAD:
            user["isVerified"] = account["isVerified"]
        return user
