# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Bearer-token dependencies: authenticate, authorize by role, verification gate."""
from typing import Callable

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from debsoc.core.dependencies import get_auth_service
from debsoc.core.errors import AuthenticationError, AuthorizationError
from debsoc.models.domain import Principal, Role
from debsoc.services.auth_service import AuthService

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    auth: AuthService = Depends(get_auth_service),
) -> Principal:
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise AuthenticationError("Unauthorized: No token provided")
    principal = auth.decode_token(credentials.credentials)
    request.state.user = principal
    return principal


def require_roles(*roles: Role) -> Callable[..., Principal]:
    allowed = frozenset(roles)

    def dependency(principal: Principal = Depends(get_current_user)) -> Principal:
        if principal.role not in allowed:
            raise AuthorizationError(
                "Forbidden: You do not have access to this resource. "
                f"Required roles: {', '.join(r.value for r in roles)}"
            )
        return principal

    return dependency


def require_verified(*roles: Role) -> Callable[..., Principal]:
    """Role check followed by the verification gate (TechHead is exempt)."""
    role_check = require_roles(*roles)

    def dependency(
        principal: Principal = Depends(role_check),
        auth: AuthService = Depends(get_auth_service),
    ) -> Principal:
        auth.require_verified(principal)
        return principal

    return dependency
