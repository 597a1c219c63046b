# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Error taxonomy shared by services and the HTTP layer."""
from enum import Enum


class AppError(Exception):
    """Base class for every expected, client-facing failure."""

    status_code: int = 500
    kind: str = "internal_server_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    status_code = 400
    kind = "validation_error"


class AuthenticationError(AppError):
    status_code = 401
    kind = "unauthorized"


class AuthorizationError(AppError):
    status_code = 403
    kind = "forbidden"


class NotFoundError(AppError):
    status_code = 404
    kind = "not_found"


class ConflictError(AppError):
    status_code = 400
    kind = "conflict"


class DependencyError(AppError):
    status_code = 503
    kind = "service_unavailable"


class StoreErrorKind(str, Enum):
    CONFLICT = "conflict"
    UNAVAILABLE = "unavailable"


class StoreError(Exception):
    """Raised by repositories; carries a kind so callers never parse driver messages."""

    def __init__(self, kind: StoreErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def to_app_error(self) -> AppError:
        if self.kind is StoreErrorKind.CONFLICT:
            return ConflictError("Request conflicts with existing data")
        return DependencyError("Database unavailable")
