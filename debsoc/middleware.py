# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
HTTP Middleware: request ID propagation, access logging and Prometheus metrics.
"""

import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from debsoc.core.logging import get_logger
from debsoc.metrics import HTTP_ERRORS, REQUEST_COUNT, REQUEST_LATENCY

logger = get_logger(__name__)

KNOWN_SEGMENTS: set[str] = {
    "api", "techhead", "president", "cabinet", "member", "leaderboard",
    "login", "register", "verify", "unverify", "delete", "unverified-users",
    "verified-users", "tasks", "assign", "feedback", "give", "sessions",
    "session", "create", "dashboard", "attendance", "attendance-report",
    "mark", "my", "messages", "sent", "presidents", "health", "ready", "metrics",
}

SKIP_PATHS: tuple[str, ...] = (
    "/health", "/health/ready", "/metrics", "/openapi.json", "/docs", "/redoc",
)


def normalize_path(path: str) -> str:
    parts = path.strip("/").split("/")
    if parts == [""]:
        return path
    return "/" + "/".join(p if p in KNOWN_SEGMENTS else "{param}" for p in parts)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Propagate or generate X-Request-ID for tracing."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Track request count, latency, and error rate; log one line per request."""

    async def dispatch(self, request: Request, call_next):
        start = time.time()
        response = await call_next(request)
        duration = time.time() - start

        path = request.url.path
        if path not in SKIP_PATHS:
            normalized = normalize_path(path)
            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=normalized,
                status=str(response.status_code),
            ).inc()
            REQUEST_LATENCY.labels(
                method=request.method,
                endpoint=normalized,
            ).observe(duration)
            if response.status_code >= 400:
                HTTP_ERRORS.labels(
                    method=request.method,
                    endpoint=normalized,
                    status=str(response.status_code),
                ).inc()
            logger.info(
                "%s %s -> %d (%.1f ms)",
                request.method, path, response.status_code, duration * 1000,
                extra={"request_id": getattr(request.state, "request_id", None)},
            )

        return response
