# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics: single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""
from prometheus_client import Counter, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "debsoc_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "debsoc_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "debsoc_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
REGISTRATIONS = Counter(
    "debsoc_registrations_total",
    "Accounts registered",
    ["role"],
)
LOGINS = Counter(
    "debsoc_logins_total",
    "Login attempts by outcome",
    ["role", "outcome"],
)
VERIFICATION_ACTIONS = Counter(
    "debsoc_verification_actions_total",
    "TechHead verify / unverify / delete actions",
    ["role", "action"],
)
SESSIONS_CREATED = Counter(
    "debsoc_sessions_created_total",
    "Sessions recorded",
)
ATTENDANCE_RECORDED = Counter(
    "debsoc_attendance_recorded_total",
    "Attendance rows written",
    ["status"],
)
FEEDBACK_PURGED = Counter(
    "debsoc_feedback_purged_total",
    "Anonymous feedback rows removed by the cleanup job",
)
