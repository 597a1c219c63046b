# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Structured JSON logging: machine-parseable, one JSON line per record.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from debsoc.core.config import Settings, settings as default_settings

ROOT_LOGGER = "debsoc"


class JSONFormatter(logging.Formatter):
    """Emit every log record as a single JSON line for machine parsing."""

    def __init__(self, service: str = Settings.SERVICE_NAME) -> None:
        super().__init__()
        self._service = service

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service": self._service,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if hasattr(record, "request_id"):
            log_data["request_id"] = record.request_id  # type: ignore[attr-defined]
        if record.exc_info and record.exc_info[1]:
            log_data["error"] = str(record.exc_info[1])
            log_data["error_type"] = type(record.exc_info[1]).__name__
            log_data["traceback"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def configure_logging(config: Settings | None = None) -> None:
    """(Re)configure the package root logger for the given settings."""
    config = config or default_settings
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter(config.SERVICE_NAME))
        root.addHandler(handler)
        root.propagate = False


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the package root, configuring it on first use."""
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        configure_logging()
    if not name or name == ROOT_LOGGER:
        return root
    if not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
