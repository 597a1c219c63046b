# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration: all env-driven.
Settings are read when the object is built, so the application factory and
the tests can each construct their own instance.
"""

import os

MIN_SECRET_LENGTH = 32


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = "debsoc-backend"
    SERVICE_VERSION: str = "1.0.0"

    def __init__(self) -> None:
        self.ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development").strip().lower()
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./debsoc.db")
        self.POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))
        self.MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "5"))
        self.POOL_RECYCLE: int = int(os.getenv("DB_POOL_RECYCLE", "300"))

        self.JWT_SECRET: str = os.getenv("JWT_SECRET", "")
        self.JWT_ALGORITHM: str = "HS256"
        self.JWT_EXPIRES_HOURS: int = int(os.getenv("JWT_EXPIRES_HOURS", "24"))

        self.CORS_ORIGINS: list[str] = [
            o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
        ]
        self.LOG_LEVEL: str = os.getenv(
            "LOG_LEVEL", "INFO" if self.is_production else "DEBUG"
        ).upper()

        self.CLEANUP_ENABLED: bool = _env_bool("CLEANUP_ENABLED", "true")
        self.CLEANUP_INTERVAL_HOURS: float = float(os.getenv("CLEANUP_INTERVAL_HOURS", "24"))
        self.FEEDBACK_RETENTION_DAYS: int = int(os.getenv("FEEDBACK_RETENTION_DAYS", "15"))

        self.TECHHEAD_NAME: str = os.getenv("TECHHEAD_NAME", "Tech Head")
        self.TECHHEAD_EMAIL: str = os.getenv("TECHHEAD_EMAIL", "").strip().lower()
        self.TECHHEAD_PASSWORD: str = os.getenv("TECHHEAD_PASSWORD", "")

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT in ("prod", "production")

    def config_warnings(self) -> list[str]:
        """Problems worth logging at start-up; none of them stop the process."""
        warnings: list[str] = []
        if self.JWT_SECRET and len(self.JWT_SECRET) < MIN_SECRET_LENGTH:
            warnings.append(
                f"JWT_SECRET should be at least {MIN_SECRET_LENGTH} characters long"
            )
        if self.is_production and "*" in self.CORS_ORIGINS:
            warnings.append("CORS_ORIGINS allows any origin in production")
        return warnings


settings = Settings()
