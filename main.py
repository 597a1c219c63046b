# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Debsoc Backend
==============
Role-based membership backend for a debating society: TechHead account
verification, sessions and attendance, tasks, anonymous messages and
feedback, and a speaker leaderboard.

Roles:
    TechHead ─► verifies / removes President, Cabinet and Member accounts
    President ─► assigns tasks, reads reports and the anonymous inbox
    Cabinet   ─► runs sessions and marks attendance
    Member    ─► reads own attendance, tasks and feedback

Port: 8000
"""
import traceback
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from debsoc.controllers import (
    cabinet_controller,
    leaderboard_controller,
    member_controller,
    president_controller,
    system_controller,
    techhead_controller,
)
from debsoc.core.config import Settings
from debsoc.core.database import create_db_engine, init_schema
from debsoc.core.dependencies import Container
from debsoc.core.errors import AppError, StoreError
from debsoc.core.logging import configure_logging, get_logger
from debsoc.middleware import MetricsMiddleware, RequestIDMiddleware

logger = get_logger("main")


def create_app(config: Optional[Settings] = None) -> FastAPI:
    config = config or Settings()

    # ── Lifespan ──────────────────────────────────────────────────────────
    @asynccontextmanager
    async def lifespan(application: FastAPI):
        configure_logging(config)
        if not config.JWT_SECRET:
            logger.error("Config: JWT_SECRET is not set; token issuance will fail")
        for warning in config.config_warnings():
            logger.warning("Config: %s", warning)

        engine = create_db_engine(config)
        init_schema(engine)
        container = Container(engine, config)
        application.state.container = container
        logger.info("Database schema ready")

        if config.TECHHEAD_EMAIL and config.TECHHEAD_PASSWORD:
            container.auth_service.ensure_tech_head(
                config.TECHHEAD_NAME, config.TECHHEAD_EMAIL, config.TECHHEAD_PASSWORD,
            )
        if config.CLEANUP_ENABLED:
            container.cleanup_job.start()

        yield

        await container.cleanup_job.stop()
        engine.dispose()
        logger.info("Shutting down: connection pool disposed")

    # ── FastAPI App ───────────────────────────────────────────────────────
    application = FastAPI(
        title="Debsoc Backend",
        description="Membership, attendance and feedback backend for a debating society.",
        version=Settings.SERVICE_VERSION,
        lifespan=lifespan,
    )
    application.state.settings = config

    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials="*" not in config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(MetricsMiddleware)
    application.add_middleware(RequestIDMiddleware)

    # ── Error handlers ────────────────────────────────────────────────────
    @application.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code,
                            content={"message": exc.message, "error": exc.kind})

    @application.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.warning("Store error (%s): %s", exc.kind.value, exc.message)
        return await app_error_handler(request, exc.to_app_error())

    @application.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"field": ".".join(str(p) for p in err.get("loc", ()) if p != "body"),
             "message": err.get("msg", "")}
            for err in exc.errors()
        ]
        first = errors[0] if errors else {"field": "", "message": "Invalid request"}
        message = f"{first['field']}: {first['message']}" if first["field"] else first["message"]
        return JSONResponse(status_code=400,
                            content={"message": message, "error": "validation_error",
                                     "errors": errors})

    @application.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code,
                            content={"message": str(exc.detail)},
                            headers=getattr(exc, "headers", None))

    @application.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        request_id = getattr(request.state, "request_id", None)
        logger.exception("Unhandled exception", extra={"request_id": request_id})
        content = {"message": "Internal server error", "error": "internal_server_error"}
        if not config.is_production:
            content["detail"] = str(exc)
            content["stack"] = traceback.format_exception(type(exc), exc, exc.__traceback__)
        headers = {"X-Request-ID": request_id} if request_id else None
        return JSONResponse(status_code=500, content=content, headers=headers)

    # ── Routers ───────────────────────────────────────────────────────────
    application.include_router(system_controller.router)
    application.include_router(techhead_controller.router)
    application.include_router(president_controller.router)
    application.include_router(cabinet_controller.router)
    application.include_router(member_controller.router)
    application.include_router(leaderboard_controller.router)

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000)
