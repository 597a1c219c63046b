# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
System controller: banner, health, readiness, metrics.
"""

from fastapi import APIRouter, Depends
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from debsoc.core.config import Settings
from debsoc.core.dependencies import get_user_repo
from debsoc.core.errors import DependencyError, StoreError
from debsoc.repositories.user_repository import UserRepository

router = APIRouter(tags=["System"])


@router.get("/")
def index():
    return {"message": "Debsoc Backend API", "version": Settings.SERVICE_VERSION}


@router.get("/health")
def health_check():
    return {"status": "ok", "service": Settings.SERVICE_NAME}


@router.get("/health/ready")
def readiness_check(repo: UserRepository = Depends(get_user_repo)):
    try:
        repo.verify_connection()
    except StoreError as exc:
        raise DependencyError(f"Database unavailable: {exc.message}")
    return {"status": "ok", "database": "connected"}


@router.get("/metrics")
def prometheus_metrics():
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
