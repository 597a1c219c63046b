# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: leaderboard, readable by every authenticated role."""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from debsoc.controllers import envelope
from debsoc.core.dependencies import get_leaderboard_service
from debsoc.core.security import require_roles
from debsoc.models.domain import Principal, Role
from debsoc.services.leaderboard_service import LeaderboardService, LeaderboardWindow

router = APIRouter(prefix="/api/leaderboard", tags=["Leaderboard"])


@router.get("")
def get_leaderboard(
    window: Optional[str] = Query(default=None, alias="type"),
    _: Principal = Depends(require_roles(Role.MEMBER, Role.CABINET, Role.PRESIDENT, Role.TECH_HEAD)),
    service: LeaderboardService = Depends(get_leaderboard_service),
):
    parsed = LeaderboardWindow.parse(window)
    return envelope("Leaderboard retrieved", type=parsed.value,
                    leaderboard=service.leaderboard(parsed))
