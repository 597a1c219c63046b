# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: leaderboard over members and cabinet.

Scores are the sum of speaker scores on Present attendance rows; members
come first then cabinet, each in creation order, and the stable sort keeps
that order among equal scores.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Iterable, Optional

from debsoc.core.errors import ValidationError
from debsoc.models.domain import Attendee, AttendeeKind, Role
from debsoc.repositories.session_repository import SessionRepository
from debsoc.repositories.user_repository import UserRepository

BI_MONTHLY_DAYS = 60


class LeaderboardWindow(str, Enum):
    ALL_TIME = "all-time"
    BI_MONTHLY = "bi-monthly"

    @classmethod
    def parse(cls, value: Optional[str]) -> "LeaderboardWindow":
        if not value:
            return cls.ALL_TIME
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(
                f"type must be one of {[w.value for w in cls]}"
            )


def rank_entries(entries: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """Sort by score descending (stable) and attach a 1-based rank."""
    ordered = sorted(entries, key=lambda e: e["score"], reverse=True)
    return [{**entry, "rank": position} for position, entry in enumerate(ordered, start=1)]


class LeaderboardService:
    def __init__(self, session_repo: SessionRepository, user_repo: UserRepository) -> None:
        self._sessions = session_repo
        self._users = user_repo

    def leaderboard(self, window: LeaderboardWindow = LeaderboardWindow.ALL_TIME,
                    now: Optional[datetime] = None) -> list[dict[str, Any]]:
        since = None
        if window is LeaderboardWindow.BI_MONTHLY:
            since = (now or datetime.now(timezone.utc)) - timedelta(days=BI_MONTHLY_DAYS)

        totals: dict[Attendee, list[float]] = {}
        for attendee, score in self._sessions.present_scores(since):
            totals.setdefault(attendee, []).append(score)

        entries = []
        for kind in (AttendeeKind.MEMBER, AttendeeKind.CABINET):
            for account in self._users.list_accounts(kind.role):
                scores = totals.get(Attendee(kind=kind, id=account["id"]), [])
                entries.append({
                    "id": account["id"],
                    "name": account["name"],
                    "type": "Member" if kind.role is Role.MEMBER else "Cabinet",
                    "score": sum(scores),
                    "sessions": len(scores),
                })
        return rank_entries(entries)
