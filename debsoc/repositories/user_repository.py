# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: account tables for all four roles.
No business rules here, pure CRUD keyed by Role.
"""
from typing import Any, Iterable, Optional

from sqlalchemy import Table, select

from debsoc.models.domain import Role
from debsoc.models.tables import USER_TABLES
from debsoc.repositories.base import SqlRepository, iso, new_id, utcnow


def _account_to_dict(role: Role, row) -> dict[str, Any]:
    m = row._mapping
    out: dict[str, Any] = {
        "id": m["id"],
        "name": m["name"],
        "email": m["email"],
        "createdAt": iso(m["created_at"]),
    }
    if role is Role.CABINET:
        out["position"] = m["position"]
    if role is not Role.TECH_HEAD:
        out["isVerified"] = bool(m["is_verified"])
        out["verifiedBy"] = m["verified_by"]
    return out


class UserRepository(SqlRepository):

    @staticmethod
    def _table(role: Role) -> Table:
        return USER_TABLES[role]

    # ── Read ───────────────────────────────────────────────────────────

    def get_by_id(self, role: Role, user_id: str) -> Optional[dict[str, Any]]:
        table = self._table(role)
        with self._connect() as conn:
            row = conn.execute(select(table).where(table.c.id == user_id)).fetchone()
        return _account_to_dict(role, row) if row else None

    def get_credentials(self, role: Role, email: str) -> Optional[dict[str, Any]]:
        """Account plus password hash, for login only."""
        table = self._table(role)
        with self._connect() as conn:
            row = conn.execute(select(table).where(table.c.email == email)).fetchone()
        if not row:
            return None
        account = _account_to_dict(role, row)
        account["passwordHash"] = row._mapping["password"]
        return account

    def email_exists(self, role: Role, email: str) -> bool:
        table = self._table(role)
        with self._connect() as conn:
            return conn.execute(
                select(table.c.id).where(table.c.email == email)
            ).fetchone() is not None

    def list_accounts(self, role: Role, verified: Optional[bool] = None) -> list[dict[str, Any]]:
        """Accounts in creation order, optionally filtered by verification state."""
        table = self._table(role)
        stmt = select(table).order_by(table.c.created_at, table.c.id)
        if verified is not None:
            stmt = stmt.where(table.c.is_verified == verified)
        with self._connect() as conn:
            rows = conn.execute(stmt).fetchall()
        return [_account_to_dict(role, r) for r in rows]

    def find_missing(self, role: Role, ids: Iterable[str]) -> list[str]:
        """Return the subset of ids that have no row in the role's table."""
        wanted = list(dict.fromkeys(ids))
        if not wanted:
            return []
        table = self._table(role)
        with self._connect() as conn:
            found = {
                r[0] for r in conn.execute(
                    select(table.c.id).where(table.c.id.in_(wanted))
                ).fetchall()
            }
        return [i for i in wanted if i not in found]

    # ── Write ──────────────────────────────────────────────────────────

    def create(self, role: Role, name: str, email: str, password_hash: str,
               position: Optional[str] = None) -> dict[str, Any]:
        table = self._table(role)
        values: dict[str, Any] = {
            "id": new_id(),
            "name": name,
            "email": email,
            "password": password_hash,
            "created_at": utcnow(),
        }
        if role is Role.CABINET:
            values["position"] = position
        if role is not Role.TECH_HEAD:
            values["is_verified"] = False
            values["verified_by"] = None
        with self._begin() as conn:
            conn.execute(table.insert().values(**values))
            row = conn.execute(select(table).where(table.c.id == values["id"])).fetchone()
        return _account_to_dict(role, row)

    def set_verification(self, role: Role, user_id: str, verified: bool,
                         verified_by: Optional[str]) -> Optional[dict[str, Any]]:
        table = self._table(role)
        with self._begin() as conn:
            result = conn.execute(
                table.update()
                .where(table.c.id == user_id)
                .values(is_verified=verified, verified_by=verified_by)
            )
            if not result.rowcount:
                return None
            row = conn.execute(select(table).where(table.c.id == user_id)).fetchone()
        return _account_to_dict(role, row)

    def delete(self, role: Role, user_id: str) -> bool:
        table = self._table(role)
        with self._begin() as conn:
            result = conn.execute(table.delete().where(table.c.id == user_id))
        return bool(result.rowcount)
