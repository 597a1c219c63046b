# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Shared fixtures: a fresh app on an in-memory SQLite database per test,
plus helpers to register, verify and log in accounts of every role.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select

from debsoc.core.config import Settings
from debsoc.models.tables import USER_TABLES, attendance
from main import create_app

TEST_SECRET = "test-secret-that-is-at-least-32-characters"
TECHHEAD_EMAIL = "techhead@debsoc.test"
TECHHEAD_PASSWORD = "techhead-pass"

_PATHS = {"President": "president", "cabinet": "cabinet", "Member": "member"}


@pytest.fixture
def settings(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("JWT_SECRET", TEST_SECRET)
    monkeypatch.setenv("CLEANUP_ENABLED", "false")
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("CORS_ORIGINS", "*")
    monkeypatch.setenv("TECHHEAD_NAME", "Tech Head")
    monkeypatch.setenv("TECHHEAD_EMAIL", TECHHEAD_EMAIL)
    monkeypatch.setenv("TECHHEAD_PASSWORD", TECHHEAD_PASSWORD)
    return Settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def container(app, client):
    return app.state.container


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


class Api:
    """Small façade over the HTTP API used by the tests."""

    def __init__(self, client: TestClient):
        self.client = client
        self._counter = 0
        self.techhead_token = self.login("techhead", TECHHEAD_EMAIL, TECHHEAD_PASSWORD)

    def login(self, path: str, email: str, password: str) -> str:
        r = self.client.post(f"/api/{path}/login", json={"email": email, "password": password})
        assert r.status_code == 200, r.text
        return r.json()["token"]

    def register(self, role: str, name: str = None, verified: bool = True, **extra) -> dict:
        """Register an account; returns {"id", "token", "email"}."""
        self._counter += 1
        path = _PATHS[role]
        body = {
            "name": name or f"{path.title()} {self._counter}",
            "email": f"{path}{self._counter}@debsoc.test",
            "password": "secret123",
        }
        if path == "cabinet":
            body["position"] = extra.get("position", "Convenor")
        r = self.client.post(f"/api/{path}/register", json=body)
        assert r.status_code == 201, r.text
        data = r.json()
        account = {"id": data["user"]["id"], "token": data["token"], "email": body["email"]}
        if verified:
            self.verify(path, account["id"])
        return account

    def verify(self, path: str, user_id: str):
        key = {"president": "presidentId", "cabinet": "cabinetId", "member": "memberId"}[path]
        r = self.client.post(f"/api/techhead/verify/{path}", json={key: user_id},
                             headers=auth_header(self.techhead_token))
        assert r.status_code == 200, r.text
        return r

    def get(self, url: str, token: str, **kwargs):
        return self.client.get(url, headers=auth_header(token), **kwargs)

    def post(self, url: str, token: str, body: dict):
        return self.client.post(url, json=body, headers=auth_header(token))


@pytest.fixture
def api(client):
    return Api(client)


def row_count(engine, table, *where) -> int:
    with engine.connect() as conn:
        stmt = select(func.count()).select_from(table)
        if where:
            stmt = stmt.where(*where)
        return conn.execute(stmt).scalar()


def account_count(engine, role) -> int:
    return row_count(engine, USER_TABLES[role])


def attendance_count(engine, session_id: str) -> int:
    return row_count(engine, attendance, attendance.c.session_id == session_id)
