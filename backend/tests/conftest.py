"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
environment defaults, an in-memory stand-in for the Supabase client, and
fixtures for an app wired to it.
"""

import os

# Must be set before anything reads settings
os.environ["SAARTHI_ENVIRONMENT"] = "test"
os.environ["SAARTHI_JWT_SECRET"] = "test-secret-key-for-testing-only"
os.environ.setdefault("SAARTHI_ENABLE_LEGACY_ROUTES", "false")

import copy
import itertools
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional

import pytest
from fastapi.testclient import TestClient
from postgrest.exceptions import APIError

import api  # noqa: F401  (loads api before any module routes)
from api.app import create_app
from api.dependencies import reset_container
from shared.config import Settings, get_settings
from shared.database import reset_client_cache


TEST_JWT_SECRET = "test-secret-key-for-testing-only"

UUID_COLUMNS = {"id", "user_id"}
UNIQUE_COLUMNS = {"users": ("email",)}
COLUMN_DEFAULTS = {
    "users": {"name": "User"},
    "assignments": {
        "status": "pending",
        "priority": "medium",
        "due_date": None,
        "description": None,
    },
}


class FakeResult:
    """Mimics postgrest's APIResponse."""

    def __init__(self, data: list[dict[str, Any]]):
        self.data = data


class FakeQuery:
    """
    Chainable query over one in-memory table.

    Supports the subset of the postgrest builder the repositories use:
    select/insert/update/delete, eq filters, order, execute.
    """

    def __init__(self, db: "FakeSupabase", table: str):
        self._db = db
        self._table = table
        self._operation = "select"
        self._columns = "*"
        self._payload: Optional[dict[str, Any]] = None
        self._filters: list[tuple[str, Any]] = []
        self._order: Optional[tuple[str, bool]] = None

    def select(self, columns: str = "*") -> "FakeQuery":
        self._operation = "select"
        self._columns = columns
        return self

    def insert(self, data: dict[str, Any]) -> "FakeQuery":
        self._operation = "insert"
        self._payload = dict(data)
        return self

    def update(self, data: dict[str, Any]) -> "FakeQuery":
        self._operation = "update"
        self._payload = dict(data)
        return self

    def delete(self) -> "FakeQuery":
        self._operation = "delete"
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        if column in UUID_COLUMNS:
            try:
                uuid.UUID(str(value))
            except ValueError:
                raise APIError({
                    "code": "22P02",
                    "message": f'invalid input syntax for type uuid: "{value}"',
                })
        self._filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self._order = (column, desc)
        return self

    def execute(self) -> FakeResult:
        handler = getattr(self, f"_execute_{self._operation}")
        return FakeResult(handler())

    def _rows(self) -> list[dict[str, Any]]:
        return self._db.tables.setdefault(self._table, [])

    def _matching(self) -> list[dict[str, Any]]:
        return [
            row for row in self._rows()
            if all(row.get(column) == value for column, value in self._filters)
        ]

    def _project(self, row: dict[str, Any]) -> dict[str, Any]:
        if self._columns.strip() == "*":
            return copy.deepcopy(row)
        columns = [c.strip() for c in self._columns.split(",")]
        return {c: copy.deepcopy(row.get(c)) for c in columns}

    def _execute_select(self) -> list[dict[str, Any]]:
        rows = self._matching()
        if self._order is not None:
            column, desc = self._order
            rows = sorted(rows, key=lambda r: r.get(column) or "", reverse=desc)
        return [self._project(row) for row in rows]

    def _execute_insert(self) -> list[dict[str, Any]]:
        for column in UNIQUE_COLUMNS.get(self._table, ()):
            if any(row.get(column) == self._payload.get(column) for row in self._rows()):
                raise APIError({
                    "code": "23505",
                    "message": f'duplicate key value violates unique constraint "{self._table}_{column}_key"',
                })

        timestamp = self._db.next_timestamp()
        row = {
            **COLUMN_DEFAULTS.get(self._table, {}),
            **self._payload,
            "id": str(uuid.uuid4()),
            "created_at": timestamp,
            "updated_at": timestamp,
        }
        self._rows().append(row)
        return [copy.deepcopy(row)]

    def _execute_update(self) -> list[dict[str, Any]]:
        updated = []
        for row in self._matching():
            row.update(self._payload)
            updated.append(copy.deepcopy(row))
        return updated

    def _execute_delete(self) -> list[dict[str, Any]]:
        doomed = self._matching()
        self._db.tables[self._table] = [row for row in self._rows() if row not in doomed]
        return [copy.deepcopy(row) for row in doomed]


class FakeSupabase:
    """In-memory stand-in for supabase.Client."""

    def __init__(self):
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self._clock = itertools.count()
        self._epoch = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def next_timestamp(self) -> str:
        """Strictly increasing creation times so ordering is deterministic."""
        return (self._epoch + timedelta(seconds=next(self._clock))).isoformat()


@pytest.fixture(autouse=True)
def reset_singletons():
    """Fresh service container and database client for every test."""
    reset_container()
    reset_client_cache()
    yield
    reset_container()
    reset_client_cache()


@pytest.fixture
def fake_db(monkeypatch) -> FakeSupabase:
    """Route every repository to a fresh in-memory database."""
    db = FakeSupabase()
    monkeypatch.setattr("shared.database.get_supabase_client", lambda: db)
    return db


@pytest.fixture
def app(fake_db):
    """Create a fresh app backed by the in-memory database."""
    return create_app()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def legacy_client(fake_db) -> TestClient:
    """Client for an app with the unauthenticated legacy routes mounted."""
    settings = Settings(enable_legacy_routes=True)
    return TestClient(create_app(settings))


@pytest.fixture
def signup(client) -> Callable[..., dict[str, Any]]:
    """Register a user through the API and return the response body."""

    def _signup(email: str = "student@example.com", pin: str = "1234", name: Optional[str] = None):
        body = {"email": email, "pin": pin}
        if name is not None:
            body["name"] = name
        response = client.post("/api/auth/signup", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _signup


@pytest.fixture
def auth_headers() -> Callable[[dict[str, Any]], dict[str, str]]:
    """Build authorization headers from a signup/login body."""

    def _headers(session: dict[str, Any]) -> dict[str, str]:
        return {"Authorization": f"Bearer {session['token']}"}

    return _headers


@pytest.fixture
def settings() -> Settings:
    return get_settings()
