"""
Shared fixtures: an in-memory stand-in for the supabase table API and a
TestClient wired to it through dependency overrides.
"""

import re
from datetime import datetime
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from calendar_api.core.dependencies import get_config_service, get_db
from calendar_api.features.config_options.service import ConfigService
from calendar_api.features.events.service import EventStore
from calendar_api.main import app

REQUIRED_COLUMNS = ("title", "start_date", "end_date", "event_type")


def _like_to_regex(pattern: str) -> re.Pattern:
    parts = []
    chars = iter(pattern)
    for ch in chars:
        if ch == "\\":
            parts.append(re.escape(next(chars, "")))
        elif ch in "%*":
            # PostgREST treats * as an alias for %
            parts.append(".*")
        elif ch == "_":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    return re.compile("".join(parts), re.IGNORECASE | re.DOTALL)


def _comparable(value):
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return value
    return value


class FakeQuery:
    """Chainable query mimicking the supabase/postgrest builder methods we use."""

    def __init__(self, table: "FakeTable"):
        self.table = table
        self.action = "select"
        self.payload = None
        self.filters = []
        self.order_by = None
        self.count = None
        self.row_limit = None

    def select(self, *columns, count=None):
        self.action = "select"
        self.count = count
        return self

    def limit(self, size):
        self.row_limit = size
        return self

    def insert(self, row: dict):
        self.action, self.payload = "insert", row
        return self

    def update(self, row: dict):
        self.action, self.payload = "update", row
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, column, value):
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def gte(self, column, value):
        self.filters.append(
            lambda row: row.get(column) is not None and _comparable(row[column]) >= _comparable(value)
        )
        return self

    def lte(self, column, value):
        self.filters.append(
            lambda row: row.get(column) is not None and _comparable(row[column]) <= _comparable(value)
        )
        return self

    def ilike(self, column, pattern):
        regex = _like_to_regex(pattern)
        self.filters.append(lambda row: row.get(column) is not None and regex.fullmatch(row[column]) is not None)
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def _matching(self) -> list[dict]:
        return [row for row in self.table.rows if all(f(row) for f in self.filters)]

    def execute(self):
        if self.action == "insert":
            data = [self.table.insert(self.payload)]
        elif self.action == "update":
            data = []
            for row in self._matching():
                row.update(self.payload)
                data.append(dict(row))
        elif self.action == "delete":
            data = self._matching()
            self.table.rows = [row for row in self.table.rows if row not in data]
            data = [dict(row) for row in data]
        else:
            data = [dict(row) for row in self._matching()]
            if self.order_by:
                column, desc = self.order_by
                data.sort(key=lambda row: row[column], reverse=desc)
            total = len(data)
            if self.row_limit is not None:
                data = data[:self.row_limit]
            return SimpleNamespace(data=data, count=total if self.count == "exact" else None)
        return SimpleNamespace(data=data, count=None)


class FakeTable:
    def __init__(self):
        self.rows: list[dict] = []
        self.next_id = 1
        self.fail_inserts = False

    def insert(self, row: dict) -> dict:
        if self.fail_inserts:
            raise RuntimeError("insert rejected by store")
        missing = [c for c in REQUIRED_COLUMNS if row.get(c) is None]
        if missing:
            raise RuntimeError(f"null value in column '{missing[0]}' violates not-null constraint")
        stored = {"id": self.next_id, **row}
        self.next_id += 1
        self.rows.append(stored)
        return dict(stored)


class FakeSupabaseClient:
    def __init__(self):
        self.tables: dict[str, FakeTable] = {}

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self.tables.setdefault(name, FakeTable()))


@pytest.fixture
def fake_db():
    return FakeSupabaseClient()


@pytest.fixture
def events_table(fake_db):
    return fake_db.tables.setdefault("calendar_events", FakeTable())


@pytest.fixture
def store(fake_db):
    return EventStore(fake_db, "calendar_events")


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config-options.yml"
    path.write_text(
        "configOptions:\n"
        "  - labelKey: config.custom1\n"
        "    value: custom/First.properties\n"
        "  - labelKey: config.custom2\n"
        "    value: custom/Second.properties\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def client(fake_db, config_file):
    app.dependency_overrides[get_db] = lambda: fake_db
    app.dependency_overrides[get_config_service] = lambda: ConfigService(str(config_file))
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
