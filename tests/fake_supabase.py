# =============================================================================
# tests/fake_supabase.py - In-Memory Supabase Table Client
# =============================================================================
# Implements the subset of the supabase-py query builder used by the
# repositories (select / insert / update / delete, eq, order, limit,
# execute) over Python lists, so API tests run without a database.
# =============================================================================

from __future__ import annotations

import copy
import uuid
from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any


@dataclass
class FakeResponse:
    data: list[dict[str, Any]]
    count: int | None = None


class FakeAPIError(Exception):
    """Raised for constraint violations, like PostgREST would."""


class FakeQuery:
    """Chainable query over one fake table."""

    def __init__(self, db: FakeSupabase, table: str):
        self._db = db
        self._table = table
        self._op = "select"
        self._columns = "*"
        self._payload: Any = None
        self._filters: list[tuple[str, Any]] = []
        self._order: tuple[str, bool] | None = None
        self._limit: int | None = None

    def select(self, columns: str = "*", count: str | None = None) -> FakeQuery:
        self._op = "select"
        self._columns = columns
        return self

    def insert(self, payload: dict | list[dict]) -> FakeQuery:
        self._op = "insert"
        self._payload = payload
        return self

    def update(self, payload: dict) -> FakeQuery:
        self._op = "update"
        self._payload = payload
        return self

    def delete(self) -> FakeQuery:
        self._op = "delete"
        return self

    def eq(self, column: str, value: Any) -> FakeQuery:
        self._filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False) -> FakeQuery:
        self._order = (column, desc)
        return self

    def limit(self, size: int) -> FakeQuery:
        self._limit = size
        return self

    def _matches(self, row: dict[str, Any]) -> bool:
        return all(str(row.get(column)) == str(value) for column, value in self._filters)

    def _project(self, row: dict[str, Any]) -> dict[str, Any]:
        if self._columns.strip() == "*":
            return copy.deepcopy(row)
        columns = [c.strip() for c in self._columns.split(",")]
        return {c: copy.deepcopy(row.get(c)) for c in columns}

    def execute(self) -> FakeResponse:
        self._db.queries.append((self._table, self._op))
        rows = self._db.tables[self._table]

        if self._op == "insert":
            payloads = self._payload if isinstance(self._payload, list) else [self._payload]
            created = []
            for payload in payloads:
                row = {
                    "id": str(uuid.uuid4()),
                    "created_at": self._db.next_timestamp(),
                    **copy.deepcopy(payload),
                }
                self._db.check_unique(self._table, row)
                rows.append(row)
                created.append(copy.deepcopy(row))
            return FakeResponse(created)

        matched = [row for row in rows if self._matches(row)]

        if self._op == "update":
            for row in matched:
                row.update(copy.deepcopy(self._payload))
            return FakeResponse([copy.deepcopy(row) for row in matched])

        if self._op == "delete":
            self._db.tables[self._table] = [row for row in rows if not self._matches(row)]
            return FakeResponse([copy.deepcopy(row) for row in matched])

        if self._order:
            column, desc = self._order
            matched = sorted(matched, key=lambda row: str(row.get(column)), reverse=desc)
        if self._limit is not None:
            matched = matched[: self._limit]
        return FakeResponse([self._project(row) for row in matched], count=len(matched))


class FakeSupabase:
    """Stands in for supabase.Client in tests."""

    UNIQUE = {"users": ("email",)}

    def __init__(self):
        self.tables: dict[str, list[dict[str, Any]]] = defaultdict(list)
        self.queries: list[tuple[str, str]] = []
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def next_timestamp(self) -> str:
        self._clock += timedelta(seconds=1)
        return self._clock.isoformat()

    def check_unique(self, table: str, row: dict[str, Any]) -> None:
        for column in self.UNIQUE.get(table, ()):
            if any(existing.get(column) == row.get(column) for existing in self.tables[table]):
                raise FakeAPIError(f"duplicate key value violates unique constraint on {table}.{column}")

    def count(self, table: str) -> int:
        return len(self.tables[table])
