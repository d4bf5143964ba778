"""Key-value storage for the JSON collections (employees, sectors, schedule...)."""
from __future__ import annotations

import copy
import json
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Protocol

SCHEMA_PATH = Path(__file__).resolve().parent.parent / "migrations" / "schema.sql"

EMPLOYEES = "employees"
SECTORS = "sectors"
MACHINES = "machines"
CHECKLISTS = "checklists"
SCHEDULE = "schedule"
AUDITS = "audits"

COLLECTIONS = (EMPLOYEES, SECTORS, MACHINES, CHECKLISTS, SCHEDULE, AUDITS)


class DatabaseError(RuntimeError):
    """Raised when the SQLite layer encounters an unexpected error."""


class Repository(Protocol):
    def load(self, key: str, default: Any = None) -> Any: ...

    def save(self, key: str, data: Any) -> None: ...

    def has(self, key: str) -> bool: ...


class SqliteRepository:
    def __init__(self, path: str | Path = "lpa.sqlite") -> None:
        self.path = Path(path)
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.path)

    def _ensure_schema(self) -> None:
        try:
            with self._connect() as conn:
                conn.executescript(SCHEMA_PATH.read_text(encoding="utf-8"))
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def load(self, key: str, default: Any = None) -> Any:
        try:
            with self._connect() as conn:
                row = conn.execute("SELECT payload_json FROM collections WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        if not row or not row[0]:
            return copy.deepcopy(default)
        return json.loads(row[0])

    def save(self, key: str, data: Any) -> None:
        blob = json.dumps(data, ensure_ascii=False)
        now = datetime.now(timezone.utc).isoformat()
        try:
            with self._connect() as conn:
                conn.execute(
                    "INSERT INTO collections(key, payload_json, updated_at) VALUES (?, ?, ?) "
                    "ON CONFLICT(key) DO UPDATE SET payload_json=excluded.payload_json, updated_at=excluded.updated_at",
                    (key, blob, now),
                )
                conn.commit()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def has(self, key: str) -> bool:
        try:
            with self._connect() as conn:
                row = conn.execute("SELECT 1 FROM collections WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        return row is not None


class InMemoryRepository:
    """Same interface as :class:`SqliteRepository`, kept in a dict."""

    def __init__(self, initial: Dict[str, Any] | None = None) -> None:
        self._data: Dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.save(key, value)

    def load(self, key: str, default: Any = None) -> Any:
        blob = self._data.get(key)
        if not blob:
            return copy.deepcopy(default)
        return json.loads(blob)

    def save(self, key: str, data: Any) -> None:
        # stored as JSON text, same as the SQLite payload
        self._data[key] = json.dumps(data, ensure_ascii=False)

    def has(self, key: str) -> bool:
        return key in self._data
