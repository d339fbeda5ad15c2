from __future__ import annotations

import contextlib
import sqlite3
from pathlib import Path
from typing import Iterator, Protocol

KV_TABLE = "kv_store"


class StoreError(RuntimeError):
    """Raised when the backing store cannot be read or written."""


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryKeyValueStore:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})
        self.available = True
        self.read_only = False

    def _check(self, *, write: bool = False) -> None:
        if not self.available:
            raise StoreError("store is not available")
        if write and self.read_only:
            raise StoreError("store is read-only")

    def get(self, key: str) -> str | None:
        self._check()
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._check(write=True)
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._check(write=True)
        self._data.pop(key, None)


class SqliteKeyValueStore:
    """One row per key in a single table; every call opens its own connection."""

    def __init__(self, db_path: str | Path) -> None:
        self.db_path = Path(db_path)

    @contextlib.contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        try:
            con = sqlite3.connect(self.db_path)
        except sqlite3.Error as exc:
            raise StoreError(f"Failed to open {self.db_path}: {exc}") from exc
        try:
            con.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {KV_TABLE} (
                  key TEXT PRIMARY KEY,
                  value TEXT NOT NULL,
                  updated_at TEXT NOT NULL
                )
                """
            )
            yield con
            con.commit()
        except sqlite3.Error as exc:
            con.rollback()
            raise StoreError(f"Store operation failed on {self.db_path}: {exc}") from exc
        finally:
            con.close()

    def get(self, key: str) -> str | None:
        with self._connect() as con:
            row = con.execute(f"SELECT value FROM {KV_TABLE} WHERE key = ?", (key,)).fetchone()
        return str(row[0]) if row else None

    def set(self, key: str, value: str) -> None:
        with self._connect() as con:
            con.execute(
                f"""
                INSERT INTO {KV_TABLE} (key, value, updated_at)
                VALUES (?, ?, datetime('now'))
                ON CONFLICT(key) DO UPDATE SET
                  value = excluded.value,
                  updated_at = excluded.updated_at
                """,
                (key, value),
            )

    def remove(self, key: str) -> None:
        with self._connect() as con:
            con.execute(f"DELETE FROM {KV_TABLE} WHERE key = ?", (key,))

    def keys(self) -> list[str]:
        with self._connect() as con:
            rows = con.execute(f"SELECT key FROM {KV_TABLE} ORDER BY key ASC").fetchall()
        return [str(r[0]) for r in rows]
