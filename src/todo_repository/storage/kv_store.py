# src/todo_repository/storage/kv_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import threading
import time
from pathlib import Path

from ..core.errors import RepositoryError

logger = logging.getLogger(__name__)


class SQLiteKeyValueStore:
    """
    SQLite key-value store.

    One table, one row per key:
    - key is the primary key
    - value is an opaque BLOB
    - set() is an upsert, delete() of a missing key does nothing

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "store.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        try:
            total = self.count()
        except RepositoryError:
            total = -1
        logger.info("SQLiteKeyValueStore ready db=%s keys=%s", self._db_path, total)

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        except sqlite3.Error as exc:
            raise RepositoryError.storage_unavailable(exc) from exc
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value BLOB NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )
            conn.commit()
        except sqlite3.Error as exc:
            raise RepositoryError.storage_unavailable(exc) from exc
        finally:
            conn.close()

    # ---- public API ----

    def count(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM kv").fetchone()
            return int(n)
        except sqlite3.Error as exc:
            raise RepositoryError.storage_unavailable(exc) from exc
        finally:
            conn.close()

    def get(self, key: str) -> bytes | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
            return bytes(row[0]) if row else None
        except sqlite3.Error as exc:
            raise RepositoryError.storage_unavailable(exc, key=key) from exc
        finally:
            conn.close()

    def set(self, key: str, value: bytes) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO kv(key, value, updated_at)
                VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, sqlite3.Binary(value), time.time()),
            )
            conn.commit()
            logger.debug("kv set key=%s bytes=%s", key, len(value))
        except sqlite3.Error as exc:
            raise RepositoryError.storage_unavailable(exc, key=key) from exc
        finally:
            conn.close()

    def delete(self, key: str) -> None:
        conn = self._get_conn()
        try:
            cur = conn.execute("DELETE FROM kv WHERE key = ?", (key,))
            conn.commit()
            logger.debug("kv delete key=%s removed=%s", key, cur.rowcount)
        except sqlite3.Error as exc:
            raise RepositoryError.storage_unavailable(exc, key=key) from exc
        finally:
            conn.close()

    def enumerate(self) -> list[tuple[str, bytes]]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT key, value FROM kv ORDER BY key ASC").fetchall()
            return [(str(k), bytes(v)) for k, v in rows]
        except sqlite3.Error as exc:
            raise RepositoryError.storage_unavailable(exc) from exc
        finally:
            conn.close()


class MemoryKeyValueStore:
    """Process-local dict store. Nothing survives the process."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._data: dict[str, bytes] = dict(initial or {})
        self._lock = threading.Lock()

    def count(self) -> int:
        with self._lock:
            return len(self._data)

    def get(self, key: str) -> bytes | None:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        with self._lock:
            self._data[key] = bytes(value)

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def enumerate(self) -> list[tuple[str, bytes]]:
        with self._lock:
            return list(self._data.items())
