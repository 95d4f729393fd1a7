"""Key-value persistence layer shared by every page."""

import copy
import json
import sqlite3
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator, Optional

import structlog

from ..errors import PersistenceError

logger = structlog.get_logger(__name__)


class KeyValueStore(ABC):
    """Repository interface injected into pages: JSON values addressed by key."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value for ``key`` or ``default`` when absent."""

    @abstractmethod
    def put(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove ``key``. Returns True if a value was removed."""

    @abstractmethod
    def keys(self) -> list[str]:
        """All stored keys, sorted."""

    def __contains__(self, key: str) -> bool:
        sentinel = object()
        return self.get(key, sentinel) is not sentinel

    @staticmethod
    def _encode(key: str, value: Any) -> str:
        try:
            return json.dumps(value)
        except (TypeError, ValueError) as e:
            raise PersistenceError(
                f"Value for '{key}' is not JSON serializable: {e}",
                operation="put",
                target=key
            ) from e


class InMemoryStore(KeyValueStore):
    """Dictionary-backed store; values are copied in and out like a real backend."""

    def __init__(self, initial: Optional[dict[str, Any]] = None):
        self._data: dict[str, str] = {}
        self._lock = threading.Lock()
        for key, value in (initial or {}).items():
            self.put(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            raw = self._data.get(key)
        if raw is None:
            return copy.deepcopy(default)
        return json.loads(raw)

    def put(self, key: str, value: Any) -> None:
        encoded = self._encode(key, value)
        with self._lock:
            self._data[key] = encoded

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._data.pop(key, None) is not None

    def keys(self) -> list[str]:
        with self._lock:
            return sorted(self._data)


class SqliteStore(KeyValueStore):
    """SQLite-based key-value persistence."""

    def __init__(self, db_path: str = "zenith.db"):
        self.db_path = Path(db_path)
        self.logger = logger.bind(db_path=str(self.db_path))
        self._lock = threading.Lock()

        self._init_database()

    def _init_database(self) -> None:
        """Initialize database schema."""
        if self.db_path.parent and not self.db_path.parent.exists():
            self.db_path.parent.mkdir(parents=True, exist_ok=True)

        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.commit()

    @contextmanager
    def _get_connection(self) -> Iterator[sqlite3.Connection]:
        """Get database connection with proper error handling."""
        conn = None
        try:
            conn = sqlite3.connect(self.db_path, timeout=30.0)
            conn.row_factory = sqlite3.Row
            yield conn
        except sqlite3.Error as e:
            if conn:
                conn.rollback()
            self.logger.error("Database error", error=str(e))
            raise PersistenceError(
                f"Database error: {e}",
                operation="connect",
                target=str(self.db_path)
            ) from e
        finally:
            if conn:
                conn.close()

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            with self._get_connection() as conn:
                row = conn.execute(
                    "SELECT value FROM kv_store WHERE key = ?", (key,)
                ).fetchone()

        if row is None:
            return copy.deepcopy(default)

        try:
            return json.loads(row["value"])
        except json.JSONDecodeError as e:
            self.logger.error("Corrupt stored value", key=key, error=str(e))
            raise PersistenceError(
                f"Stored value for '{key}' is not valid JSON",
                operation="get",
                target=key
            ) from e

    def put(self, key: str, value: Any) -> None:
        encoded = self._encode(key, value)
        now = datetime.now(timezone.utc).isoformat()

        with self._lock:
            with self._get_connection() as conn:
                conn.execute("""
                    INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                """, (key, encoded, now))
                conn.commit()

        self.logger.debug("Value stored", key=key, size=len(encoded))

    def delete(self, key: str) -> bool:
        with self._lock:
            with self._get_connection() as conn:
                cursor = conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
                conn.commit()
                removed = cursor.rowcount > 0

        if removed:
            self.logger.info("Value deleted", key=key)
        return removed

    def keys(self) -> list[str]:
        with self._lock:
            with self._get_connection() as conn:
                rows = conn.execute("SELECT key FROM kv_store ORDER BY key").fetchall()
        return [row["key"] for row in rows]


def create_store(backend: str = "sqlite", db_path: str = "zenith.db") -> KeyValueStore:
    """Build the configured store backend."""
    if backend == "memory":
        return InMemoryStore()
    if backend == "sqlite":
        return SqliteStore(db_path)
    raise PersistenceError(f"Unknown storage backend: {backend}", operation="create", target=backend)
