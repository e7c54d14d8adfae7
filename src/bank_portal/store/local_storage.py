"""SQLite-backed key/value store with localStorage semantics (string keys and values)."""

import sqlite3
from pathlib import Path
from typing import Optional

_SCHEMA = """
CREATE TABLE IF NOT EXISTS local_storage (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


class LocalStorage:
    """
    Single-device key/value storage in one SQLite file.
    Each write replaces the whole value; there is no cross-process coordination,
    so two sessions on the same file can overwrite each other's last write.
    """

    def __init__(self, db_path: str | Path = "bank_portal.db"):
        self._db_path = Path(db_path)
        self._ensure_schema()

    @property
    def path(self) -> Path:
        return self._db_path

    def _connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        with self._connection() as conn:
            conn.executescript(_SCHEMA)

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key is absent."""
        with self._connection() as conn:
            row = conn.execute("SELECT value FROM local_storage WHERE key = ?", (key,)).fetchone()
        return row["value"] if row else None

    def set_item(self, key: str, value: str) -> None:
        with self._connection() as conn:
            conn.execute(
                """
                INSERT INTO local_storage (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (key, value),
            )
            conn.commit()

    def remove_item(self, key: str) -> None:
        with self._connection() as conn:
            conn.execute("DELETE FROM local_storage WHERE key = ?", (key,))
            conn.commit()

    def keys(self) -> list[str]:
        with self._connection() as conn:
            rows = conn.execute("SELECT key FROM local_storage ORDER BY key").fetchall()
        return [r["key"] for r in rows]
