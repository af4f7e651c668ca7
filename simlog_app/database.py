# simlog_app/database.py
import logging
import os
import sqlite3
from typing import Dict, Iterable, Optional

from simlog_app import config

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
)
"""


def get_db(db_path: Optional[str] = None):
    """
    Open a connection to the key-value database, creating the table on first use.
    """
    db_path = str(db_path or config.DB_PATH)
    parent = os.path.dirname(os.path.abspath(db_path))
    os.makedirs(parent, exist_ok=True)

    conn = sqlite3.connect(db_path)
    conn.execute(SCHEMA_SQL)
    return conn


class KeyValueStore:
    """Whole-value get/set of text entries, one row per key."""

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = str(db_path or config.DB_PATH)
        logger.info("Using database path: %s", os.path.abspath(self.db_path))

    def get(self, key: str) -> Optional[str]:
        conn = get_db(self.db_path)
        try:
            row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        finally:
            conn.close()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        self.set_many({key: value})

    def set_many(self, items: Dict[str, str]) -> None:
        # All entries land in one transaction
        conn = get_db(self.db_path)
        try:
            with conn:
                conn.executemany(
                    "INSERT INTO kv_store (key, value) VALUES (?, ?) "
                    "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                    list(items.items()),
                )
        finally:
            conn.close()

    def delete(self, keys: Iterable[str]) -> None:
        conn = get_db(self.db_path)
        try:
            with conn:
                conn.executemany("DELETE FROM kv_store WHERE key = ?", [(k,) for k in keys])
        finally:
            conn.close()
