import os
import sqlite3
from typing import Optional

from .config import settings


def get_db_path() -> str:
    return os.path.join(settings.DB_DIR, settings.DB_FILE)


def get_db_connection(db_path: Optional[str] = None):
    """Establishes a connection to the SQLite database."""
    conn = sqlite3.connect(db_path or get_db_path())
    conn.row_factory = sqlite3.Row
    return conn


def create_storage_table(db_path: Optional[str] = None):
    """Creates the key/value storage table if it doesn't exist."""
    conn = get_db_connection(db_path)
    with conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS storage (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
            );
        """
        )
    conn.close()


def init_db(db_path: Optional[str] = None):
    """Initializes the database and creates necessary tables."""
    db_dir = os.path.dirname(db_path or get_db_path())
    if db_dir and not os.path.exists(db_dir):
        os.makedirs(db_dir)
    create_storage_table(db_path)


def read_value(key: str, db_path: Optional[str] = None) -> Optional[str]:
    """Returns the raw value stored under ``key``, or None when absent."""
    conn = get_db_connection(db_path)
    try:
        row = conn.execute("SELECT value FROM storage WHERE key = ?", (key,)).fetchone()
    finally:
        conn.close()
    return row["value"] if row else None


def write_value(key: str, value: str, db_path: Optional[str] = None):
    """Overwrites whatever is stored under ``key``."""
    conn = get_db_connection(db_path)
    with conn:
        conn.execute(
            "INSERT OR REPLACE INTO storage (key, value, updated_at) "
            "VALUES (?, ?, CURRENT_TIMESTAMP)",
            (key, value),
        )
    conn.close()
