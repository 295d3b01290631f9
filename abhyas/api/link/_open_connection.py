"""Open the sqlite connection backing the link store."""

import sqlite3
from pathlib import Path

from .errors import StorageUnavailableError

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS links (
    link            TEXT PRIMARY KEY,
    solved_count    INTEGER NOT NULL,
    is_solved       INTEGER NOT NULL,
    is_skipped      INTEGER NOT NULL
)
"""


def _open_connection(path: Path, timeout_secs: float) -> sqlite3.Connection:
    """Create the database directory, file and table if missing and connect.

    The connection runs in autocommit mode: each statement is its own
    transaction.

    Raises:
        StorageUnavailableError: If the directory, file or schema cannot be set up
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageUnavailableError(f"Could not create database directory {path.parent}: {e}") from e

    try:
        conn = sqlite3.connect(path, timeout=timeout_secs, isolation_level=None)
    except sqlite3.Error as e:
        raise StorageUnavailableError(f"Could not open database {path}: {e}") from e

    try:
        conn.row_factory = sqlite3.Row
        conn.execute(_CREATE_TABLE)
    except sqlite3.Error as e:
        conn.close()
        raise StorageUnavailableError(f"Could not initialize database {path}: {e}") from e

    return conn
