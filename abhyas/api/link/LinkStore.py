"""Link store public API."""

import sqlite3
from collections.abc import Iterable
from typing import Any

from ...logging_config import get_logger
from ..config.DatabaseConfig import DatabaseConfig
from ._open_connection import _open_connection
from .errors import (
    DuplicateLinkError,
    InvalidLinkError,
    LinkNotFoundError,
    QueryFailedError,
)
from .Link import Link
from .LinkStatus import LinkStatus
from .StatusCounts import StatusCounts

logger = get_logger("link.store")

_DUPLICATE_ERROR_NAMES = {"SQLITE_CONSTRAINT_PRIMARYKEY", "SQLITE_CONSTRAINT_UNIQUE"}

# Filters per status, consistent with LinkStatus.from_flags
_STATUS_WHERE: dict[LinkStatus, str] = {
    LinkStatus.SOLVED: "is_solved = 1",
    LinkStatus.SKIPPED: "is_skipped = 1 AND is_solved = 0",
    LinkStatus.INCOMPLETE: "is_solved = 0 AND is_skipped = 0",
}


def _row_to_link(row: sqlite3.Row) -> Link:
    return Link(
        url=row["link"],
        solved_count=row["solved_count"],
        status=LinkStatus.from_flags(row["is_solved"], row["is_skipped"]),
    )


class LinkStore:
    """Owns the links table and every read and write against it.

    Use as a context manager; the connection stays open until the block exits.
    Each operation runs a single statement in autocommit mode.

    Example:
        ```python
        with LinkStore(config.database) as store:
            store.add_link("https://example.com/problem/1")
            link = store.next_incomplete()
        ```
    """

    def __init__(self, database_config: DatabaseConfig):
        self.database_config = database_config
        self._conn: sqlite3.Connection | None = None

    def __enter__(self) -> "LinkStore":
        path = self.database_config.path
        self._conn = _open_connection(path, self.database_config.timeout_secs)
        logger.debug("Opened link store at %s", path)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._conn is not None:
            self._conn.close()
            self._conn = None
        return False

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("Link store not opened. Use as context manager first.")
        return self._conn

    def _execute(self, sql: str, params: tuple[Any, ...] = ()) -> sqlite3.Cursor:
        try:
            return self.conn.execute(sql, params)
        except sqlite3.Error as e:
            raise QueryFailedError(f"Statement failed: {e}") from e

    def _select_links(self, where: str | None = None) -> list[Link]:
        sql = "SELECT link, solved_count, is_solved, is_skipped FROM links"
        if where:
            sql += f" WHERE {where}"
        sql += " ORDER BY rowid"
        return [_row_to_link(row) for row in self._execute(sql).fetchall()]

    # Writes

    def add_link(self, url: str) -> Link:
        """Insert a new incomplete link with a zero solved count.

        Raises:
            InvalidLinkError: If ``url`` is empty or only whitespace
            DuplicateLinkError: If ``url`` is already tracked
        """
        if not url or not url.strip():
            raise InvalidLinkError("Link must not be empty")
        try:
            self.conn.execute(
                "INSERT INTO links (link, solved_count, is_solved, is_skipped) VALUES (?, 0, 0, 0)",
                (url,),
            )
        except sqlite3.IntegrityError as e:
            if getattr(e, "sqlite_errorname", None) in _DUPLICATE_ERROR_NAMES:
                raise DuplicateLinkError(url) from e
            raise QueryFailedError(f"Failed to insert link: {e}") from e
        except sqlite3.Error as e:
            raise QueryFailedError(f"Failed to insert link: {e}") from e
        logger.debug("Added link %s", url)
        return Link(url=url)

    def delete_link(self, url: str) -> bool:
        """Delete a link. Returns False when there was nothing to delete."""
        cursor = self._execute("DELETE FROM links WHERE link = ?", (url,))
        logger.debug("Deleted link %s (%d row(s))", url, cursor.rowcount)
        return cursor.rowcount > 0

    def _transition(self, url: str, status: LinkStatus, increment: bool) -> Link:
        is_solved, is_skipped = status.flags
        sql = "UPDATE links SET is_solved = ?, is_skipped = ?"
        if increment:
            sql += ", solved_count = solved_count + 1"
        sql += " WHERE link = ?"
        cursor = self._execute(sql, (is_solved, is_skipped, url))
        if cursor.rowcount == 0:
            raise LinkNotFoundError(url)
        logger.debug("Moved link %s to %s", url, status.value)
        return self.get_link(url)

    def mark_complete(self, url: str) -> Link:
        """Mark a link solved and add one to its solved count.

        Raises:
            LinkNotFoundError: If ``url`` is not tracked
        """
        return self._transition(url, LinkStatus.SOLVED, increment=True)

    def skip_link(self, url: str) -> Link:
        """Mark a link skipped.

        Raises:
            LinkNotFoundError: If ``url`` is not tracked
        """
        return self._transition(url, LinkStatus.SKIPPED, increment=False)

    def reset_skipped(self) -> int:
        """Move every skipped link back to incomplete. Returns the number moved."""
        cursor = self._execute(f"UPDATE links SET is_skipped = 0 WHERE {_STATUS_WHERE[LinkStatus.SKIPPED]}")
        logger.debug("Reset %d skipped link(s)", cursor.rowcount)
        return cursor.rowcount

    def reset_completed(self) -> int:
        """Move every solved link back to incomplete. Solved counts are kept."""
        cursor = self._execute("UPDATE links SET is_solved = 0, is_skipped = 0 WHERE is_solved = 1")
        logger.debug("Reset %d completed link(s)", cursor.rowcount)
        return cursor.rowcount

    def bulk_import(self, urls: Iterable[str]) -> int:
        """Insert every url not already tracked and return how many were inserted.

        Rows are inserted one by one; duplicates (against the table or earlier
        entries of ``urls``) and blank entries are skipped without error.
        """
        rows = [(url,) for url in urls if url and url.strip()]
        if not rows:
            return 0
        before = self.conn.total_changes
        try:
            self.conn.executemany(
                "INSERT OR IGNORE INTO links (link, solved_count, is_solved, is_skipped) VALUES (?, 0, 0, 0)",
                rows,
            )
        except sqlite3.Error as e:
            raise QueryFailedError(f"Failed to import links: {e}") from e
        inserted = self.conn.total_changes - before
        logger.debug("Imported %d of %d link(s)", inserted, len(rows))
        return inserted

    # Reads

    def get_link(self, url: str) -> Link:
        """Fetch a single link.

        Raises:
            LinkNotFoundError: If ``url`` is not tracked
        """
        row = self._execute(
            "SELECT link, solved_count, is_solved, is_skipped FROM links WHERE link = ?", (url,)
        ).fetchone()
        if row is None:
            raise LinkNotFoundError(url)
        return _row_to_link(row)

    def lookup_count(self, url: str) -> int:
        """Solved count of a link.

        Raises:
            LinkNotFoundError: If ``url`` is not tracked
        """
        row = self._execute("SELECT solved_count FROM links WHERE link = ?", (url,)).fetchone()
        if row is None:
            raise LinkNotFoundError(url)
        return row["solved_count"]

    def next_incomplete(self) -> Link | None:
        """First incomplete link in storage order, or None when every link is solved or skipped."""
        row = self._execute(
            f"SELECT link, solved_count, is_solved, is_skipped FROM links "
            f"WHERE {_STATUS_WHERE[LinkStatus.INCOMPLETE]} ORDER BY rowid LIMIT 1"
        ).fetchone()
        return _row_to_link(row) if row is not None else None

    def list_urls(self) -> list[str]:
        return [row["link"] for row in self._execute("SELECT link FROM links ORDER BY rowid").fetchall()]

    def list_all(self) -> list[Link]:
        return self._select_links()

    def list_by_status(self, status: LinkStatus) -> list[Link]:
        return self._select_links(_STATUS_WHERE[LinkStatus(status)])

    def status(self) -> StatusCounts:
        """Total, completed and skipped counts computed in one pass."""
        row = self._execute(
            f"""
            SELECT
                COUNT(*) AS total,
                COALESCE(SUM(CASE WHEN {_STATUS_WHERE[LinkStatus.SOLVED]} THEN 1 ELSE 0 END), 0) AS completed,
                COALESCE(SUM(CASE WHEN {_STATUS_WHERE[LinkStatus.SKIPPED]} THEN 1 ELSE 0 END), 0) AS skipped
            FROM links
            """
        ).fetchone()
        return StatusCounts(total=row["total"], completed=row["completed"], skipped=row["skipped"])
