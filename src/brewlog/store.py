"""SQLite-backed storage handle for BrewLog.

The store owns exactly one connection. Every read and write goes through
``Store.connection()``, which holds a single exclusive lock for the whole
unit of work, so callers never interleave on the shared handle.
"""

import logging
import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from .errors import DatabaseError
from .schema import create_tables

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"


class Store:
    """Owns the embedded database connection and serializes access to it."""

    def __init__(self, db_path: Path | str | None = None):
        """Initialize an unopened store.

        Args:
            db_path: Path to the SQLite database file. None or ":memory:"
                selects a non-durable, process-local in-memory database.
        """
        if db_path is None or str(db_path) == MEMORY_DATABASE:
            self.db_path = None
        else:
            self.db_path = Path(db_path)
        self._lock = threading.Lock()
        self._conn: sqlite3.Connection | None = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    @property
    def is_durable(self) -> bool:
        return self.db_path is not None

    def _ensure_directories(self) -> None:
        """Create the database's parent directory if it doesn't exist."""
        if self.db_path is not None:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def open(self) -> "Store":
        """Connect and create both tables if absent.

        Raises:
            DatabaseError: If the store is already open or the engine fails
        """
        with self._lock:
            if self._conn is not None:
                raise DatabaseError("Store is already open")

            target = str(self.db_path) if self.db_path is not None else MEMORY_DATABASE
            try:
                self._ensure_directories()
                conn = sqlite3.connect(target, check_same_thread=False)
            except (OSError, sqlite3.Error) as e:
                raise DatabaseError(f"Cannot open database at {target}: {e}") from e

            conn.row_factory = sqlite3.Row
            try:
                create_tables(conn)
            except sqlite3.Error as e:
                conn.close()
                raise DatabaseError(f"Cannot create schema: {e}") from e

            self._conn = conn

        logger.info("Opened %s database at %s", "durable" if self.is_durable else "in-memory", target)
        return self

    def close(self) -> None:
        """Close the connection. Safe to call on a closed store."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Hold the lock and yield the connection for one unit of work.

        Commits on success and rolls back on any exception. The lock is
        released on every exit path.

        Raises:
            DatabaseError: If the store is not open or the engine fails
        """
        with self._lock:
            if self._conn is None:
                raise DatabaseError("Store is not open")
            conn = self._conn
            try:
                yield conn
                conn.commit()
            except sqlite3.Error as e:
                conn.rollback()
                raise DatabaseError(str(e)) from e
            except Exception:
                conn.rollback()
                raise
