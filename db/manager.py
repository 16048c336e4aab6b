"""Database manager for SQLite connections and path management."""

import sqlite3
from contextlib import contextmanager
from typing import Optional

from config import Config, get_migrations_dir
from db.functions import register_functions
from deadline import Deadline

# SQLite virtual machine steps between deadline checks
PROGRESS_INTERVAL = 1000


def prepare_connection(conn: sqlite3.Connection) -> sqlite3.Connection:
    """Apply per-connection settings every connection needs.

    Enables foreign key enforcement and registers application SQL functions.
    """
    conn.execute("PRAGMA foreign_keys = ON")
    register_functions(conn)
    return conn


@contextmanager
def enforce_deadline(conn: sqlite3.Connection, deadline: Optional[Deadline]):
    """Interrupt statements on ``conn`` once ``deadline`` expires or is cancelled.

    An interrupted statement is rolled back together with the open transaction,
    so no partial writes survive.

    Args:
        conn: Connection to guard.
        deadline: Deadline to enforce; None leaves the connection unbounded.

    Yields:
        sqlite3.Connection: The same connection.

    Raises:
        DeadlineExceededError: If the deadline passed before or during the block.
        OperationCancelledError: If the deadline was cancelled.
    """
    if deadline is None:
        yield conn
        return

    deadline.check()
    conn.set_progress_handler(deadline.interrupted, PROGRESS_INTERVAL)
    try:
        yield conn
    except sqlite3.OperationalError as e:
        if not deadline.interrupted():
            raise
        conn.rollback()
        raise deadline.error() from e
    finally:
        conn.set_progress_handler(None, 0)


class DatabaseManager:
    """Manages database connections and paths.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        self.config = config

    def default_deadline(self) -> Optional[Deadline]:
        """Deadline applied when a caller does not supply one."""
        if self.config.query_timeout:
            return Deadline.after(self.config.query_timeout)
        return None

    def busy_timeout(self, deadline: Optional[Deadline]) -> float:
        """Seconds to wait on a locked database, never past ``deadline``."""
        remaining = deadline.remaining() if deadline is not None else None
        if remaining is None:
            return self.config.busy_timeout
        return min(self.config.busy_timeout, remaining)

    @contextmanager
    def connect(self, deadline: Optional[Deadline] = None):
        """Get a database connection with automatic cleanup.

        Args:
            deadline: Optional bound on the work done with the connection.
                      Defaults to the configured query timeout.

        Yields:
            sqlite3.Connection: Database connection.
        """
        if deadline is None:
            deadline = self.default_deadline()
        else:
            deadline.check()

        db_path = self.config.db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = prepare_connection(
            sqlite3.connect(db_path, timeout=self.busy_timeout(deadline))
        )
        try:
            with enforce_deadline(conn, deadline):
                yield conn
        finally:
            conn.close()

    def get_db_path(self):
        """Get the current database path.

        Returns:
            Path: Path to the database file.
        """
        return self.config.db_path

    def get_migrations_dir(self):
        """Get the migrations directory path.

        Returns:
            Path: Path to the migrations directory.
        """
        return get_migrations_dir()
