"""Helper utilities for tests."""

from datetime import datetime, timezone
from pathlib import Path
import sqlite3

from db.migrate import apply_pending


def run_migrations(conn: sqlite3.Connection, migrations_dir: Path) -> None:
    """Run all SQL migrations in order.

    Args:
        conn: SQLite connection to run migrations against.
        migrations_dir: Path to directory containing .sql migration files.
    """
    apply_pending(conn, migrations_dir)


def utc(year, month, day, hour=0, minute=0, second=0) -> datetime:
    """Shorthand for an aware UTC datetime."""
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
