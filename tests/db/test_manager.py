"""Tests for DatabaseManager and deadline enforcement."""

import threading
import time
from dataclasses import replace

import pytest

from db.manager import DatabaseManager
from deadline import Deadline
from errors import DeadlineExceededError, OperationCancelledError

# Counts far enough that it only finishes if nothing interrupts it
SLOW_QUERY = """
    WITH RECURSIVE counter(x) AS (
        SELECT 1 UNION ALL SELECT x + 1 FROM counter WHERE x < 500000000
    )
    SELECT COUNT(*) FROM counter
"""


@pytest.fixture
def db_manager(test_config):
    return DatabaseManager(test_config)


class TestDatabaseManager:
    """Tests for DatabaseManager.connect."""

    def test_connect_creates_database_file(self, db_manager, test_config):
        with db_manager.connect() as conn:
            conn.execute("CREATE TABLE t (v INTEGER)")
            conn.commit()

        assert test_config.db_path.exists()
        assert db_manager.get_db_path() == test_config.db_path

    def test_connection_enforces_foreign_keys(self, db_manager):
        with db_manager.connect() as conn:
            (enabled,) = conn.execute("PRAGMA foreign_keys").fetchone()

        assert enabled == 1

    def test_connection_has_percentile_function(self, db_manager):
        with db_manager.connect() as conn:
            (value,) = conn.execute(
                "SELECT percentile_cont(v, 0.5) FROM (SELECT 1 AS v UNION ALL SELECT 3)"
            ).fetchone()

        assert value == 2.0

    def test_no_default_deadline_when_timeout_disabled(self, db_manager):
        assert db_manager.default_deadline() is None

    def test_default_deadline_from_config(self, test_config):
        manager = DatabaseManager(replace(test_config, query_timeout=12.0))

        deadline = manager.default_deadline()

        assert deadline is not None
        assert 0 < deadline.remaining() <= 12.0

    def test_busy_timeout_without_deadline(self, db_manager, test_config):
        assert db_manager.busy_timeout(None) == test_config.busy_timeout
        assert db_manager.busy_timeout(Deadline()) == test_config.busy_timeout

    def test_busy_timeout_capped_by_deadline(self, db_manager):
        assert db_manager.busy_timeout(Deadline.after(0.25)) <= 0.25

    def test_busy_timeout_keeps_config_when_deadline_is_later(self, db_manager):
        assert db_manager.busy_timeout(Deadline.after(60)) == 1.0


class TestDeadlines:
    """Tests for caller-supplied deadlines on connections."""

    def test_expired_deadline_fails_before_running(self, db_manager):
        expired = Deadline(expires_at=time.monotonic() - 1)

        with pytest.raises(DeadlineExceededError):
            with db_manager.connect(expired) as conn:
                conn.execute("SELECT 1")

    def test_cancelled_deadline_fails_before_running(self, db_manager):
        event = threading.Event()
        event.set()

        with pytest.raises(OperationCancelledError) as exc_info:
            with db_manager.connect(Deadline(cancel_event=event)):
                pass

        assert not isinstance(exc_info.value, DeadlineExceededError)

    def test_slow_query_is_interrupted(self, db_manager):
        started = time.monotonic()

        with pytest.raises(DeadlineExceededError):
            with db_manager.connect(Deadline.after(0.05)) as conn:
                conn.execute(SLOW_QUERY).fetchone()

        assert time.monotonic() - started < 5

    def test_interrupted_write_leaves_no_rows(self, db_manager):
        with db_manager.connect() as conn:
            conn.execute("CREATE TABLE t (v INTEGER)")
            conn.commit()

        with pytest.raises(DeadlineExceededError):
            with db_manager.connect(Deadline.after(0.05)) as conn:
                conn.execute(
                    """
                    WITH RECURSIVE counter(x) AS (
                        SELECT 1 UNION ALL SELECT x + 1 FROM counter WHERE x < 500000000
                    )
                    INSERT INTO t (v) SELECT x FROM counter
                    """
                )
                conn.commit()

        with db_manager.connect() as conn:
            (count,) = conn.execute("SELECT COUNT(*) FROM t").fetchone()

        assert count == 0

    def test_handler_removed_after_block(self, db_manager_with_schema):
        """The shared test connection keeps working once a deadline has fired."""
        with pytest.raises(DeadlineExceededError):
            with db_manager_with_schema.connect(Deadline.after(0.05)) as conn:
                conn.execute(SLOW_QUERY).fetchone()

        with db_manager_with_schema.connect() as conn:
            (value,) = conn.execute("SELECT 1").fetchone()

        assert value == 1


class TestDeadline:
    """Tests for the Deadline value itself."""

    def test_unbounded_deadline_never_expires(self):
        deadline = Deadline()

        assert deadline.remaining() is None
        assert not deadline.interrupted()
        deadline.check()

    def test_after_sets_remaining(self):
        deadline = Deadline.after(60)

        assert 59 < deadline.remaining() <= 60
        assert not deadline.expired()

    def test_error_kind_depends_on_reason(self):
        event = threading.Event()
        deadline = Deadline(expires_at=time.monotonic() - 1, cancel_event=event)

        assert isinstance(deadline.error(), DeadlineExceededError)

        event.set()
        error = deadline.error()
        assert isinstance(error, OperationCancelledError)
        assert not isinstance(error, DeadlineExceededError)
