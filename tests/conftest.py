"""Shared pytest fixtures for all tests."""

import sqlite3
from contextlib import contextmanager
from pathlib import Path

import pytest

from config import Config, get_migrations_dir
from db.manager import enforce_deadline, prepare_connection
from models.category import Category
from models.item import Item
from repositories.analytics import AnalyticsRepository
from repositories.categories import CategoryRepository
from repositories.items import ItemRepository
from services.base import Services
from tests.helpers import run_migrations, utc


@pytest.fixture
def test_db():
    """Create an in-memory SQLite database for testing.

    Yields:
        sqlite3.Connection: Connection to in-memory database.
    """
    conn = prepare_connection(sqlite3.connect(":memory:"))
    yield conn
    conn.close()


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary database.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "sales-tracker",
        db_data_dir=tmp_path / "sales-tracker" / "db",
        db_filename="test.db",
        log_level="DEBUG",
        log_dir=tmp_path / "sales-tracker" / "logs",
        busy_timeout=1.0,
        query_timeout=0,
    )


class TestDatabaseManager:
    """Database manager that hands out one shared in-memory connection."""

    __test__ = False

    def __init__(self, conn):
        self.conn = conn

    @contextmanager
    def connect(self, deadline=None):
        """Yield the shared connection without closing it."""
        with enforce_deadline(self.conn, deadline):
            yield self.conn

    def get_db_path(self):
        """Return a fake path for the test database."""
        return Path(":memory:")

    def get_migrations_dir(self):
        """Get the migrations directory path."""
        return get_migrations_dir()


@pytest.fixture
def db_manager_with_schema(test_db):
    """Create a database manager with schema already set up.

    Args:
        test_db: In-memory database connection fixture.

    Returns:
        TestDatabaseManager: Database manager with schema ready.
    """
    run_migrations(test_db, get_migrations_dir())
    return TestDatabaseManager(test_db)


@pytest.fixture
def services(test_config, db_manager_with_schema):
    """Create a Services container with test database.

    Args:
        test_config: Test configuration fixture.
        db_manager_with_schema: Database manager with schema set up.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, db_manager=db_manager_with_schema)


@pytest.fixture
def category_repository(db_manager_with_schema):
    return CategoryRepository(db_manager_with_schema)


@pytest.fixture
def item_repository(db_manager_with_schema):
    return ItemRepository(db_manager_with_schema)


@pytest.fixture
def analytics_repository(db_manager_with_schema):
    return AnalyticsRepository(db_manager_with_schema)


@pytest.fixture
def make_item(category_repository, item_repository):
    """Factory inserting an item, creating its category on first use.

    Returns:
        Callable taking item fields as keywords and returning the new item ID.
    """
    category_ids = {}

    def _make_item(
        amount=10.0,
        *,
        category="Groceries",
        type="expense",
        description="",
        transaction_date=None,
    ):
        if category not in category_ids:
            category_ids[category] = category_repository.create(
                Category(id=None, name=category)
            )
        return item_repository.create(
            Item(
                id=None,
                category_id=category_ids[category],
                type=type,
                amount=amount,
                description=description,
                transaction_date=transaction_date or utc(2024, 1, 15),
            )
        )

    _make_item.category_ids = category_ids
    return _make_item
