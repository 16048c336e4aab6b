"""Shared plumbing for repositories: store error classification."""

import sqlite3
from contextlib import contextmanager
from typing import Callable, Optional

from errors import (
    AlreadyExistsError,
    InvalidInputError,
    SalesTrackerError,
    StorageError,
)
from logger import get_logger

logger = get_logger()


@contextmanager
def storage_errors(
    op: str,
    entity: str,
    on_foreign_key: Optional[Callable[[], SalesTrackerError]] = None,
):
    """Translate store failures raised inside the block into the error taxonomy.

    Args:
        op: Operation name used as error context, e.g. ``"repository.items.create"``.
        entity: Entity name used in messages, e.g. ``"category"``.
        on_foreign_key: Builds the error for a foreign key violation. Defaults
                        to StorageError.

    Raises:
        AlreadyExistsError: On a uniqueness violation.
        InvalidInputError: On a CHECK or NOT NULL violation.
        SalesTrackerError: Errors already classified below, with ``op`` added.
        StorageError: On any other store failure.
    """
    try:
        yield
    except SalesTrackerError as e:
        raise e.with_context(op) from e
    except sqlite3.IntegrityError as e:
        raise _classify_integrity_error(e, entity, on_foreign_key).with_context(op) from e
    except sqlite3.Error as e:
        logger.error(f"{op}: store failure: {e}")
        raise StorageError(f"{entity} store failure: {e}", (op,)) from e


def _classify_integrity_error(
    error: sqlite3.IntegrityError,
    entity: str,
    on_foreign_key: Optional[Callable[[], SalesTrackerError]],
) -> SalesTrackerError:
    message = str(error)
    if message.startswith("UNIQUE constraint failed"):
        return AlreadyExistsError(f"{entity} already exists")
    if message.startswith("FOREIGN KEY constraint failed"):
        if on_foreign_key is not None:
            return on_foreign_key()
        logger.error(f"{entity}: foreign key violation: {message}")
        return StorageError(f"{entity} is still referenced")
    if message.startswith(("CHECK constraint failed", "NOT NULL constraint failed")):
        logger.debug(f"{entity}: constraint violation: {message}")
        return InvalidInputError(f"invalid {entity}")
    logger.error(f"{entity}: integrity failure: {message}")
    return StorageError(f"integrity failure for {entity}")


class Repository:
    """Base class holding the database manager.

    Args:
        db_manager: Database manager whose ``connect(deadline)`` yields connections.
    """

    def __init__(self, db_manager):
        self.db_manager = db_manager
