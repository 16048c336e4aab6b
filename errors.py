"""Error taxonomy shared by the repository and service layers.

Every failure that leaves the repository is one of the classes below. Layers
above add operation context with :func:`error_context` but never invent new
kinds, so callers can branch on the class alone.
"""

from contextlib import contextmanager
from typing import Tuple


class SalesTrackerError(Exception):
    """Base class for classified failures.

    Attributes:
        message: Human-readable description of the failure.
        context: Operation names, outermost first.
    """

    kind = "error"

    def __init__(self, message: str, context: Tuple[str, ...] = ()):
        super().__init__(message)
        self.message = message
        self.context = tuple(context)

    def __str__(self) -> str:
        return ": ".join(self.context + (self.message,))

    def with_context(self, op: str) -> "SalesTrackerError":
        """Return a new error of the same kind with ``op`` prepended to its context."""
        return type(self)(self.message, (op,) + self.context)


class NotFoundError(SalesTrackerError):
    """Target entity is absent for a read, update or delete."""

    kind = "not_found"


class AlreadyExistsError(SalesTrackerError):
    """A uniqueness constraint was violated on create or update."""

    kind = "already_exists"


class InvalidInputError(SalesTrackerError):
    """Malformed filter or payload value."""

    kind = "invalid_input"


class StorageError(SalesTrackerError):
    """Unclassified failure from the store."""

    kind = "storage"


class OperationCancelledError(SalesTrackerError):
    """The caller cancelled the operation before it completed."""

    kind = "cancelled"


class DeadlineExceededError(OperationCancelledError):
    """The caller's deadline passed before the operation completed."""

    kind = "deadline_exceeded"


@contextmanager
def error_context(op: str):
    """Re-raise classified errors raised inside the block with ``op`` as context.

    Args:
        op: Operation name, e.g. ``"service.items.create"``.

    Raises:
        SalesTrackerError: Same kind as the original, chained to it.
    """
    try:
        yield
    except SalesTrackerError as e:
        raise e.with_context(op) from e
