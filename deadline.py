"""Caller-supplied time bounds for store calls."""

import threading
import time
from typing import Optional

from errors import DeadlineExceededError, OperationCancelledError


class Deadline:
    """A time bound and/or cancellation signal for a single operation.

    The deadline is checked before a statement runs and polled while it runs,
    so a long aggregate is interrupted rather than allowed to finish late.

    Args:
        expires_at: Absolute ``time.monotonic()`` value, or None for no time limit.
        cancel_event: Optional event; setting it cancels the operation.
    """

    def __init__(
        self,
        expires_at: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None,
    ):
        self.expires_at = expires_at
        self.cancel_event = cancel_event

    @classmethod
    def after(
        cls, seconds: float, cancel_event: Optional[threading.Event] = None
    ) -> "Deadline":
        """Create a deadline that expires ``seconds`` from now."""
        return cls(time.monotonic() + seconds, cancel_event)

    def remaining(self) -> Optional[float]:
        """Seconds left before expiry (never negative), or None if unbounded."""
        if self.expires_at is None:
            return None
        return max(0.0, self.expires_at - time.monotonic())

    def expired(self) -> bool:
        return self.expires_at is not None and time.monotonic() >= self.expires_at

    def cancelled(self) -> bool:
        return self.cancel_event is not None and self.cancel_event.is_set()

    def interrupted(self) -> bool:
        """True once the operation should stop for either reason."""
        return self.cancelled() or self.expired()

    def error(self) -> OperationCancelledError:
        """Build the error describing why the operation stopped."""
        if self.cancelled():
            return OperationCancelledError("operation cancelled")
        return DeadlineExceededError("deadline exceeded")

    def check(self) -> None:
        """Raise if the deadline has already passed or was cancelled."""
        if self.interrupted():
            raise self.error()
