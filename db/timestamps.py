"""Timestamp encoding between Python values and the store's text columns.

Timestamps are stored as fixed-width UTC text so that string comparison in
SQL matches chronological order.
"""

from datetime import date, datetime, time, timezone
from typing import Optional, Union

_STORE_FORMAT_SEP = " "
_STORE_TIMESPEC = "microseconds"


def to_db_timestamp(value: Union[date, datetime]) -> str:
    """Encode a date or datetime as UTC store text.

    Naive datetimes are taken as UTC. A plain date means midnight UTC.

    Args:
        value: The date or datetime to encode.

    Returns:
        Text of the form ``YYYY-MM-DD HH:MM:SS.ffffff``.
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(sep=_STORE_FORMAT_SEP, timespec=_STORE_TIMESPEC)


def from_db_timestamp(text: Optional[str]) -> Optional[datetime]:
    """Decode store text (ours or SQLite's CURRENT_TIMESTAMP) into an aware UTC datetime."""
    if text is None:
        return None
    return datetime.fromisoformat(text).replace(tzinfo=timezone.utc)
