"""Filter model shared by item listing and analytics."""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ItemFilter:
    """Optional predicates constraining which items an operation sees.

    Each attribute is independent; None means "no constraint on this
    dimension". Present predicates are combined with AND.

    Attributes:
        date_from: Inclusive lower bound on the transaction date.
        date_to: Inclusive upper bound on the transaction date.
        category_id: Exact category match.
        type: Exact type tag match.
    """

    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    category_id: Optional[int] = None
    type: Optional[str] = None

    def is_empty(self) -> bool:
        """True when no predicate is present, i.e. every item matches."""
        return all(getattr(self, f.name) is None for f in fields(self))
