"""Aggregate queries over items."""

from typing import Optional

from deadline import Deadline
from db.query import aggregate
from models.filter import ItemFilter
from repositories.base import Repository, storage_errors


class AnalyticsRepository(Repository):
    """Computes scalar aggregates of item amounts under a filter.

    Every aggregate of an empty match set is 0; the store's NULL is
    coalesced in the query itself.
    """

    def _scalar(
        self,
        name: str,
        item_filter: Optional[ItemFilter],
        deadline: Optional[Deadline],
    ):
        query = aggregate(name, item_filter)
        with storage_errors(f"repository.analytics.{name}", "items"):
            with self.db_manager.connect(deadline) as conn:
                row = conn.execute(query.sql, query.params).fetchone()
            return row[0]

    def sum(
        self,
        item_filter: Optional[ItemFilter] = None,
        *,
        deadline: Optional[Deadline] = None,
    ) -> float:
        return float(self._scalar("sum", item_filter, deadline))

    def average(
        self,
        item_filter: Optional[ItemFilter] = None,
        *,
        deadline: Optional[Deadline] = None,
    ) -> float:
        return float(self._scalar("average", item_filter, deadline))

    def count(
        self,
        item_filter: Optional[ItemFilter] = None,
        *,
        deadline: Optional[Deadline] = None,
    ) -> int:
        return int(self._scalar("count", item_filter, deadline))

    def median(
        self,
        item_filter: Optional[ItemFilter] = None,
        *,
        deadline: Optional[Deadline] = None,
    ) -> float:
        """Median amount, interpolated between the two middle values."""
        return float(self._scalar("median", item_filter, deadline))

    def percentile_90(
        self,
        item_filter: Optional[ItemFilter] = None,
        *,
        deadline: Optional[Deadline] = None,
    ) -> float:
        """90th percentile amount, linearly interpolated."""
        return float(self._scalar("percentile_90", item_filter, deadline))
