"""Analytics service: aggregates of item amounts."""

from typing import Optional

from deadline import Deadline
from dto.analytics import AnalyticsSummary
from errors import error_context
from models.filter import ItemFilter


class AnalyticsService:
    """Service exposing the five aggregates over filtered items.

    Args:
        repository: AnalyticsRepository (or a stand-in with the same methods).
    """

    def __init__(self, repository):
        self.repository = repository

    def sum(
        self,
        item_filter: Optional[ItemFilter] = None,
        *,
        deadline: Optional[Deadline] = None,
    ) -> float:
        with error_context("service.analytics.sum"):
            return self.repository.sum(item_filter, deadline=deadline)

    def average(
        self,
        item_filter: Optional[ItemFilter] = None,
        *,
        deadline: Optional[Deadline] = None,
    ) -> float:
        with error_context("service.analytics.average"):
            return self.repository.average(item_filter, deadline=deadline)

    def count(
        self,
        item_filter: Optional[ItemFilter] = None,
        *,
        deadline: Optional[Deadline] = None,
    ) -> int:
        with error_context("service.analytics.count"):
            return self.repository.count(item_filter, deadline=deadline)

    def median(
        self,
        item_filter: Optional[ItemFilter] = None,
        *,
        deadline: Optional[Deadline] = None,
    ) -> float:
        with error_context("service.analytics.median"):
            return self.repository.median(item_filter, deadline=deadline)

    def percentile_90(
        self,
        item_filter: Optional[ItemFilter] = None,
        *,
        deadline: Optional[Deadline] = None,
    ) -> float:
        with error_context("service.analytics.percentile_90"):
            return self.repository.percentile_90(item_filter, deadline=deadline)

    def summary(
        self,
        item_filter: Optional[ItemFilter] = None,
        *,
        deadline: Optional[Deadline] = None,
    ) -> AnalyticsSummary:
        """Compute all five aggregates over the same filter.

        Each aggregate is a separate store call; writes landing in between
        may make the values mutually inconsistent.
        """
        with error_context("service.analytics.summary"):
            return AnalyticsSummary(
                sum=self.repository.sum(item_filter, deadline=deadline),
                average=self.repository.average(item_filter, deadline=deadline),
                count=self.repository.count(item_filter, deadline=deadline),
                median=self.repository.median(item_filter, deadline=deadline),
                percentile_90=self.repository.percentile_90(
                    item_filter, deadline=deadline
                ),
            )
