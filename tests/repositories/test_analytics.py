import pytest

from models.filter import ItemFilter
from tests.helpers import utc


class TestAnalyticsRepository:
    """Tests for AnalyticsRepository aggregates."""

    @pytest.fixture
    def amounts(self, make_item):
        for day, amount in enumerate([10.0, 20.0, 30.0, 40.0], start=1):
            make_item(amount, transaction_date=utc(2024, 1, day))

    @pytest.mark.parametrize(
        "method", ["sum", "average", "median", "percentile_90"]
    )
    def test_empty_store_returns_zero(self, analytics_repository, method):
        result = getattr(analytics_repository, method)(ItemFilter())

        assert result == 0
        assert isinstance(result, float)

    def test_count_empty_store_is_zero(self, analytics_repository):
        result = analytics_repository.count(ItemFilter())

        assert result == 0
        assert isinstance(result, int)

    @pytest.mark.parametrize(
        "method", ["sum", "average", "count", "median", "percentile_90"]
    )
    def test_no_matching_items_returns_zero(self, analytics_repository, amounts, method):
        result = getattr(analytics_repository, method)(ItemFilter(type="refund"))

        assert result == 0

    def test_sum(self, analytics_repository, amounts):
        assert analytics_repository.sum() == 100.0

    def test_average(self, analytics_repository, amounts):
        assert analytics_repository.average() == 25.0

    def test_count(self, analytics_repository, amounts):
        assert analytics_repository.count() == 4

    def test_median_interpolates(self, analytics_repository, amounts):
        assert analytics_repository.median(ItemFilter()) == 25.0

    def test_percentile_90_interpolates(self, analytics_repository, amounts):
        assert analytics_repository.percentile_90() == pytest.approx(37.0)

    def test_filter_applies_to_aggregates(self, analytics_repository, amounts):
        first_two_days = ItemFilter(date_from=utc(2024, 1, 1), date_to=utc(2024, 1, 2))

        assert analytics_repository.sum(first_two_days) == 30.0
        assert analytics_repository.count(first_two_days) == 2
        assert analytics_repository.median(first_two_days) == 15.0

    def test_negative_amounts(self, analytics_repository, make_item):
        make_item(-50.0)
        make_item(20.0)

        assert analytics_repository.sum() == -30.0
        assert analytics_repository.average() == -15.0
        assert analytics_repository.median() == -15.0

    def test_filters_by_category_and_type(self, analytics_repository, make_item):
        make_item(100.0, category="Sales", type="income")
        make_item(5.0, category="Sales", type="expense")
        make_item(70.0, category="Other", type="income")
        sales = make_item.category_ids["Sales"]

        only_sales_income = ItemFilter(category_id=sales, type="income")

        assert analytics_repository.sum(only_sales_income) == 100.0
        assert analytics_repository.count(only_sales_income) == 1
