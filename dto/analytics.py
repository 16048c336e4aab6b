from pydantic import BaseModel


class AnalyticsSummary(BaseModel):
    """All five aggregates computed over the same filter."""

    sum: float
    average: float
    count: int
    median: float
    percentile_90: float
