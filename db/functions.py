"""Application-defined SQL functions registered on every connection."""

import math
import sqlite3
from typing import List, Optional, Sequence


def percentile_cont(values: Sequence[float], fraction: float) -> float:
    """Continuous percentile of ``values``.

    Interpolates linearly between the two order statistics around position
    ``fraction * (n - 1)``, matching PERCENTILE_CONT ... WITHIN GROUP in SQL.

    Args:
        values: Non-empty sequence of numbers, in any order.
        fraction: Percentile as a fraction in [0, 1] (0.5 is the median).

    Returns:
        The interpolated percentile.

    Raises:
        ValueError: If ``values`` is empty or ``fraction`` is out of range.
    """
    if not values:
        raise ValueError("percentile_cont of an empty sequence")
    if not 0.0 <= fraction <= 1.0:
        raise ValueError(f"fraction must be between 0 and 1, got {fraction}")

    ordered = sorted(values)
    position = fraction * (len(ordered) - 1)
    lower = math.floor(position)
    upper = math.ceil(position)
    if lower == upper:
        return float(ordered[lower])
    weight = position - lower
    return ordered[lower] + (ordered[upper] - ordered[lower]) * weight


class PercentileCont:
    """SQLite aggregate: ``percentile_cont(value, fraction)``.

    NULL values are skipped. An empty group yields NULL so that callers can
    COALESCE it, like the built-in aggregates.
    """

    def __init__(self):
        self.values: List[float] = []
        self.fraction: Optional[float] = None

    def step(self, value, fraction):
        if value is None:
            return
        self.values.append(float(value))
        self.fraction = float(fraction)

    def finalize(self):
        if not self.values:
            return None
        return percentile_cont(self.values, self.fraction)


def register_functions(conn: sqlite3.Connection) -> None:
    """Register the application's SQL functions on ``conn``."""
    conn.create_aggregate("percentile_cont", 2, PercentileCont)
