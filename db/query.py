"""Filter-driven query construction for item listing and analytics.

An :class:`~models.filter.ItemFilter` is compiled into SQL conditions and
positional parameters in one place, then folded into a base statement. The
listing query and all five aggregates share the same compiled filter, so the
placeholder/parameter correspondence only has to hold here.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from db.timestamps import to_db_timestamp
from models.filter import ItemFilter

ITEM_COLUMNS = (
    "id, category_id, type, amount, description, created_at, transaction_date"
)

ITEM_SELECT = f"SELECT {ITEM_COLUMNS} FROM items"

# Newest business date first; id breaks ties between items on the same date
ITEM_ORDER_BY = "transaction_date DESC, id DESC"

AGGREGATES = {
    "sum": "SELECT COALESCE(SUM(amount), 0) FROM items",
    "average": "SELECT COALESCE(AVG(amount), 0) FROM items",
    "count": "SELECT COUNT(*) FROM items",
    "median": "SELECT COALESCE(percentile_cont(amount, 0.5), 0) FROM items",
    "percentile_90": "SELECT COALESCE(percentile_cont(amount, 0.9), 0) FROM items",
}


def _identity(value):
    return value


@dataclass(frozen=True)
class Predicate:
    """One optional filter dimension.

    Attributes:
        attribute: Name of the ItemFilter attribute holding the value.
        condition: SQL condition with exactly one ``?`` placeholder.
        encode: Converts the attribute value into the bound parameter.
    """

    attribute: str
    condition: str
    encode: Callable[[Any], Any] = _identity

    def resolve(self, item_filter: ItemFilter) -> Optional[Tuple[str, Any]]:
        """Return ``(condition, parameter)``, or None if the predicate is absent."""
        value = getattr(item_filter, self.attribute)
        if value is None:
            return None
        return self.condition, self.encode(value)


# Evaluation order is fixed; each present predicate takes the next placeholder
ITEM_PREDICATES = (
    Predicate("date_from", "transaction_date >= ?", to_db_timestamp),
    Predicate("date_to", "transaction_date <= ?", to_db_timestamp),
    Predicate("category_id", "category_id = ?"),
    Predicate("type", "type = ?"),
)


@dataclass(frozen=True)
class CompiledFilter:
    """Conditions and the parameters they bind, position for position."""

    conditions: Tuple[str, ...] = ()
    params: Tuple[Any, ...] = ()

    def where_clause(self) -> str:
        """Render ``WHERE c1 AND c2 ...``, or an empty string for no conditions."""
        if not self.conditions:
            return ""
        return "WHERE " + " AND ".join(self.conditions)


@dataclass(frozen=True)
class Query:
    """An executable statement plus its bound parameters."""

    sql: str
    params: Tuple[Any, ...] = ()


def compile_filter(item_filter: Optional[ItemFilter]) -> CompiledFilter:
    """Compile a filter into ordered conditions and parameters.

    Args:
        item_filter: Filter to compile. None behaves like an empty filter.

    Returns:
        CompiledFilter with one condition and one parameter per present
        predicate, in the order date_from, date_to, category_id, type.
    """
    if item_filter is None or item_filter.is_empty():
        return CompiledFilter()

    resolved = [p.resolve(item_filter) for p in ITEM_PREDICATES]
    present = [pair for pair in resolved if pair is not None]

    return CompiledFilter(
        conditions=tuple(condition for condition, _ in present),
        params=tuple(param for _, param in present),
    )


def assemble(
    base: str, compiled: CompiledFilter, order_by: Optional[str] = None
) -> Query:
    """Combine a base statement with a compiled filter.

    Args:
        base: Statement without WHERE or ORDER BY clauses.
        compiled: Output of :func:`compile_filter`.
        order_by: Optional ORDER BY expression.

    Returns:
        Query ready for ``conn.execute(query.sql, query.params)``.
    """
    parts = [base]
    where = compiled.where_clause()
    if where:
        parts.append(where)
    if order_by:
        parts.append(f"ORDER BY {order_by}")
    return Query(sql=" ".join(parts), params=compiled.params)


def select_items(item_filter: Optional[ItemFilter] = None) -> Query:
    """Build the item listing query, newest business date first."""
    return assemble(ITEM_SELECT, compile_filter(item_filter), order_by=ITEM_ORDER_BY)


def aggregate(name: str, item_filter: Optional[ItemFilter] = None) -> Query:
    """Build one of the aggregate queries over the filtered items.

    Args:
        name: One of ``sum``, ``average``, ``count``, ``median``, ``percentile_90``.
        item_filter: Filter restricting the aggregated items.

    Raises:
        ValueError: If ``name`` is not a known aggregate.
    """
    try:
        base = AGGREGATES[name]
    except KeyError:
        raise ValueError(f"Unknown aggregate: {name}") from None
    return assemble(base, compile_filter(item_filter))
