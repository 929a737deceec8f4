"""Statistics variables: aggregates over the column's numeric cells.

Only present when the column has at least one non-null numeric cell.
Otherwise the keys are left out entirely, so {{sum}} stays unresolved
rather than reading as 0.
"""

from labelarr.templates.context import ColumnData, NumberValue, Value
from labelarr.templates.variables.registry import Category, register_variable


@register_variable(
    name="sum",
    category=Category.STATISTICS,
    description="Sum of the column's numeric values",
)
def extract_sum(data: ColumnData) -> Value | None:
    return NumberValue(data.stats.sum) if data.stats else None


@register_variable(
    name="avg",
    category=Category.STATISTICS,
    description="Average of the column's numeric values",
)
def extract_avg(data: ColumnData) -> Value | None:
    return NumberValue(data.stats.avg) if data.stats else None


@register_variable(
    name="min",
    category=Category.STATISTICS,
    description="Smallest numeric value in the column",
)
def extract_min(data: ColumnData) -> Value | None:
    return NumberValue(data.stats.min) if data.stats else None


@register_variable(
    name="max",
    category=Category.STATISTICS,
    description="Largest numeric value in the column",
)
def extract_max(data: ColumnData) -> Value | None:
    return NumberValue(data.stats.max) if data.stats else None


@register_variable(
    name="count",
    category=Category.STATISTICS,
    description="Number of non-null numeric values in the column",
)
def extract_count(data: ColumnData) -> Value | None:
    return NumberValue(data.stats.count) if data.stats else None
