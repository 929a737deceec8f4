"""Metric variables, only present when metric inclusion is enabled."""

from labelarr.templates.context import ColumnData, ListValue, NumberValue, Value
from labelarr.templates.variables.registry import Category, register_variable


@register_variable(
    name="metrics",
    category=Category.METRICS,
    description="Active metric identifiers",
)
def extract_metrics(data: ColumnData) -> Value | None:
    if not data.include_metrics:
        return None
    return ListValue(tuple(data.metrics))


@register_variable(
    name="metric_count",
    category=Category.METRICS,
    description="Number of active metrics",
)
def extract_metric_count(data: ColumnData) -> Value | None:
    if not data.include_metrics:
        return None
    return NumberValue(len(data.metrics))
