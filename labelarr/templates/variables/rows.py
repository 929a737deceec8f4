"""Row variables: counts and first/last rows of the result set."""

from collections.abc import Mapping
from typing import Any

from labelarr.core import Row
from labelarr.templates.context import (
    ABSENT,
    ColumnData,
    NumberValue,
    RecordValue,
    Value,
    to_value,
)
from labelarr.templates.variables.registry import Category, register_variable


def _cell(row: Row, key: str) -> Any:
    """Read a cell, tolerating rows that aren't mappings."""
    if isinstance(row, Mapping):
        return row.get(key)
    return None


@register_variable(
    name="row_count",
    category=Category.ROWS,
    description="Number of rows in the result set",
)
def extract_row_count(data: ColumnData) -> Value:
    return NumberValue(len(data.rows))


@register_variable(
    name="first_row",
    category=Category.ROWS,
    description="First row as a record (empty record when there are no rows)",
)
def extract_first_row(data: ColumnData) -> Value:
    return RecordValue(data.first_row)


@register_variable(
    name="last_row",
    category=Category.ROWS,
    description="Last row as a record (empty record when there are no rows)",
)
def extract_last_row(data: ColumnData) -> Value:
    return RecordValue(data.last_row)


@register_variable(
    name="first_value",
    category=Category.ROWS,
    description="This column's value in the first row",
)
def extract_first_value(data: ColumnData) -> Value:
    if not data.rows:
        return ABSENT
    return to_value(_cell(data.rows[0], data.column.key))


@register_variable(
    name="last_value",
    category=Category.ROWS,
    description="This column's value in the last row",
)
def extract_last_value(data: ColumnData) -> Value:
    if not data.rows:
        return ABSENT
    return to_value(_cell(data.rows[-1], data.column.key))
