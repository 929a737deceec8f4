"""Identity variables: column names, key, type flags.

These come straight from the column descriptor and are always present.
"""

from labelarr.templates.context import BoolValue, ColumnData, TextValue, Value, to_value
from labelarr.templates.variables.registry import Category, register_variable
from labelarr.utilities.names import transform_column_name


@register_variable(
    name="column_name",
    category=Category.IDENTITY,
    description="Friendly column label (e.g., 'SUM(sell_in)' -> 'Total Sell In')",
)
def extract_column_name(data: ColumnData) -> Value:
    return TextValue(transform_column_name(data.column.label))


@register_variable(
    name="original_label",
    category=Category.IDENTITY,
    description="Column label exactly as configured",
)
def extract_original_label(data: ColumnData) -> Value:
    return TextValue(data.column.label)


@register_variable(
    name="key",
    category=Category.IDENTITY,
    description="Internal column key used to read row cells",
)
def extract_key(data: ColumnData) -> Value:
    return TextValue(data.column.key)


@register_variable(
    name="data_type",
    category=Category.IDENTITY,
    description="Declared column type (e.g., 'NUMERIC', 'STRING'), empty if unknown",
)
def extract_data_type(data: ColumnData) -> Value:
    return to_value(data.column.data_type)


@register_variable(
    name="is_metric",
    category=Category.IDENTITY,
    description="Whether the column is a metric",
)
def extract_is_metric(data: ColumnData) -> Value:
    return BoolValue(data.column.is_metric)


@register_variable(
    name="is_percent_metric",
    category=Category.IDENTITY,
    description="Whether the column is a percent-of-total metric",
)
def extract_is_percent_metric(data: ColumnData) -> Value:
    return BoolValue(data.column.is_percent_metric)


@register_variable(
    name="is_numeric",
    category=Category.IDENTITY,
    description="Whether the column is declared numeric",
)
def extract_is_numeric(data: ColumnData) -> Value:
    return BoolValue(data.column.is_numeric)
