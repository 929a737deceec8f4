"""Context builder for template rendering.

Assembles a LabelContext from column metadata, result rows and values
computed upstream. This is the bridge between the query layer and the
template engine.
"""

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal
from typing import Any

from labelarr.config import Config
from labelarr.core import ColumnMeta, Row
from labelarr.templates.context import ColumnData, ColumnStats, LabelContext, to_value
from labelarr.templates.variables import VariableRegistry, get_registry


def _numeric(value: Any) -> int | float | None:
    """Return value as a number if it is a usable numeric cell, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return None if math.isnan(value) else value
    if isinstance(value, Decimal):
        return None if value.is_nan() else float(value)
    return None


def compute_column_stats(rows: Iterable[Row], key: str) -> ColumnStats | None:
    """Aggregate the column's non-null numeric cells.

    Returns None when no such cell exists; callers must not default to zero.
    """
    numbers = []
    for row in rows:
        if not isinstance(row, Mapping):
            continue
        number = _numeric(row.get(key))
        if number is not None:
            numbers.append(number)

    if not numbers:
        return None

    total = sum(numbers)
    return ColumnStats(
        sum=total,
        avg=total / len(numbers),
        min=min(numbers),
        max=max(numbers),
        count=len(numbers),
    )


class ContextBuilder:
    """Builds a LabelContext for one column.

    Usage:
        builder = ContextBuilder()
        context = builder.build(
            column=ColumnMeta(label="SUM(sell_in)", key="SUM(sell_in)", is_numeric=True),
            rows=rows,
            aux_values={"MAX(anio_id)": 2024},
        )
        # Use context with TemplateResolver
    """

    def __init__(
        self,
        registry: VariableRegistry | None = None,
        logger: logging.Logger | None = None,
    ):
        self._registry = registry if registry is not None else get_registry()
        self._logger = logger or logging.getLogger(__name__)

    def build(
        self,
        column: ColumnMeta,
        rows: Sequence[Row] | None = None,
        aux_values: Mapping[str, Any] | None = None,
        metrics: Sequence[str] | None = None,
        include_metrics: bool | None = None,
    ) -> LabelContext:
        """Build the flat context for a column.

        Args:
            column: Descriptor of the column being labelled
            rows: Every row of the current result set
            aux_values: Values computed upstream but not displayed as columns
            metrics: Active metric identifiers
            include_metrics: Expose metrics/metric_count (default Config.INCLUDE_METRICS)

        Returns:
            LabelContext with built-in variables first, then auxiliary values
        """
        rows = list(rows or [])
        if include_metrics is None:
            include_metrics = Config.INCLUDE_METRICS

        data = ColumnData(
            column=column,
            rows=rows,
            stats=compute_column_stats(rows, column.key),
            metrics=[str(m) for m in (metrics or [])],
            include_metrics=include_metrics,
        )

        values: dict[str, Any] = {}
        for definition in self._registry.all_variables():
            try:
                value = definition.extractor(data)
            except Exception as e:
                self._logger.warning(f"Failed to extract variable '{definition.name}': {e}")
                continue
            if value is not None:
                values[definition.name] = value

        if aux_values:
            self._merge_aux_values(values, aux_values)

        return LabelContext(values)

    def _merge_aux_values(self, values: dict[str, Any], aux_values: Mapping[str, Any]) -> None:
        """Add auxiliary values; built-in names are reserved and win."""
        for name, raw in aux_values.items():
            name = str(name)
            if self._registry.is_reserved(name):
                self._logger.debug(f"Ignoring auxiliary value '{name}': reserved variable name")
                continue
            values[name] = to_value(raw)


def build_context_for_column(
    column: ColumnMeta,
    rows: Sequence[Row] | None = None,
    aux_values: Mapping[str, Any] | None = None,
    metrics: Sequence[str] | None = None,
    include_metrics: bool | None = None,
) -> LabelContext:
    """Convenience function to build context for a single column."""
    return ContextBuilder().build(column, rows, aux_values, metrics, include_metrics)
