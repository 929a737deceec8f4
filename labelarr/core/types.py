"""Core data types for Labelarr.

Column metadata arrives from the query layer; rows are plain mappings
keyed by column key. Use attribute access: column.label, column.key, etc.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

# One result-set row, keyed by column key
Row = Mapping[str, Any]


@dataclass(frozen=True)
class ColumnMeta:
    """Descriptor for the column whose label is being rendered."""

    label: str  # Display label as configured, e.g. "SUM(sell_in)"
    key: str  # Key used to read the column's cell from each row
    data_type: str | None = None  # "NUMERIC", "STRING", "TEMPORAL", ...
    is_numeric: bool = False
    is_metric: bool = False
    is_percent_metric: bool = False

    @classmethod
    def for_label(cls, label: str, **kwargs: Any) -> "ColumnMeta":
        """Build a descriptor whose row key is the label itself."""
        return cls(label=label, key=label, **kwargs)
