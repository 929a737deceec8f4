"""Core types."""

from labelarr.core.types import ColumnMeta, Row

__all__ = [
    "ColumnMeta",
    "Row",
]
