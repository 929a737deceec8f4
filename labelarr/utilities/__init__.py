"""Utilities - column names, text escaping, logging."""

from labelarr.utilities.logging import setup_logging
from labelarr.utilities.names import transform_column_name
from labelarr.utilities.text import escape_html

__all__ = [
    "escape_html",
    "setup_logging",
    "transform_column_name",
]
