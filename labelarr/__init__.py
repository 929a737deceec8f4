"""Labelarr - dynamic column labels from user-authored templates.

Renders templates such as:
    "{% if key.startswith('SUM') %}Total{% else %}{{column_name}}{% endif %}"
against a context built from column metadata, result rows and auxiliary values.
"""

import logging

from labelarr.config import VERSION
from labelarr.core import ColumnMeta
from labelarr.templates import (
    ContextBuilder,
    LabelContext,
    TemplateResolver,
    generate_column_label,
    render,
    render_column_label,
)

# Library logging stays silent until the host application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = VERSION

__all__ = [
    "ColumnMeta",
    "ContextBuilder",
    "LabelContext",
    "TemplateResolver",
    "generate_column_label",
    "render",
    "render_column_label",
]
