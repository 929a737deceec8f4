"""Template variables module.

Importing this module registers all built-in variables via decorators.
Each variable file defines extractors decorated with @register_variable.
"""

from labelarr.templates.variables import (  # noqa: F401 - side effect imports
    identity,
    rows,
    statistics,
    metrics,
)
from labelarr.templates.variables.registry import (
    Category,
    VariableDefinition,
    VariableRegistry,
    get_registry,
    register_variable,
)

__all__ = [
    "Category",
    "VariableDefinition",
    "VariableRegistry",
    "get_registry",
    "register_variable",
]
