"""Variable registry.

Built-in template variables register themselves with @register_variable.
Registration order is the order keys appear in a built context, and the
registry's names are reserved: auxiliary values can never shadow them.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from labelarr.templates.context import ColumnData, Value

# Returns the variable's Value, or None to leave it out of the context
Extractor = Callable[[ColumnData], Value | None]


class Category(Enum):
    """Variable categories for documentation and the variables endpoint."""

    IDENTITY = "identity"
    ROWS = "rows"
    STATISTICS = "statistics"
    METRICS = "metrics"


@dataclass(frozen=True)
class VariableDefinition:
    """A registered built-in variable."""

    name: str
    category: Category
    description: str
    extractor: Extractor


class VariableRegistry:
    """Holds all built-in variable definitions."""

    def __init__(self):
        self._variables: dict[str, VariableDefinition] = {}

    def register(self, definition: VariableDefinition) -> None:
        if definition.name in self._variables:
            raise ValueError(f"Variable '{definition.name}' is already registered")
        self._variables[definition.name] = definition

    def get(self, name: str) -> VariableDefinition | None:
        return self._variables.get(name)

    def all_variables(self) -> list[VariableDefinition]:
        return list(self._variables.values())

    def by_category(self) -> dict[Category, list[VariableDefinition]]:
        grouped: dict[Category, list[VariableDefinition]] = {}
        for definition in self._variables.values():
            grouped.setdefault(definition.category, []).append(definition)
        return grouped

    def is_reserved(self, name: str) -> bool:
        return name in self._variables

    def __len__(self) -> int:
        return len(self._variables)


_registry = VariableRegistry()


def get_registry() -> VariableRegistry:
    """Get the global variable registry."""
    return _registry


def register_variable(
    name: str,
    category: Category,
    description: str,
) -> Callable[[Extractor], Extractor]:
    """Decorator registering an extractor as a built-in variable."""

    def decorator(func: Extractor) -> Extractor:
        _registry.register(
            VariableDefinition(
                name=name,
                category=category,
                description=description,
                extractor=func,
            )
        )
        return func

    return decorator
