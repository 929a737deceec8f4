"""Template context types.

A render call sees one flat LabelContext: variable name -> Value.
Values are a closed set of variants, each owning its display and
condition-text rules, so nothing downstream needs to probe raw Python types.

    Absent   - null/missing, displays as ""
    Bool     - "true" / "false"
    Number   - locale grouped for display ("1,234.5")
    Text     - as is
    Record   - one data row, compact JSON
    List     - compact JSON
"""

import json
import math
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from labelarr.core import ColumnMeta, Row


def _json_default(obj: Any) -> str:
    # Dates and times as ISO 8601, matching JavaScript JSON output
    if hasattr(obj, "isoformat"):
        return obj.isoformat()
    return str(obj)


def _compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_json_default)


def _format_grouped(number: int | float) -> str:
    """Format a number with thousands separators and at most 3 decimals."""
    if isinstance(number, int):
        return f"{number:,}"
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "∞" if number > 0 else "-∞"
    if number.is_integer():
        return f"{int(number):,}"
    return f"{number:,.3f}".rstrip("0").rstrip(".")


class Value:
    """Base class for context values."""

    def display(self) -> str:
        """Text substituted for a {{placeholder}}."""
        raise NotImplementedError

    def as_text(self) -> str:
        """Plain string form used by equality and prefix conditions."""
        return self.display()

    def is_truthy(self) -> bool:
        raise NotImplementedError

    @property
    def raw(self) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class Absent(Value):
    """Null or missing value."""

    def display(self) -> str:
        return ""

    def is_truthy(self) -> bool:
        return False

    @property
    def raw(self) -> None:
        return None


ABSENT = Absent()


@dataclass(frozen=True)
class BoolValue(Value):
    value: bool

    def display(self) -> str:
        return "true" if self.value else "false"

    def is_truthy(self) -> bool:
        return self.value

    @property
    def raw(self) -> bool:
        return self.value


@dataclass(frozen=True)
class NumberValue(Value):
    value: int | float

    def display(self) -> str:
        return _format_grouped(self.value)

    def as_text(self) -> str:
        number = self.value
        if isinstance(number, int):
            return str(number)
        if math.isnan(number):
            return "NaN"
        if math.isinf(number):
            return "Infinity" if number > 0 else "-Infinity"
        if number.is_integer():
            return str(int(number))
        return repr(number)

    def is_truthy(self) -> bool:
        return self.value != 0 and not math.isnan(self.value)

    @property
    def raw(self) -> int | float:
        return self.value


@dataclass(frozen=True)
class TextValue(Value):
    value: str

    def display(self) -> str:
        return self.value

    def is_truthy(self) -> bool:
        return self.value != ""

    @property
    def raw(self) -> str:
        return self.value


@dataclass(frozen=True)
class RecordValue(Value):
    """A single data row. Always truthy, even when empty."""

    value: Mapping[str, Any] = field(default_factory=dict)

    def display(self) -> str:
        return _compact_json(dict(self.value))

    def is_truthy(self) -> bool:
        return True

    @property
    def raw(self) -> Mapping[str, Any]:
        return self.value


@dataclass(frozen=True)
class ListValue(Value):
    """A list of records or scalars. Always truthy, even when empty."""

    value: tuple = ()

    def display(self) -> str:
        return _compact_json(list(self.value))

    def is_truthy(self) -> bool:
        return True

    @property
    def raw(self) -> list:
        return list(self.value)


def to_value(obj: Any) -> Value:
    """Wrap a raw Python object in its Value variant."""
    if isinstance(obj, Value):
        return obj
    if obj is None:
        return ABSENT
    # bool before number: bool is an int subclass
    if isinstance(obj, bool):
        return BoolValue(obj)
    if isinstance(obj, (int, float)):
        return NumberValue(obj)
    if isinstance(obj, Decimal):
        return NumberValue(float(obj))
    if isinstance(obj, str):
        return TextValue(obj)
    if isinstance(obj, Mapping):
        return RecordValue(obj)
    if isinstance(obj, Sequence) and not isinstance(obj, (bytes, bytearray)):
        return ListValue(tuple(obj))
    if isinstance(obj, (set, frozenset)):
        return ListValue(tuple(obj))
    return TextValue(str(obj))


class LabelContext(Mapping[str, Value]):
    """Flat named-value bag for a single render call.

    Accepts raw Python values and wraps each one on construction, so
    render(template, {"row_count": 0}) works the same as a built context.
    """

    def __init__(self, values: Mapping[str, Any] | None = None):
        self._values: dict[str, Value] = {}
        if values:
            for name, raw in values.items():
                self._values[str(name)] = to_value(raw)

    @classmethod
    def coerce(cls, values: "LabelContext | Mapping[str, Any] | None") -> "LabelContext":
        if isinstance(values, LabelContext):
            return values
        return cls(values)

    def __getitem__(self, name: str) -> Value:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"LabelContext({self._values!r})"

    def display_values(self) -> dict[str, str]:
        """All variables rendered as they would appear in a label."""
        return {name: value.display() for name, value in self._values.items()}


@dataclass(frozen=True)
class ColumnStats:
    """Aggregates over a column's non-null numeric cells."""

    sum: int | float
    avg: float
    min: int | float
    max: int | float
    count: int


@dataclass
class ColumnData:
    """Everything the built-in variable extractors read from.

    Built once per render call by ContextBuilder.
    """

    column: ColumnMeta
    rows: Sequence[Row]
    stats: ColumnStats | None = None  # None when the column has no numeric cells
    metrics: list[str] = field(default_factory=list)
    include_metrics: bool = False

    @property
    def first_row(self) -> Row:
        return _as_record(self.rows[0]) if self.rows else {}

    @property
    def last_row(self) -> Row:
        return _as_record(self.rows[-1]) if self.rows else {}


def _as_record(row: Any) -> Row:
    return row if isinstance(row, Mapping) else {}
