"""Column name utilities.

Turns raw field identifiers into display fragments:
    "SUM(sell_in)" -> "Total Sell In"
    "anio_id"      -> "Año"
    "region"       -> "region"   (unknown identifiers pass through)
"""

import re

# Known field identifiers
# Key: raw identifier as it appears in the dataset
# Value: human-readable label
COLUMN_LABELS = {
    "jefe_marca": "Jefe Marca",
    "sell_in": "Sell In",
    "anio_id": "Año",
    "mes_id": "Mes",
    "fecha": "Fecha",
}

# Aggregate function -> prefix word
AGGREGATE_PREFIXES = {
    "SUM": "Total",
    "COUNT": "Cantidad",
    "AVG": "Promedio",
    "MAX": "Máximo",
    "MIN": "Mínimo",
}

_AGGREGATE_PATTERN = re.compile(r"^(SUM|COUNT|AVG|MAX|MIN)\((.*)\)$", re.IGNORECASE)


def split_aggregate(name: str) -> tuple[str, str] | None:
    """Split "FUNC(field)" into ("FUNC", "field"), FUNC uppercased.

    Returns None when the identifier is not aggregate-wrapped.
    """
    match = _AGGREGATE_PATTERN.match(name)
    if not match:
        return None
    return match.group(1).upper(), match.group(2)


def transform_column_name(name: str) -> str:
    """Convert a raw column identifier to a friendly label."""
    parts = split_aggregate(name)
    if parts:
        func, field = parts
        return f"{AGGREGATE_PREFIXES[func]} {COLUMN_LABELS.get(field, field)}"
    return COLUMN_LABELS.get(name, name)
