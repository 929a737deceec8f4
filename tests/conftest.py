"""Shared fixtures for label template tests."""

import pytest

from labelarr.core import ColumnMeta


@pytest.fixture
def sales_column() -> ColumnMeta:
    """Numeric metric column keyed by its aggregate label."""
    return ColumnMeta(
        label="SUM(sell_in)",
        key="SUM(sell_in)",
        data_type="NUMERIC",
        is_numeric=True,
        is_metric=True,
    )


@pytest.fixture
def sales_rows() -> list[dict]:
    """Three rows with values 10, 999, 50 for SUM(sell_in)."""
    return [
        {"jefe_marca": "Ana", "SUM(sell_in)": 10},
        {"jefe_marca": "Luis", "SUM(sell_in)": 999},
        {"jefe_marca": "Marta", "SUM(sell_in)": 50},
    ]


@pytest.fixture
def text_column() -> ColumnMeta:
    """Non-numeric dimension column."""
    return ColumnMeta(label="jefe_marca", key="jefe_marca", data_type="STRING")
