"""Tests for ContextBuilder."""

import logging

import pytest

from labelarr.config import Config
from labelarr.core import ColumnMeta
from labelarr.templates.context import (
    ABSENT,
    BoolValue,
    ListValue,
    NumberValue,
    RecordValue,
    TextValue,
)
from labelarr.templates.context_builder import ContextBuilder, compute_column_stats
from labelarr.templates.variables import (
    Category,
    VariableDefinition,
    VariableRegistry,
    get_registry,
)

STAT_KEYS = ("sum", "avg", "min", "max", "count")


@pytest.fixture
def builder() -> ContextBuilder:
    return ContextBuilder()


# =============================================================================
# IDENTITY AND ROWS
# =============================================================================


class TestIdentityVariables:
    """Test variables taken from the column descriptor."""

    def test_names(self, builder, sales_column, sales_rows):
        ctx = builder.build(sales_column, sales_rows)
        assert ctx["column_name"] == TextValue("Total Sell In")
        assert ctx["original_label"] == TextValue("SUM(sell_in)")
        assert ctx["key"] == TextValue("SUM(sell_in)")
        assert ctx["data_type"] == TextValue("NUMERIC")

    def test_flags(self, builder, sales_column, sales_rows):
        ctx = builder.build(sales_column, sales_rows)
        assert ctx["is_metric"] == BoolValue(True)
        assert ctx["is_percent_metric"] == BoolValue(False)
        assert ctx["is_numeric"] == BoolValue(True)

    def test_unknown_data_type_is_absent(self, builder):
        ctx = builder.build(ColumnMeta.for_label("region"))
        assert ctx["data_type"] is ABSENT

    def test_builtins_come_first(self, builder, sales_column):
        ctx = builder.build(sales_column, [], aux_values={"extra": 1})
        names = list(ctx)
        assert names[:3] == ["column_name", "original_label", "key"]
        assert names[-1] == "extra"


class TestRowVariables:
    """Test row-derived variables."""

    def test_counts_and_edges(self, builder, sales_column, sales_rows):
        ctx = builder.build(sales_column, sales_rows)
        assert ctx["row_count"] == NumberValue(3)
        assert ctx["first_row"] == RecordValue(sales_rows[0])
        assert ctx["last_row"] == RecordValue(sales_rows[-1])
        assert ctx["first_value"] == NumberValue(10)
        assert ctx["last_value"] == NumberValue(50)

    def test_no_rows(self, builder, sales_column):
        """Edge rows default to an empty record, never absent."""
        ctx = builder.build(sales_column, [])
        assert ctx["row_count"] == NumberValue(0)
        assert ctx["first_row"] == RecordValue({})
        assert ctx["last_row"] == RecordValue({})
        assert ctx["first_value"] is ABSENT
        assert ctx["last_value"] is ABSENT

    def test_rows_none(self, builder, sales_column):
        ctx = builder.build(sales_column, None)
        assert ctx["row_count"] == NumberValue(0)

    def test_non_mapping_row_tolerated(self, builder, sales_column):
        ctx = builder.build(sales_column, [None, {"SUM(sell_in)": 4}])
        assert ctx["first_row"] == RecordValue({})
        assert ctx["first_value"] is ABSENT
        assert ctx["count"] == NumberValue(1)


# =============================================================================
# STATISTICS
# =============================================================================


class TestStatistics:
    """Test per-column statistics."""

    def test_range(self, builder, sales_column, sales_rows):
        ctx = builder.build(sales_column, sales_rows)
        assert ctx["min"] == NumberValue(10)
        assert ctx["max"] == NumberValue(999)
        assert ctx["sum"] == NumberValue(1059)
        assert ctx["count"] == NumberValue(3)
        assert ctx["avg"] == NumberValue(353.0)

    def test_no_numeric_values_omits_stats(self, builder, text_column):
        rows = [{"jefe_marca": "Ana"}, {"jefe_marca": None}]
        ctx = builder.build(text_column, rows)
        for name in STAT_KEYS:
            assert name not in ctx

    def test_nulls_bools_and_text_skipped(self):
        rows = [{"k": None}, {"k": 5}, {"k": True}, {"k": "7"}, {"k": float("nan")}]
        stats = compute_column_stats(rows, "k")
        assert stats.count == 1
        assert stats.sum == 5

    def test_only_own_column(self):
        rows = [{"k": 1, "other": 100}, {"other": 200}]
        stats = compute_column_stats(rows, "k")
        assert stats.max == 1
        assert stats.count == 1

    def test_empty(self):
        assert compute_column_stats([], "k") is None


# =============================================================================
# AUXILIARY VALUES AND METRICS
# =============================================================================


class TestAuxValues:
    """Test merging externally computed values."""

    def test_merged_into_namespace(self, builder, sales_column, sales_rows):
        ctx = builder.build(sales_column, sales_rows, aux_values={"MAX(anio_id)": 2024})
        assert ctx["MAX(anio_id)"] == NumberValue(2024)

    def test_builtins_win_collisions(self, builder, sales_column, sales_rows):
        ctx = builder.build(
            sales_column,
            sales_rows,
            aux_values={"row_count": 99, "column_name": "Other"},
        )
        assert ctx["row_count"] == NumberValue(3)
        assert ctx["column_name"] == TextValue("Total Sell In")

    def test_reserved_even_when_builtin_omitted(self, builder, text_column):
        """An aux 'sum' never fills in for missing statistics."""
        ctx = builder.build(text_column, [], aux_values={"sum": 5})
        assert "sum" not in ctx

    def test_collision_logged(self, sales_column, caplog):
        builder = ContextBuilder(logger=logging.getLogger("tests.builder"))
        with caplog.at_level(logging.DEBUG, logger="tests.builder"):
            builder.build(sales_column, [], aux_values={"key": "x"})
        assert "reserved" in caplog.text


class TestMetrics:
    """Test metric variables."""

    def test_included(self, builder, sales_column):
        ctx = builder.build(sales_column, [], metrics=["SUM(sell_in)", "COUNT(*)"], include_metrics=True)
        assert ctx["metrics"] == ListValue(("SUM(sell_in)", "COUNT(*)"))
        assert ctx["metric_count"] == NumberValue(2)

    def test_excluded(self, builder, sales_column):
        ctx = builder.build(sales_column, [], metrics=["a"], include_metrics=False)
        assert "metrics" not in ctx
        assert "metric_count" not in ctx

    def test_default_from_config(self, builder, sales_column, monkeypatch):
        monkeypatch.setattr(Config, "INCLUDE_METRICS", True)
        ctx = builder.build(sales_column, [])
        assert ctx["metric_count"] == NumberValue(0)


class TestExtractorFailure:
    """A failing extractor drops its variable instead of breaking the build."""

    def test_failing_extractor_skipped(self, sales_column):
        def boom(data):
            raise RuntimeError("boom")

        registry = VariableRegistry()
        registry.register(VariableDefinition("broken", Category.ROWS, "Always fails", boom))
        registry.register(get_registry().get("row_count"))

        ctx = ContextBuilder(registry=registry).build(sales_column, [{"SUM(sell_in)": 1}])
        assert "broken" not in ctx
        assert ctx["row_count"] == NumberValue(1)
