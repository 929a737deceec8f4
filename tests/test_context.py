"""Tests for context value variants and LabelContext."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from labelarr.templates.context import (
    ABSENT,
    BoolValue,
    LabelContext,
    ListValue,
    NumberValue,
    RecordValue,
    TextValue,
    to_value,
)


# =============================================================================
# DISPLAY FORMATTING
# =============================================================================


class TestDisplay:
    """Test how each variant appears inside a rendered label."""

    @pytest.mark.parametrize(
        "number,expected",
        [
            (0, "0"),
            (1234, "1,234"),
            (-1234567, "-1,234,567"),
            (10.0, "10"),
            (0.5, "0.5"),
            (1234.5678, "1,234.568"),
            (353.0, "353"),
        ],
    )
    def test_number_grouped(self, number, expected):
        assert NumberValue(number).display() == expected

    def test_absent_is_empty(self):
        assert ABSENT.display() == ""

    def test_bool_lowercase(self):
        assert BoolValue(True).display() == "true"
        assert BoolValue(False).display() == "false"

    def test_record_compact_json(self):
        assert RecordValue({"a": 1, "b": "x"}).display() == '{"a":1,"b":"x"}'

    def test_record_dates_iso_format(self):
        record = RecordValue({"fecha": datetime(2024, 1, 1, 8, 30), "dia": date(2024, 1, 2)})
        assert record.display() == '{"fecha":"2024-01-01T08:30:00","dia":"2024-01-02"}'

    def test_list_compact_json(self):
        assert ListValue(("a", "b")).display() == '["a","b"]'

    def test_text_unchanged(self):
        assert TextValue("Ventas Ñ").display() == "Ventas Ñ"


class TestConditionText:
    """Test the plain string form used by conditions."""

    def test_number_not_grouped(self):
        assert NumberValue(1234).as_text() == "1234"

    def test_integral_float_drops_fraction(self):
        assert NumberValue(3.0).as_text() == "3"

    def test_fractional_float(self):
        assert NumberValue(2.5).as_text() == "2.5"

    def test_bool(self):
        assert BoolValue(True).as_text() == "true"


# =============================================================================
# TRUTHINESS
# =============================================================================


class TestTruthiness:
    """Test which values count as true in bare-name conditions."""

    @pytest.mark.parametrize(
        "value",
        [ABSENT, TextValue(""), NumberValue(0), NumberValue(0.0), BoolValue(False)],
    )
    def test_falsy(self, value):
        assert not value.is_truthy()

    @pytest.mark.parametrize(
        "value",
        [
            TextValue("x"),
            TextValue("false"),
            NumberValue(-1),
            BoolValue(True),
            RecordValue({}),
            ListValue(()),
        ],
    )
    def test_truthy(self, value):
        assert value.is_truthy()

    def test_nan_is_falsy(self):
        assert not NumberValue(float("nan")).is_truthy()


# =============================================================================
# WRAPPING RAW VALUES
# =============================================================================


class TestToValue:
    """Test raw Python objects -> variants."""

    def test_none(self):
        assert to_value(None) is ABSENT

    def test_bool_before_int(self):
        assert to_value(True) == BoolValue(True)

    def test_decimal_becomes_number(self):
        assert to_value(Decimal("1.5")) == NumberValue(1.5)

    def test_mapping_and_list(self):
        assert isinstance(to_value({"a": 1}), RecordValue)
        assert to_value([1, 2]) == ListValue((1, 2))

    def test_already_wrapped(self):
        value = TextValue("x")
        assert to_value(value) is value


class TestLabelContext:
    """Test the flat context mapping."""

    def test_wraps_raw_values(self):
        ctx = LabelContext({"row_count": 0, "column_name": "Sales"})
        assert ctx["row_count"] == NumberValue(0)
        assert ctx["column_name"] == TextValue("Sales")

    def test_missing_name(self):
        assert LabelContext().get("anything") is None

    def test_coerce_keeps_instance(self):
        ctx = LabelContext({"a": 1})
        assert LabelContext.coerce(ctx) is ctx
        assert LabelContext.coerce(None) == LabelContext()

    def test_display_values(self):
        ctx = LabelContext({"row_count": 1234, "note": None})
        assert ctx.display_values() == {"row_count": "1,234", "note": ""}
