"""Tests for the typed writer converters."""

from datetime import date, datetime
from decimal import Decimal
from fractions import Fraction

import pytest

from typed_accessors import coercion
from typed_accessors.config import reset_date_settings
from typed_accessors.exceptions import ArgumentTypeError, DateParseError
from typed_accessors.semantic_types import SemanticType


@pytest.mark.parametrize("value", ["y", "Y", "yes", "YES", "Yes", "t", "T", "true", "TRUE", "True", True])
def test_coerce_bool_yn_truthy_inputs(value):
    assert coercion.coerce_bool_yn("onfire", value) is True


@pytest.mark.parametrize(
    "value",
    ["no", "n", "", "truefoo", "yess", " yes", "yes\n", "1", 1, 1.0, False, None, object()],
)
def test_coerce_bool_yn_everything_else_is_false(value):
    assert coercion.coerce_bool_yn("onfire", value) is False


def test_coerce_float_parses_text():
    assert coercion.coerce_float("distance", "3.14") == 3.14
    assert coercion.coerce_float("distance", "12.5") == 12.5
    assert coercion.coerce_float("distance", "1e3") == 1000.0
    assert coercion.coerce_float("distance", "-.5") == -0.5


def test_coerce_float_reads_leading_number_only():
    assert coercion.coerce_float("distance", "  3.5kg") == 3.5
    assert coercion.coerce_float("distance", "1_000.25") == 1000.25
    assert coercion.coerce_float("distance", "abc") == 0.0
    assert coercion.coerce_float("distance", "") == 0.0


@pytest.mark.parametrize(
    "value, expected",
    [(3, 3.0), (3.0, 3.0), (Decimal("2.5"), 2.5), (Fraction(1, 4), 0.25), (None, 0.0)],
)
def test_coerce_float_numeric_variants(value, expected):
    result = coercion.coerce_float("distance", value)
    assert isinstance(result, float)
    assert result == expected


@pytest.mark.parametrize("value", [{}, [], object(), True, False, b"3.0"])
def test_coerce_float_rejects_unsupported_values(value):
    with pytest.raises(ArgumentTypeError) as excinfo:
        coercion.coerce_float("distance", value)
    assert str(excinfo.value) == "distance must be Float"
    assert excinfo.value.field == "distance"
    assert excinfo.value.expected == "Float"
    assert excinfo.value.value is value


def test_coerce_int_parses_and_truncates():
    assert coercion.coerce_int("count", "42") == 42
    assert coercion.coerce_int("count", "42.9") == 42
    assert coercion.coerce_int("count", " -7 apples") == -7
    assert coercion.coerce_int("count", "1_000") == 1000
    assert coercion.coerce_int("count", "abc") == 0
    assert coercion.coerce_int("count", 42.9) == 42
    assert coercion.coerce_int("count", -42.9) == -42
    assert coercion.coerce_int("count", Decimal("7.8")) == 7
    assert coercion.coerce_int("count", None) == 0


@pytest.mark.parametrize("text", ["\u0663", "\u0661\u0662", "\uff17"])
def test_numeric_text_only_reads_ascii_digits(text):
    assert coercion.coerce_int("count", text) == 0
    assert coercion.coerce_float("distance", text) == 0.0
    assert coercion.coerce_int("count", "7" + text) == 7


@pytest.mark.parametrize("value", [float("nan"), float("inf"), Decimal("NaN")])
def test_coerce_int_rejects_non_finite_numbers(value):
    with pytest.raises(ArgumentTypeError, match="count must be Integer"):
        coercion.coerce_int("count", value)


@pytest.mark.parametrize("value", [{}, object(), True])
def test_coerce_int_rejects_unsupported_values(value):
    with pytest.raises(ArgumentTypeError, match="count must be Integer"):
        coercion.coerce_int("count", value)


@pytest.mark.parametrize(
    "text",
    ["2024-01-15", "2024-01-15T08:30:00", "2024-01-15T08:30:00Z", "January 15, 2024", "15 Jan 2024"],
)
def test_coerce_date_parses_text(text):
    assert coercion.coerce_date("day", text) == date(2024, 1, 15)


def test_coerce_date_returns_plain_date():
    result = coercion.coerce_date("day", "2024-01-15T23:59:59")
    assert type(result) is date


@pytest.mark.parametrize("text", ["not-a-date", "", "2024-02-30", "2024-01-15 garbage"])
def test_coerce_date_raises_on_unparseable_text(text):
    with pytest.raises(DateParseError) as excinfo:
        coercion.coerce_date("day", text)
    assert excinfo.value.field == "day"
    assert excinfo.value.value == text
    assert isinstance(excinfo.value.__cause__, (ValueError, OverflowError))


def test_coerce_date_passes_other_values_through():
    today = date(2024, 1, 15)
    moment = datetime(2024, 1, 15, 8, 30)
    marker = object()
    assert coercion.coerce_date("day", today) is today
    assert coercion.coerce_date("day", moment) is moment
    assert coercion.coerce_date("day", marker) is marker
    assert coercion.coerce_date("day", None) is None


def test_coerce_date_reads_slash_dates_day_first_by_default():
    assert coercion.coerce_date("day", "01/02/2024") == date(2024, 2, 1)
    assert coercion.coerce_date("day", "2024-01-02") == date(2024, 1, 2)


def test_coerce_date_honours_dayfirst_setting(monkeypatch):
    monkeypatch.setenv("TYPED_ACCESSORS_DATE_DAYFIRST", "no")
    reset_date_settings()
    assert coercion.coerce_date("day", "01/02/2024") == date(2024, 1, 2)
    assert coercion.coerce_date("day", "2024-01-02") == date(2024, 1, 2)


def test_converter_for_covers_every_semantic_type():
    assert coercion.converter_for(SemanticType.BOOLEAN_YN) is coercion.coerce_bool_yn
    assert coercion.converter_for(SemanticType.FLOAT) is coercion.coerce_float
    assert coercion.converter_for(SemanticType.INTEGER) is coercion.coerce_int
    assert coercion.converter_for(SemanticType.DATE) is coercion.coerce_date
