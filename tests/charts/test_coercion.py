"""Unit tests for the coerce-to-zero numeric policy and date coercion."""

import math

import pandas as pd
import pytest

from engagecharts.charts.coercion import coerce_date_column, coerce_numeric, coerce_numeric_column


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12", 12.0),
        (" 3.5 ", 3.5),
        ("1e3", 1000.0),
        (7, 7.0),
        ("n/a", 0.0),
        ("", 0.0),
        ("   ", 0.0),
        (None, 0.0),
        (float("nan"), 0.0),
        ("1_000", 0.0),
        ("inf", 0.0),
        ("-inf", 0.0),
        ("Infinity", 0.0),
        ("0x1A", 0.0),
        (float("inf"), 0.0),
    ],
)
def test_coerce_numeric_default_zero(raw, expected):
    assert coerce_numeric(raw) == expected


def test_coerce_numeric_custom_default():
    assert coerce_numeric("oops", default=-1.0) == -1.0


def test_coerce_numeric_column_substitutes_zero():
    df = pd.DataFrame({"Likes": ["10", "abc", "", " 5 ", "2.5"]})
    out = coerce_numeric_column(df, "Likes")
    assert out.tolist() == [10.0, 0.0, 0.0, 5.0, 2.5]
    assert out.dtype == float
    # input untouched
    assert df["Likes"].tolist() == ["10", "abc", "", " 5 ", "2.5"]


def test_coerce_numeric_column_numeric_nan_becomes_zero():
    df = pd.DataFrame({"Likes": [1.0, float("nan"), 3.0]})
    assert coerce_numeric_column(df, "Likes").tolist() == [1.0, 0.0, 3.0]


def test_coerce_numeric_column_logs_substitutions(caplog):
    df = pd.DataFrame({"Likes": ["1", "x", "y"]})
    with caplog.at_level("WARNING", logger="engagecharts"):
        coerce_numeric_column(df, "Likes")
    assert "2 non-numeric" in caplog.text


def test_coerce_numeric_column_missing_column_raises():
    with pytest.raises(ValueError):
        coerce_numeric_column(pd.DataFrame({"a": [1]}), "Likes")


MIXED_CELLS = ["12", " 3.5 ", "1e3", "1_000", "inf", "Infinity", "-inf", "0x1A", "n/a", "", "  ", "-7"]


def test_scalar_and_column_coercion_agree():
    df = pd.DataFrame({"Likes": MIXED_CELLS})
    column = coerce_numeric_column(df, "Likes").tolist()
    assert column == [coerce_numeric(v) for v in MIXED_CELLS]
    assert column == [12.0, 3.5, 1000.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -7.0]


def test_coerce_numeric_column_infinite_floats_become_zero():
    df = pd.DataFrame({"Likes": [1.0, float("inf"), float("-inf"), 4.0]})
    out = coerce_numeric_column(df, "Likes")
    assert out.tolist() == [1.0, 0.0, 0.0, 4.0]
    assert all(math.isfinite(v) for v in out)


def test_coerce_date_column_invalid_becomes_nat():
    df = pd.DataFrame({"Date": ["2024-03-01", "not a date", "2024-03-03"]})
    out = coerce_date_column(df, "Date")
    assert out.iloc[0] == pd.Timestamp("2024-03-01")
    assert pd.isna(out.iloc[1])
    assert out.iloc[2] == pd.Timestamp("2024-03-03")
