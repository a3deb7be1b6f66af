from __future__ import annotations

import numpy as np
import pytest

from gatkreport.errors import CoercionError, ValidationError
from gatkreport.models.data_type import Char, DataType, classify, try_parse


@pytest.mark.parametrize(
    "value, expected",
    [
        (5, DataType.INTEGER),
        (-(2**63), DataType.INTEGER),
        (2**63 - 1, DataType.INTEGER),
        (2**63, DataType.STRING),
        (np.int32(3), DataType.INTEGER),
        (1.5, DataType.DECIMAL),
        (np.float64(2.5), DataType.DECIMAL),
        (np.float32(2.5), DataType.DECIMAL),
        (Char("a"), DataType.CHARACTER),
        ("a", DataType.STRING),
        ("hello", DataType.STRING),
        (True, DataType.STRING),
        ([1, 2], DataType.STRING),
    ],
)
def test_classify(value, expected):
    assert classify(value) is expected


def test_classify_never_unknown():
    for value in [0, 0.0, "", Char("z"), None, object()]:
        assert classify(value) is not DataType.UNKNOWN


@pytest.mark.parametrize(
    "fmt, expected",
    [
        ("%d", DataType.INTEGER),
        ("%5d", DataType.INTEGER),
        ("%i", DataType.INTEGER),
        ("%.2f", DataType.DECIMAL),
        ("%f", DataType.DECIMAL),
        ("%10.3e", DataType.DECIMAL),
        ("%g", DataType.DECIMAL),
        ("%c", DataType.CHARACTER),
        ("%s", DataType.STRING),
        ("%-10s", DataType.STRING),
        ("", DataType.UNKNOWN),
        ("%x", DataType.UNKNOWN),
        ("count=%d", DataType.UNKNOWN),
    ],
)
def test_from_format(fmt, expected):
    assert DataType.from_format(fmt) is expected


def test_labels_are_display_names():
    assert str(DataType.INTEGER) == "Integer"
    assert DataType.DECIMAL.label == "Decimal"
    assert str(DataType.UNKNOWN) == "Unknown"


def test_try_parse_integer():
    assert try_parse("42", DataType.INTEGER) == 42
    assert isinstance(try_parse("42", DataType.INTEGER), int)
    assert try_parse("-7", DataType.INTEGER) == -7
    assert try_parse("+3", DataType.INTEGER) == 3


@pytest.mark.parametrize("text", ["4.2", "abc", " 5", "1_000", "9223372036854775808", ""])
def test_try_parse_integer_failure_keeps_text(text):
    assert try_parse(text, DataType.INTEGER) == text


def test_try_parse_decimal():
    assert try_parse("1.5", DataType.DECIMAL) == 1.5
    parsed = try_parse("5", DataType.DECIMAL)
    assert parsed == 5.0 and isinstance(parsed, float)
    assert try_parse("1e3", DataType.DECIMAL) == 1000.0
    assert try_parse("1_000.0", DataType.DECIMAL) == "1_000.0"
    assert try_parse("nope", DataType.DECIMAL) == "nope"


def test_try_parse_character():
    parsed = try_parse("x", DataType.CHARACTER)
    assert isinstance(parsed, Char)
    assert classify(parsed) is DataType.CHARACTER
    assert try_parse("xy", DataType.CHARACTER) == "xy"
    assert classify(try_parse("xy", DataType.CHARACTER)) is DataType.STRING


def test_try_parse_leaves_text_targets_and_non_text_alone():
    assert try_parse("12", DataType.STRING) == "12"
    assert try_parse("12", DataType.UNKNOWN) == "12"
    assert try_parse(12, DataType.DECIMAL) == 12
    assert isinstance(try_parse(12, DataType.DECIMAL), int)


def test_try_parse_strict_raises():
    with pytest.raises(CoercionError) as e:
        try_parse("abc", DataType.INTEGER, strict=True)
    assert "Integer" in str(e.value)
    with pytest.raises(CoercionError):
        try_parse("ab", DataType.CHARACTER, strict=True)
    # text targets never fail
    assert try_parse("abc", DataType.STRING, strict=True) == "abc"


def test_char_requires_one_character():
    assert Char("q") == "q"
    assert repr(Char("q")) == "Char('q')"
    with pytest.raises(ValidationError):
        Char("qq")
    with pytest.raises(ValidationError):
        Char("")
