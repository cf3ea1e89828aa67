import math

import pytest

from envx.utils import (
    ErrorCode,
    ValueParseError,
    check_bool,
    check_float,
    check_int,
    check_uint,
    format_bool,
    format_float,
    parse_bool,
    parse_float,
    parse_int,
    parse_uint,
)


def test_parse_bool_tokens():
    for text in ("1", "t", "T", "true", "True", "TRUE", "tRuE"):
        assert parse_bool(text) is True
    for text in ("0", "f", "F", "false", "False", "FALSE"):
        assert parse_bool(text) is False


@pytest.mark.parametrize("text", ["yes", "no", "on", "", " true", "2"])
def test_parse_bool_rejects(text):
    with pytest.raises(ValueParseError) as e:
        parse_bool(text)
    assert e.value.code == ErrorCode.INVALID_SYNTAX
    assert e.value.text == text


def test_format_bool():
    assert format_bool(True) == "true"
    assert format_bool(False) == "false"


def test_parse_int_literals():
    assert parse_int("42") == 42
    assert parse_int("-42") == -42
    assert parse_int("+7") == 7
    assert parse_int("0") == 0
    assert parse_int("0x1f") == 31
    assert parse_int("0X1F") == 31
    assert parse_int("0o17") == 15
    assert parse_int("017") == 15
    assert parse_int("0b101") == 5
    assert parse_int("-0x10") == -16
    assert parse_int("1_000_000") == 1000000


@pytest.mark.parametrize("text", ["", "-", "abc", " 42", "42 ", "4 2", "09", "1__0", "_1", "1_", "0x", "0b2", "1.5"])
def test_parse_int_syntax_errors(text):
    with pytest.raises(ValueParseError) as e:
        parse_int(text)
    assert e.value.code == ErrorCode.INVALID_SYNTAX


def test_parse_int_range():
    assert parse_int("9223372036854775807", 64) == 2**63 - 1
    assert parse_int("-9223372036854775808", 64) == -(2**63)
    with pytest.raises(ValueParseError) as e:
        parse_int("9223372036854775808", 64)
    assert e.value.code == ErrorCode.OUT_OF_RANGE
    with pytest.raises(ValueParseError):
        parse_int("-129", 8)
    assert parse_int("-128", 8) == -128


def test_parse_uint():
    assert parse_uint("0") == 0
    assert parse_uint("0xff") == 255
    assert parse_uint("18446744073709551615", 64) == 2**64 - 1
    with pytest.raises(ValueParseError) as e:
        parse_uint("18446744073709551616", 64)
    assert e.value.code == ErrorCode.OUT_OF_RANGE


@pytest.mark.parametrize("text", ["-1", "+1", "-0", "x1"])
def test_parse_uint_rejects_signs(text):
    with pytest.raises(ValueParseError) as e:
        parse_uint(text)
    assert e.value.code == ErrorCode.INVALID_SYNTAX


def test_parse_float_forms():
    assert parse_float("3.14") == 3.14
    assert parse_float("-2") == -2.0
    assert parse_float("1e3") == 1000.0
    assert parse_float(".5") == 0.5
    assert parse_float("0x1p-2") == 0.25
    assert parse_float("0x1.8p1") == 3.0
    assert parse_float("-0x_1_0p0") == -16.0
    assert parse_float("5.") == 5.0
    assert parse_float("1E-3") == 0.001


@pytest.mark.parametrize("text", ["inf", "-Inf", "infinity", "NaN"])
def test_parse_float_non_finite_rejected_by_default(text):
    with pytest.raises(ValueParseError) as e:
        parse_float(text)
    assert e.value.code == ErrorCode.INVALID_SYNTAX


def test_parse_float_non_finite_allowed():
    assert parse_float("inf", allow_non_finite=True) == math.inf
    assert parse_float("-inf", allow_non_finite=True) == -math.inf
    assert math.isnan(parse_float("nan", allow_non_finite=True))


def test_parse_float_errors():
    for text in ("", "abc", " 1.0", "1.0 ", "1,5", ".", "1e", "0x1.8", "0x1", "0x1p", "\u0661\u0662", "1_000.5", "1__0p0"):
        with pytest.raises(ValueParseError) as e:
            parse_float(text)
        assert e.value.code == ErrorCode.INVALID_SYNTAX

    with pytest.raises(ValueParseError) as e:
        parse_float("1e400")
    assert e.value.code == ErrorCode.OUT_OF_RANGE


def test_format_float_round_trips():
    for v in (0.0, 0.1, -2.5, 1e21, 123456.789):
        assert parse_float(format_float(v)) == v


def test_default_checks():
    assert check_bool(False) is False
    assert check_int(-5, 8) == -5
    assert check_uint(255, 8) == 255
    assert check_float(2) == 2.0
    assert isinstance(check_float(2), float)

    for fn, value, code in (
        (check_bool, "no", ErrorCode.INVALID_SYNTAX),
        (check_bool, 1, ErrorCode.INVALID_SYNTAX),
        (check_int, True, ErrorCode.INVALID_SYNTAX),
        (check_int, "1", ErrorCode.INVALID_SYNTAX),
        (check_uint, -1, ErrorCode.OUT_OF_RANGE),
        (check_float, "0.5", ErrorCode.INVALID_SYNTAX),
        (check_float, float("inf"), ErrorCode.OUT_OF_RANGE),
        (check_float, 10**400, ErrorCode.OUT_OF_RANGE),
    ):
        with pytest.raises(ValueParseError) as e:
            fn(value)
        assert e.value.code == code

    with pytest.raises(ValueParseError) as e:
        check_int(2**70, 64)
    assert e.value.code == ErrorCode.OUT_OF_RANGE
    assert math.isnan(check_float(float("nan"), allow_non_finite=True))
