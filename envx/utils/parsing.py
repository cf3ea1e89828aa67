import math
import re
import struct

from .errors import ErrorCode, ValueParseError

WORD_BITS = struct.calcsize("P") * 8

_TRUE = {"1", "t", "true"}
_FALSE = {"0", "f", "false"}

# Base prefix with optional leading underscore, or plain digits; "_" only between digits.
_UINT_RE = re.compile(r"0[xX]_?[0-9a-fA-F]+(?:_[0-9a-fA-F]+)*|0[oObB]_?[0-7]+(?:_[0-7]+)*|[0-9]+(?:_[0-9]+)*")
_DEC_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
# Hex mantissa needs a binary exponent; "_" only between hex digits.
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:_?[0-9a-fA-F]+(?:_[0-9a-fA-F]+)*(?:\.(?:[0-9a-fA-F]+(?:_[0-9a-fA-F]+)*)?)?"
    r"|\.[0-9a-fA-F]+(?:_[0-9a-fA-F]+)*)[pP][+-]?[0-9]+"
)
_NON_FINITE_RE = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)


def _syntax_error(func: str, text: str) -> ValueParseError:
    return ValueParseError(ErrorCode.INVALID_SYNTAX, text, f"{func}: parsing {text!r}: invalid syntax")


def _range_error(func: str, text: str) -> ValueParseError:
    return ValueParseError(ErrorCode.OUT_OF_RANGE, text, f"{func}: parsing {text!r}: value out of range")


def parse_bool(text: str) -> bool:
    """Parses 1/t/true and 0/f/false, case-insensitively."""
    v = text.lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise _syntax_error("parse_bool", text)


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def _parse_magnitude(func: str, text: str, digits: str) -> int:
    if not _UINT_RE.fullmatch(digits):
        raise _syntax_error(func, text)
    prefix = digits[:2].lower()
    try:
        if prefix == "0b" or prefix == "0o" or prefix == "0x":
            return int(digits, 0)
        if len(digits) > 1 and digits[0] == "0":
            return int(digits[1:].lstrip("_"), 8)
        return int(digits.replace("_", ""))
    except ValueError:
        raise _syntax_error(func, text)


def parse_int(text: str, bits: int = WORD_BITS) -> int:
    """Parses a signed integer literal and checks it fits in `bits`."""
    sign, digits = 1, text
    if text[:1] in ("+", "-"):
        sign, digits = (-1 if text[0] == "-" else 1), text[1:]
    n = sign * _parse_magnitude("parse_int", text, digits)
    limit = 1 << (bits - 1)
    if n < -limit or n >= limit:
        raise _range_error("parse_int", text)
    return n


def parse_uint(text: str, bits: int = WORD_BITS) -> int:
    """Parses an unsigned integer literal; any sign is a syntax error."""
    n = _parse_magnitude("parse_uint", text, text)
    if n >= 1 << bits:
        raise _range_error("parse_uint", text)
    return n


def parse_float(text: str, *, allow_non_finite: bool = False) -> float:
    """Parses a decimal, scientific or hex float literal (ASCII only)."""
    if _NON_FINITE_RE.fullmatch(text):
        if allow_non_finite:
            return float(text)
        raise _syntax_error("parse_float", text)
    try:
        if _DEC_FLOAT_RE.fullmatch(text):
            v = float(text)
        elif _HEX_FLOAT_RE.fullmatch(text):
            v = float.fromhex(text.replace("_", ""))
        else:
            raise _syntax_error("parse_float", text)
    except OverflowError:
        raise _range_error("parse_float", text)
    if not math.isfinite(v):
        raise _range_error("parse_float", text)
    return v


def format_float(value: float) -> str:
    return repr(float(value))


def _default_error(func: str, value: object, code: ErrorCode = ErrorCode.INVALID_SYNTAX) -> ValueParseError:
    return ValueParseError(code, repr(value), f"{func}: invalid default {value!r}")


def check_bool(value: object) -> bool:
    if not isinstance(value, bool):
        raise _default_error("check_bool", value)
    return value


def check_int(value: object, bits: int = WORD_BITS) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise _default_error("check_int", value)
    limit = 1 << (bits - 1)
    if value < -limit or value >= limit:
        raise _default_error("check_int", value, ErrorCode.OUT_OF_RANGE)
    return value


def check_uint(value: object, bits: int = WORD_BITS) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise _default_error("check_uint", value)
    if value < 0 or value >= 1 << bits:
        raise _default_error("check_uint", value, ErrorCode.OUT_OF_RANGE)
    return value


def check_float(value: object, *, allow_non_finite: bool = False) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _default_error("check_float", value)
    try:
        v = float(value)
    except OverflowError:
        raise _default_error("check_float", value, ErrorCode.OUT_OF_RANGE)
    if not allow_non_finite and not math.isfinite(v):
        raise _default_error("check_float", value, ErrorCode.OUT_OF_RANGE)
    return v
