from __future__ import annotations

from typing import Any

from ..domain import Ref
from ..utils.errors import ErrorCode, ValueParseError
from ..utils.parsing import (
    WORD_BITS,
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
from .base import TypedValue


class BoolValue(TypedValue[bool]):
    zero_text = "false"

    def check(self, default: Any) -> bool:
        return check_bool(default)

    def convert(self, text: str) -> bool:
        return parse_bool(text)

    def format(self, value: bool) -> str:
        return format_bool(value)


class IntValue(TypedValue[int]):
    """Signed integer sized to the host word."""
    zero_text = "0"
    bits = WORD_BITS

    def check(self, default: Any) -> int:
        return check_int(default, self.bits)

    def convert(self, text: str) -> int:
        return parse_int(text, self.bits)


class Int64Value(IntValue):
    bits = 64


class UintValue(TypedValue[int]):
    """Unsigned integer sized to the host word."""
    zero_text = "0"
    bits = WORD_BITS

    def check(self, default: Any) -> int:
        return check_uint(default, self.bits)

    def convert(self, text: str) -> int:
        return parse_uint(text, self.bits)


class Uint64Value(UintValue):
    bits = 64


class Float64Value(TypedValue[float]):
    zero_text = "0.0"

    def __init__(self, default: float, ref: Ref[float], *, allow_non_finite: bool = False) -> None:
        self.allow_non_finite = allow_non_finite
        super().__init__(default, ref)

    def check(self, default: Any) -> float:
        return check_float(default, allow_non_finite=self.allow_non_finite)

    def convert(self, text: str) -> float:
        return parse_float(text, allow_non_finite=self.allow_non_finite)

    def format(self, value: float) -> str:
        return format_float(value)


class StringValue(TypedValue[str]):
    def check(self, default: Any) -> str:
        if not isinstance(default, str):
            raise ValueParseError(ErrorCode.INVALID_SYNTAX, repr(default), f"invalid default {default!r}")
        return default

    def convert(self, text: str) -> str:
        return text
