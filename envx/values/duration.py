from __future__ import annotations

from datetime import timedelta
from typing import Any

from ..utils.durations import check_duration, format_duration, parse_duration
from .base import TypedValue


class DurationValue(TypedValue[timedelta]):
    """Duration literal such as "1h30m" held as a timedelta."""
    zero_text = "0s"

    def check(self, default: Any) -> timedelta:
        return check_duration(default)

    def convert(self, text: str) -> timedelta:
        return parse_duration(text)

    def format(self, value: timedelta) -> str:
        return format_duration(value)
