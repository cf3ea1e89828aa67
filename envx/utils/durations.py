from datetime import timedelta

from .errors import ErrorCode, ValueParseError

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

UNITS = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # U+00B5 micro sign
    "μs": MICROSECOND,  # U+03BC greek mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_MAX_NS = (1 << 63) - 1


def _invalid(text: str, reason: str = "invalid duration") -> ValueParseError:
    return ValueParseError(ErrorCode.INVALID_SYNTAX, text, f"{reason} {text!r}")


def _leading_digits(s: str) -> tuple[str, str]:
    i = 0
    while i < len(s) and "0" <= s[i] <= "9":
        i += 1
    return s[:i], s[i:]


def parse_duration_ns(text: str) -> int:
    """Parses a compound duration literal such as "1h15m" or "-1.5s" into nanoseconds."""
    s = text
    neg = False
    if s and s[0] in "+-":
        neg = s[0] == "-"
        s = s[1:]
    if s == "0":
        return 0
    if not s:
        raise _invalid(text)

    total = 0
    while s:
        if not (s[0] == "." or "0" <= s[0] <= "9"):
            raise _invalid(text)
        whole, s = _leading_digits(s)
        frac = ""
        if s.startswith("."):
            frac, s = _leading_digits(s[1:])
            if not whole and not frac:
                raise _invalid(text)
        elif not whole:
            raise _invalid(text)

        i = 0
        while i < len(s) and s[i] != "." and not ("0" <= s[i] <= "9"):
            i += 1
        unit_text, s = s[:i], s[i:]
        if not unit_text:
            raise _invalid(text, "missing unit in duration")
        unit = UNITS.get(unit_text)
        if unit is None:
            raise _invalid(text, f"unknown unit {unit_text!r} in duration")

        total += int(whole or "0") * unit
        if frac:
            total += int(frac) * unit // 10 ** len(frac)
        if total > _MAX_NS + 1:
            raise ValueParseError(ErrorCode.OUT_OF_RANGE, text, f"invalid duration {text!r}")

    if neg:
        return -total
    if total > _MAX_NS:
        raise ValueParseError(ErrorCode.OUT_OF_RANGE, text, f"invalid duration {text!r}")
    return total


def ns_to_timedelta(ns: int) -> timedelta:
    """Converts nanoseconds to a timedelta, truncating toward zero."""
    us = abs(ns) // MICROSECOND
    return timedelta(microseconds=-us if ns < 0 else us)


def timedelta_to_ns(d: timedelta) -> int:
    return ((d.days * 86400 + d.seconds) * 1_000_000 + d.microseconds) * MICROSECOND


def parse_duration(text: str) -> timedelta:
    return ns_to_timedelta(parse_duration_ns(text))


def _fmt_frac(v: int, scale: int) -> str:
    whole, rem = divmod(v, scale)
    digits = str(rem).rjust(len(str(scale)) - 1, "0").rstrip("0")
    return f"{whole}.{digits}" if digits else str(whole)


def format_duration_ns(ns: int) -> str:
    """Formats nanoseconds as the shortest literal, e.g. "1h0m0s", "1.5ms", "0s"."""
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    u = abs(ns)
    if u < SECOND:
        if u < MICROSECOND:
            return f"{sign}{u}ns"
        if u < MILLISECOND:
            return f"{sign}{_fmt_frac(u, MICROSECOND)}µs"
        return f"{sign}{_fmt_frac(u, MILLISECOND)}ms"

    out = f"{_fmt_frac(u % MINUTE, SECOND)}s"
    minutes = u // MINUTE
    if minutes:
        out = f"{minutes % 60}m{out}"
        hours = minutes // 60
        if hours:
            out = f"{hours}h{out}"
    return sign + out


def format_duration(d: timedelta) -> str:
    return format_duration_ns(timedelta_to_ns(d))


def check_duration(value: object) -> timedelta:
    """Validates a default duration: a timedelta that fits int64 nanoseconds."""
    if not isinstance(value, timedelta):
        raise ValueParseError(ErrorCode.INVALID_SYNTAX, repr(value), f"check_duration: invalid default {value!r}")
    ns = timedelta_to_ns(value)
    if ns > _MAX_NS or ns < -_MAX_NS - 1:
        raise ValueParseError(ErrorCode.OUT_OF_RANGE, repr(value), f"check_duration: invalid default {value!r}")
    return value
