from .config import dotenv_entries, environ_entries
from .durations import (
    check_duration,
    format_duration,
    format_duration_ns,
    parse_duration,
    parse_duration_ns,
)
from .errors import (
    EnvParseError,
    EnvRedefinedError,
    EnvUnknownError,
    EnvxError,
    ErrorCode,
    ValueParseError,
)
from .logger import JsonFormatter, PlainFormatter, configure_logging, get_logger
from .parsing import (
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
from .value_objects import AttrRef, Cell, ItemRef

__all__ = [
    "environ_entries",
    "dotenv_entries",
    "parse_duration",
    "parse_duration_ns",
    "format_duration",
    "format_duration_ns",
    "EnvxError",
    "ValueParseError",
    "EnvParseError",
    "EnvRedefinedError",
    "EnvUnknownError",
    "ErrorCode",
    "configure_logging",
    "get_logger",
    "JsonFormatter",
    "PlainFormatter",
    "WORD_BITS",
    "check_bool",
    "check_int",
    "check_uint",
    "check_float",
    "check_duration",
    "parse_bool",
    "format_bool",
    "parse_int",
    "parse_uint",
    "parse_float",
    "format_float",
    "Cell",
    "AttrRef",
    "ItemRef",
]
