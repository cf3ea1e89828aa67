"""
envx: typed environment variable sets.

Register typed variables on an EnvSet, then parse KEY=VALUE entries
(usually the process environment) into caller-owned destinations.
"""

from .domain import Ref, Value
from .models import EnvEntry
from .services import EnvSet, configure_logging_from_env
from .utils import (
    AttrRef,
    Cell,
    EnvParseError,
    EnvRedefinedError,
    EnvUnknownError,
    EnvxError,
    ErrorCode,
    ItemRef,
    ValueParseError,
    configure_logging,
    dotenv_entries,
    environ_entries,
    get_logger,
)
from .values import (
    BoolValue,
    DurationValue,
    Float64Value,
    FuncValue,
    Int64Value,
    IntValue,
    StringValue,
    Uint64Value,
    UintValue,
)

__all__ = [
    "EnvSet",
    "EnvEntry",
    "Ref",
    "Value",
    "Cell",
    "AttrRef",
    "ItemRef",
    "BoolValue",
    "IntValue",
    "Int64Value",
    "UintValue",
    "Uint64Value",
    "Float64Value",
    "DurationValue",
    "StringValue",
    "FuncValue",
    "EnvxError",
    "ValueParseError",
    "EnvParseError",
    "EnvRedefinedError",
    "EnvUnknownError",
    "ErrorCode",
    "environ_entries",
    "dotenv_entries",
    "configure_logging",
    "configure_logging_from_env",
    "get_logger",
]
