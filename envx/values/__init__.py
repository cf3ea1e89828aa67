from .base import TypedValue
from .duration import DurationValue
from .func import FuncValue
from .scalars import (
    BoolValue,
    Float64Value,
    Int64Value,
    IntValue,
    StringValue,
    Uint64Value,
    UintValue,
)

__all__ = [
    "TypedValue",
    "BoolValue",
    "IntValue",
    "Int64Value",
    "UintValue",
    "Uint64Value",
    "Float64Value",
    "DurationValue",
    "StringValue",
    "FuncValue",
]
