from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes attached to envx exceptions."""
    INVALID_SYNTAX = "invalid_syntax"
    OUT_OF_RANGE = "out_of_range"

    CALLBACK_FAILED = "callback_failed"
    CUSTOM_FAILED = "custom_failed"

    REDEFINED = "redefined"
    UNKNOWN_NAME = "unknown_name"


class EnvxError(RuntimeError):
    """Base error for envx."""


class ValueParseError(EnvxError, ValueError):
    """Text could not be converted to the destination type."""

    def __init__(self, code: ErrorCode, text: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.text = text


class EnvParseError(EnvxError):
    """Setting a registered variable failed."""

    def __init__(self, name: str, cause: BaseException, code: ErrorCode | None = None) -> None:
        super().__init__(f"cannot set value for {name}: {cause}")
        self.name = name
        self.cause = cause
        if isinstance(cause, ValueParseError):
            code = cause.code
        self.code = code or ErrorCode.CUSTOM_FAILED


class EnvRedefinedError(EnvxError):
    """A variable name was registered twice."""

    def __init__(self, name: str) -> None:
        super().__init__(f"env redefined: {name}")
        self.name = name
        self.code = ErrorCode.REDEFINED


class EnvUnknownError(EnvxError, KeyError):
    """No variable is registered under the name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"no such env: {name}")
        self.name = name
        self.code = ErrorCode.UNKNOWN_NAME

    def __str__(self) -> str:
        return self.args[0]
