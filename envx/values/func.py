from __future__ import annotations

from typing import Any, Callable

from ..utils.errors import ErrorCode


class FuncValue:
    """Hands the raw text to a caller-supplied function.

    The function signals failure by raising; its return value is ignored.
    """

    zero_text = ""
    failure_code = ErrorCode.CALLBACK_FAILED

    def __init__(self, fn: Callable[[str], Any]) -> None:
        self.fn = fn

    def render(self) -> str:
        return ""

    def parse(self, text: str) -> None:
        self.fn(text)

    def __str__(self) -> str:
        return self.render()
