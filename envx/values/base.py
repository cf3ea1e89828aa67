from __future__ import annotations

from typing import Any, Generic, TypeVar

from ..domain import Ref

T = TypeVar("T")


class TypedValue(Generic[T]):
    """Seeds a destination with its default and parses text into it.

    Subclasses provide `check` (validates the default, raising on values
    outside the type), `convert` (text -> native, raising on bad input) and
    `format` (native -> text). The destination is written only after a
    successful check or conversion.
    """

    zero_text = ""

    def __init__(self, default: T, ref: Ref[T]) -> None:
        value = self.check(default)
        ref.set(value)
        self.ref = ref

    def check(self, default: Any) -> T:
        return default

    def convert(self, text: str) -> T:
        raise NotImplementedError

    def format(self, value: T) -> str:
        return str(value)

    def render(self) -> str:
        return self.format(self.ref.get())

    def parse(self, text: str) -> None:
        value = self.convert(text)
        self.ref.set(value)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.render()!r})"
