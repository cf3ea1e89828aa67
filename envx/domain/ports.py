"""
Domain ports for envx.
Typed values and destinations implement these so the registry stays type-agnostic.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

T = TypeVar("T")


class Ref(Protocol[T]):
    """Shared handle to caller-owned storage."""

    def get(self) -> T: ...
    def set(self, value: T) -> None: ...


class Value(Protocol):
    """A typed holder that can render itself and parse text into its destination."""

    def render(self) -> str: ...
    def parse(self, text: str) -> None: ...
