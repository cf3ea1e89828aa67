from dataclasses import dataclass
from typing import Any, Generic, MutableMapping, TypeVar

T = TypeVar("T")


@dataclass
class Cell(Generic[T]):
    """
    Plain mutable box owned by the caller.
    """
    value: T | None = None

    def get(self) -> T | None:
        return self.value

    def set(self, value: T) -> None:
        self.value = value


@dataclass(frozen=True)
class AttrRef:
    """
    Attribute `attr` of a caller-owned object.
    """
    obj: Any
    attr: str

    def get(self) -> Any:
        return getattr(self.obj, self.attr)

    def set(self, value: Any) -> None:
        setattr(self.obj, self.attr, value)


@dataclass(frozen=True)
class ItemRef:
    """
    Key `key` of a caller-owned mutable mapping.
    """
    mapping: MutableMapping[str, Any]
    key: str

    def get(self) -> Any:
        return self.mapping.get(self.key)

    def set(self, value: Any) -> None:
        self.mapping[self.key] = value
