from __future__ import annotations

from datetime import timedelta
from typing import Any, Callable, Iterable, Mapping

from ..domain import Ref, Value
from ..models import EnvEntry
from ..utils import (
    EnvParseError,
    EnvRedefinedError,
    EnvUnknownError,
    environ_entries,
    get_logger,
)
from ..values import (
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

log = get_logger("envx.envset")


class EnvSet:
    """A set of typed environment variables bound to caller-owned destinations.

    Variables are registered under a bare name which is uppercased and joined
    to the set's prefix (``PREFIX_NAME``). `parse` matches incoming
    ``KEY=VALUE`` entries against those normalized names exactly; keys are
    not normalized on the way in.

    Not safe for concurrent use: register everything, then parse.
    """

    def __init__(self, prefix: str = "") -> None:
        self.prefix = prefix.upper()
        self._parsed = False
        self._formal: dict[str, EnvEntry] = {}
        self._actual: dict[str, EnvEntry] = {}

    def name_for(self, name: str) -> str:
        """Returns the normalized variable name for a bare name."""
        if not self.prefix:
            return name.upper()
        return f"{self.prefix}_{name.upper()}"

    def bool_var(self, ref: Ref[bool], name: str, default: bool, usage: str = "") -> EnvEntry:
        return self._define(lambda: BoolValue(default, ref), name, usage)

    def int_var(self, ref: Ref[int], name: str, default: int, usage: str = "") -> EnvEntry:
        return self._define(lambda: IntValue(default, ref), name, usage)

    def int64_var(self, ref: Ref[int], name: str, default: int, usage: str = "") -> EnvEntry:
        return self._define(lambda: Int64Value(default, ref), name, usage)

    def uint_var(self, ref: Ref[int], name: str, default: int, usage: str = "") -> EnvEntry:
        return self._define(lambda: UintValue(default, ref), name, usage)

    def uint64_var(self, ref: Ref[int], name: str, default: int, usage: str = "") -> EnvEntry:
        return self._define(lambda: Uint64Value(default, ref), name, usage)

    def float64_var(
        self,
        ref: Ref[float],
        name: str,
        default: float,
        usage: str = "",
        *,
        allow_non_finite: bool = False,
    ) -> EnvEntry:
        return self._define(lambda: Float64Value(default, ref, allow_non_finite=allow_non_finite), name, usage)

    def duration_var(self, ref: Ref[timedelta], name: str, default: timedelta, usage: str = "") -> EnvEntry:
        """Accepts literals like "300ms", "-1.5h" or "2h45m"."""
        return self._define(lambda: DurationValue(default, ref), name, usage)

    def string_var(self, ref: Ref[str], name: str, default: str, usage: str = "") -> EnvEntry:
        return self._define(lambda: StringValue(default, ref), name, usage)

    def func(self, name: str, usage: str, fn: Callable[[str], Any]) -> EnvEntry:
        """Registers a callback that receives the raw text each time the variable is seen.

        Any exception raised by `fn` is reported as a parse failure.
        """
        return self._define(lambda: FuncValue(fn), name, usage)

    def var(self, value: Value, name: str, usage: str = "") -> EnvEntry:
        """Registers a custom value implementing `render` and `parse`."""
        return self._define(lambda: value, name, usage)

    def _define(self, make: Callable[[], Value], name: str, usage: str) -> EnvEntry:
        key = self.name_for(name)
        if key in self._formal:
            raise EnvRedefinedError(key)
        value = make()
        entry = EnvEntry(name=key, usage=usage, default_text=value.render(), value=value)
        self._formal[key] = entry
        log.debug("env defined", extra={"env": key, "kind": type(value).__name__})
        return entry

    def parse(self, entries: Iterable[str]) -> None:
        """Applies ``KEY=VALUE`` entries in order; stops at the first bad value.

        Entries without ``=`` and unknown keys are skipped. Values applied
        before a failure stay applied.
        """
        if isinstance(entries, str):
            raise TypeError("entries must be an iterable of KEY=VALUE strings, not a str")
        self._parsed = True
        for raw in entries:
            key, sep, text = raw.partition("=")
            if not sep:
                continue
            entry = self._formal.get(key)
            if entry is None:
                continue
            self._apply(entry, text)

    def parse_environ(self, environ: Mapping[str, str] | None = None) -> None:
        """Parses the process environment, or `environ` when given."""
        self.parse(environ_entries(environ))

    def is_parsed(self) -> bool:
        """Reports whether `parse` has been called, successful or not."""
        return self._parsed

    def set(self, name: str, text: str) -> None:
        """Sets the variable registered under the bare `name` from text."""
        key = self.name_for(name)
        entry = self._formal.get(key)
        if entry is None:
            raise EnvUnknownError(key)
        self._apply(entry, text)

    def _apply(self, entry: EnvEntry, text: str) -> None:
        try:
            entry.value.parse(text)
        except Exception as e:
            log.debug("env rejected", extra={"env": entry.name})
            raise EnvParseError(entry.name, e, getattr(entry.value, "failure_code", None)) from e
        self._actual[entry.name] = entry
        log.debug("env set", extra={"env": entry.name})

    def lookup(self, name: str) -> EnvEntry | None:
        """Returns the entry registered under the bare `name`, if any."""
        return self._formal.get(self.name_for(name))

    def visit_all(self, fn: Callable[[EnvEntry], Any]) -> None:
        """Calls `fn` for every registered entry in name order."""
        for key in sorted(self._formal):
            fn(self._formal[key])

    def visit(self, fn: Callable[[EnvEntry], Any]) -> None:
        """Calls `fn` for every entry that has been set, in name order."""
        for key in sorted(self._actual):
            fn(self._actual[key])

    def n_set(self) -> int:
        return len(self._actual)

    def __len__(self) -> int:
        return len(self._formal)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.name_for(name) in self._formal
