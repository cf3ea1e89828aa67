from __future__ import annotations

from typing import Mapping

from ..utils import Cell, configure_logging
from .envset import EnvSet


def configure_logging_from_env(
    *,
    level: str | None = None,
    fmt: str | None = None,
    utc: bool | None = None,
    environ: Mapping[str, str] | None = None,
) -> None:
    """Configures root logging from LOG_LEVEL, LOG_FORMAT and LOG_UTC.

    Only arguments left as None are read from the environment, so an
    explicit argument also shields against a malformed variable.
    """
    env_level, env_fmt, env_utc = Cell[str](), Cell[str](), Cell[bool]()
    envs = EnvSet()
    if level is None:
        envs.string_var(env_level, "log_level", "INFO", "root log level")
    if fmt is None:
        envs.string_var(env_fmt, "log_format", "plain", "plain or json")
    if utc is None:
        envs.bool_var(env_utc, "log_utc", True, "UTC timestamps")
    envs.parse_environ(environ)

    configure_logging(
        level=level if level is not None else env_level.value,
        fmt=fmt if fmt is not None else env_fmt.value,
        utc=utc if utc is not None else env_utc.value,
    )
