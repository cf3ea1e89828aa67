import os
from pathlib import Path
from typing import Mapping

from dotenv import dotenv_values


def environ_entries(environ: Mapping[str, str] | None = None) -> list[str]:
    """Renders the process environment (or `environ`) as KEY=VALUE entries."""
    env = os.environ if environ is None else environ
    return [f"{k}={v}" for k, v in env.items()]


def dotenv_entries(path: str | Path = ".env") -> list[str]:
    """Reads a .env file as KEY=VALUE entries; keys without a value are dropped."""
    values = dotenv_values(path)
    return [f"{k}={v}" for k, v in values.items() if v is not None]
