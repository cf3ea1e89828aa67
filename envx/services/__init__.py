from .envset import EnvSet
from .logging_env import configure_logging_from_env

__all__ = [
    "EnvSet",
    "configure_logging_from_env",
]
