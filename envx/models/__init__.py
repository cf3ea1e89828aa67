from .entry import EnvEntry

__all__ = [
    "EnvEntry",
]
