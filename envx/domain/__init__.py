"""
Domain layer: ports for typed values and their destinations.
"""

from .ports import Ref, Value

__all__ = [
    "Ref",
    "Value",
]
