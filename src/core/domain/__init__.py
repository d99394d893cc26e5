"""
Domain models and value objects.

Contains the immutable value types passed between node functions.
"""

from src.core.domain.point import Point

__all__ = [
    "Point",
]
