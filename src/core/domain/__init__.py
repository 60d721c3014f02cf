"""
Domain models and value objects.

Contains fundamental value objects like Point.
"""

from src.core.domain.point import Point

__all__ = [
    "Point",
]
