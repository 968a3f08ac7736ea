"""Initialization strategies for clustering algorithms."""

from .random import RandomInit
from .build import BuildInit

__all__ = [
    'RandomInit',
    'BuildInit'
]
