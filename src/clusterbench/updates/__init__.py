"""Parameter update strategies for clustering algorithms."""

from .mean import MeanUpdater

__all__ = [
    'MeanUpdater'
]
