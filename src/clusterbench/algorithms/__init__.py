"""Clustering algorithm implementations."""

from .kmeans import KMeans, KMeansObjective, kmeans
from .kmedoids import KMedoids, kmedoids, swap_costs

__all__ = [
    'KMeans',
    'KMeansObjective',
    'kmeans',
    'KMedoids',
    'kmedoids',
    'swap_costs'
]
