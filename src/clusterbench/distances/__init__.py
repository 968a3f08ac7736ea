"""Distance metrics for clustering algorithms."""

from .euclidean import (
    EuclideanDistance,
    euclidean_distance,
    pairwise_distances,
    distance_matrix
)

__all__ = [
    'EuclideanDistance',
    'euclidean_distance',
    'pairwise_distances',
    'distance_matrix'
]
