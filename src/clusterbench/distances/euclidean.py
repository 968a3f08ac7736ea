"""
Euclidean distance metric for clustering.

Pairwise distances are computed from explicit coordinate differences
rather than the ||x||² + ||y||² - 2<x,y> expansion, so the distance matrix
is exactly symmetric with an exactly zero diagonal and ties compare equal.
"""

from typing import Optional, Union
import numpy as np
import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric
from ..base.exceptions import DimensionMismatch
from ..utils.validation import validate_data


def _as_tensor(x: Union[Tensor, np.ndarray, list]) -> Tensor:
    if isinstance(x, Tensor):
        return x
    return torch.as_tensor(np.asarray(x, dtype=np.float64))


def euclidean_distance(a: Union[Tensor, np.ndarray, list],
                       b: Union[Tensor, np.ndarray, list]) -> float:
    """L2 norm of ``a - b``.

    Raises:
        DimensionMismatch: If the vectors have different lengths
        ValueError: If either argument is not a single vector
    """
    a = _as_tensor(a)
    b = _as_tensor(b)
    for v in (a, b):
        if v.dim() > 1:
            raise ValueError(f"Expected a 1D vector, got shape {tuple(v.shape)}")
    a = a.reshape(-1)
    b = b.reshape(-1)
    if a.shape[0] != b.shape[0]:
        raise DimensionMismatch(a.shape[0], b.shape[0])
    diff = a.to(torch.float64) - b.to(torch.float64)
    return float(torch.sqrt(torch.sum(diff * diff)).item())


def pairwise_distances(X: Tensor, Y: Optional[Tensor] = None,
                       squared: bool = False) -> Tensor:
    """Compute distances between every row of X and every row of Y.

    Args:
        X: (n, d) first set of points
        Y: (m, d) second set of points (if None, uses X)
        squared: Return squared distances

    Returns:
        (n, m) distance matrix
    """
    X = _as_tensor(X)
    Y = X if Y is None else _as_tensor(Y)
    if X.shape[1] != Y.shape[1]:
        raise DimensionMismatch(X.shape[1], Y.shape[1])

    diff = X.unsqueeze(1) - Y.unsqueeze(0)
    squared_distances = torch.sum(diff * diff, dim=2)

    if squared:
        return squared_distances
    return torch.sqrt(squared_distances)


def distance_matrix(points: Union[Tensor, np.ndarray, list]) -> Tensor:
    """N x N symmetric Euclidean distance matrix with zero diagonal.

    Lists and arrays are accepted and validated like engine input.
    """
    points = validate_data(points)
    return pairwise_distances(points, points)


class EuclideanDistance(DistanceMetric):
    """Euclidean distance metric.

    Computes ||x - μ|| (or its square) for every point/representative pair.
    """

    def __init__(self, squared: bool = False):
        """
        Args:
            squared: If True, return squared distances.
                    If False, return actual Euclidean distances (default).
        """
        self.squared = squared

    def compute(self, points: Tensor, representatives: Tensor,
                **kwargs) -> Tensor:
        """Compute distances from points to representatives.

        Args:
            points: (n, d) tensor of points
            representatives: (k, d) tensor of centers

        Returns:
            (n, k) tensor of distances
        """
        return pairwise_distances(points, representatives, squared=self.squared)
