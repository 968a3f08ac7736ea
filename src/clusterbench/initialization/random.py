"""
Random initialization strategy for K-means.

Selects random points from the dataset as initial cluster centers.
"""

from typing import Optional
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy
from ..utils.validation import check_n_clusters


class RandomInit(InitializationStrategy):
    """Random initialization by selecting points from the dataset.

    Selects n_clusters random points (without replacement, uniformly) as
    initial centers. Each restart of K-means passes its own generator, so
    every start may settle in a different local optimum.
    """

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> Tensor:
        """Pick distinct random rows.

        Args:
            points: (n, d) data points
            n_clusters: Number of clusters
            generator: Random source

        Returns:
            (n_clusters,) long tensor of row indices
        """
        n_points = points.shape[0]
        check_n_clusters(n_clusters, n_points)

        return torch.randperm(n_points, generator=generator)[:n_clusters]
