"""
PAM BUILD initialization.

Greedy, deterministic medoid seeding: medoids are added one at a time,
each time taking the point that lowers the total assignment cost the most.
"""

from typing import Optional
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy
from ..distances.euclidean import distance_matrix
from ..utils.validation import check_n_clusters


class BuildInit(InitializationStrategy):
    """Greedy cost-minimizing medoid selection (the BUILD phase of PAM).

    Algorithm:
    1. First medoid: the point with the smallest summed distance to all
       points.
    2. Each further medoid: the unselected point j minimizing
       sum_i min(d(i, nearest chosen medoid), d(i, j)).
    Ties go to the lowest point index. The generator is ignored.
    """

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None,
                   distances: Optional[Tensor] = None,
                   **kwargs) -> Tensor:
        """Select medoids greedily.

        Args:
            points: (n, d) data points
            n_clusters: Number of medoids
            generator: Unused
            distances: Optional precomputed (n, n) distance matrix

        Returns:
            (n_clusters,) long tensor of medoid row indices, in selection order
        """
        n_points = points.shape[0]
        check_n_clusters(n_clusters, n_points)

        if n_clusters == n_points:
            return torch.arange(n_points)

        if distances is None:
            distances = distance_matrix(points)

        selected = torch.zeros(n_points, dtype=torch.bool)
        medoids = []

        # Cost of each candidate as the only medoid
        costs = distances.sum(dim=0)
        first = int(torch.argmin(costs).item())
        medoids.append(first)
        selected[first] = True
        nearest = distances[:, first].clone()

        for _ in range(1, n_clusters):
            # Cost if candidate j joins: sum_i min(nearest_i, d(i, j))
            costs = torch.minimum(nearest.unsqueeze(1), distances).sum(dim=0)
            costs[selected] = float('inf')
            chosen = int(torch.argmin(costs).item())
            medoids.append(chosen)
            selected[chosen] = True
            nearest = torch.minimum(nearest, distances[:, chosen])

        return torch.tensor(medoids, dtype=torch.long)
