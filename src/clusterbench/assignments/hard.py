"""
Hard assignment strategy for clustering algorithms.

Assigns each point to its nearest representative.
"""

from typing import Tuple
import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy


class HardAssignment(AssignmentStrategy):
    """Hard (discrete) assignment to nearest cluster.

    Each point is assigned to exactly one cluster based on minimum distance;
    exact ties resolve to the lowest cluster id. Used by both K-means and
    K-medoids.
    """

    def compute_assignments(self, distances: Tensor,
                            **kwargs) -> Tuple[Tensor, Tensor]:
        """Assign each point to nearest cluster.

        Args:
            distances: (n, k) point-to-representative distances

        Returns:
            labels: (n,) tensor of cluster indices
            min_distances: (n,) distance of each point to its own cluster
        """
        # argmin returns the first minimal index, i.e. the lowest cluster id
        labels = torch.argmin(distances, dim=1)
        min_distances = torch.gather(distances, 1, labels.unsqueeze(1)).squeeze(1)

        return labels, min_distances
