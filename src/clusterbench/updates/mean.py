"""
Mean update strategy for centroid-based clustering.
"""

from typing import Optional
import torch
from torch import Tensor

from ..base.interfaces import ParameterUpdater
from ..base.data_structures import AssignmentMatrix


class MeanUpdater(ParameterUpdater):
    """Updates each centroid to the mean of its assigned points.

    Empty clusters are recovered rather than dropped: the centroid of an
    empty cluster is moved onto the point that currently lies farthest from
    its own assigned centroid. With several empty clusters, they are
    processed in ascending id order and each takes the farthest point not
    already used by an earlier reseed in the same step.
    """

    def update(self, points: Tensor, labels: Tensor,
               representatives: Tensor,
               min_distances: Optional[Tensor] = None,
               **kwargs) -> Tensor:
        """Recompute centroids.

        Args:
            points: (n, d) data points
            labels: (n,) hard assignments
            representatives: (k, d) centroids the labels were computed against
            min_distances: (n,) distance of each point to its assigned centroid

        Returns:
            (k, d) new centroids
        """
        n_clusters = representatives.shape[0]
        assignment = AssignmentMatrix(labels, n_clusters)
        counts = assignment.count_per_cluster()

        sums = torch.zeros_like(representatives)
        sums.index_add_(0, assignment.labels, points)
        new_centers = sums / counts.clamp(min=1).unsqueeze(1).to(points.dtype)

        empty = assignment.empty_clusters()
        if empty.numel() > 0:
            if min_distances is None:
                diff = points - representatives[assignment.labels]
                min_distances = torch.sqrt(torch.sum(diff * diff, dim=1))
            # Stable sort keeps the lowest index first among equal distances
            order = torch.sort(min_distances, descending=True, stable=True).indices
            for slot, cluster_idx in enumerate(empty.tolist()):
                donor = order[slot % order.shape[0]]
                new_centers[cluster_idx] = points[donor]

        return new_centers
