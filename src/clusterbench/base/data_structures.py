"""
Core data structures shared by the clustering engines and the benchmark.

RunResult and TimingRecord are immutable value objects: engines build one
at the end of a run and never touch it again, and the harness only ever
appends records to its output list.
"""

from typing import Optional, Tuple
from dataclasses import dataclass, field
from enum import Enum
import torch
from torch import Tensor


class Method(str, Enum):
    """Clustering method identifiers used as benchmark keys."""

    KMEANS = "kmeans"
    KMEDOIDS = "kmedoids"


class AssignmentMatrix:
    """Validated hard assignment of points to clusters.

    Provides the per-cluster aggregation the update steps need.
    """

    def __init__(self, labels: Tensor, n_clusters: int):
        """
        Args:
            labels: (n,) hard assignments
            n_clusters: Number of clusters K
        """
        self.n_clusters = n_clusters
        self._validate_and_store(labels)

    def _validate_and_store(self, labels: Tensor):
        """Validate and store assignments in canonical format."""
        if labels.dim() != 1:
            raise ValueError(f"Expected 1D assignments, got {labels.dim()}D")
        if labels.numel() > 0:
            if labels.min() < 0 or labels.max() >= self.n_clusters:
                raise ValueError(f"Assignments must lie in [0, {self.n_clusters})")
        self._labels = labels.long()

    @property
    def n_points(self) -> int:
        """Number of data points."""
        return self._labels.shape[0]

    @property
    def labels(self) -> Tensor:
        return self._labels

    def count_per_cluster(self) -> Tensor:
        """Count points per cluster."""
        return torch.bincount(self._labels, minlength=self.n_clusters)

    def empty_clusters(self) -> Tensor:
        """Ids of clusters with no assigned points, ascending."""
        return torch.where(self.count_per_cluster() == 0)[0]

    def n_used(self) -> int:
        """Number of distinct cluster ids actually used."""
        return int((self.count_per_cluster() > 0).sum().item())


@dataclass(frozen=True)
class RunResult:
    """Outcome of one engine invocation.

    ``representatives`` holds centroids for K-Means and the coordinates of
    the medoids for K-Medoids; ``medoid_indices`` is only set for the
    latter. ``history`` is the objective after every iteration (inertia
    per Lloyd step, total cost per accepted swap) and is non-increasing.
    """

    labels: Tensor
    representatives: Tensor
    iterations: int
    converged: bool
    objective: float
    medoid_indices: Optional[Tensor] = None
    history: Tuple[float, ...] = field(default_factory=tuple)

    @property
    def n_clusters(self) -> int:
        return self.representatives.shape[0]

    @property
    def assignments(self) -> AssignmentMatrix:
        return AssignmentMatrix(self.labels, self.n_clusters)


@dataclass(frozen=True)
class TimingRecord:
    """Wall-clock time of one engine run on one dataset size."""

    dataset_size: int
    method: Method
    elapsed_seconds: float

    def __post_init__(self):
        if self.elapsed_seconds < 0:
            raise ValueError(f"elapsed_seconds must be >= 0, got {self.elapsed_seconds}")

    def as_row(self) -> Tuple[int, str, float]:
        """(size, method, seconds) row for tabular export."""
        return (self.dataset_size, self.method.value, self.elapsed_seconds)
