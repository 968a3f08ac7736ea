"""
Core interfaces for the clustering engines.

This module defines the abstract base classes that the pluggable pieces of
K-Means and K-Medoids implement, so both engines share one vocabulary for
distances, seeding, assignment, updates, convergence and objectives.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple, Dict, Any
import torch
from torch import Tensor


class DistanceMetric(ABC):
    """Abstract base class for distance computations."""

    @abstractmethod
    def compute(self, points: Tensor, representatives: Tensor,
                **kwargs) -> Tensor:
        """Compute distances from points to representatives.

        Args:
            points: (n, d) tensor of points
            representatives: (k, d) tensor of centroids or medoid coordinates
            **kwargs: Metric-specific parameters

        Returns:
            (n, k) tensor of distances
        """
        pass


class InitializationStrategy(ABC):
    """Abstract base class for seeding strategies.

    Both engines seed from existing data points, so strategies return row
    indices into ``points`` rather than synthesized coordinates.
    """

    @abstractmethod
    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> Tensor:
        """Choose initial representatives.

        Args:
            points: (n, d) tensor of data points
            n_clusters: Number of clusters to initialize
            generator: Random source (ignored by deterministic strategies)
            **kwargs: Strategy-specific parameters

        Returns:
            (n_clusters,) long tensor of distinct row indices
        """
        pass


class AssignmentStrategy(ABC):
    """Abstract base class for point-to-cluster assignment strategies."""

    @abstractmethod
    def compute_assignments(self, distances: Tensor,
                            **kwargs) -> Tuple[Tensor, Tensor]:
        """Assign points given their distances to every representative.

        Args:
            distances: (n, k) tensor of point-to-representative distances
            **kwargs: Strategy-specific parameters

        Returns:
            (labels, min_distances): (n,) long tensor and (n,) tensor
        """
        pass


class ParameterUpdater(ABC):
    """Abstract base class for representative update strategies."""

    @abstractmethod
    def update(self, points: Tensor, labels: Tensor,
               representatives: Tensor, **kwargs) -> Tensor:
        """Recompute representatives from the current assignment.

        Args:
            points: (n, d) tensor of data points
            labels: (n,) cluster assignments
            representatives: (k, d) current representatives (not modified)
            **kwargs: Update-specific parameters

        Returns:
            (k, d) tensor of new representatives
        """
        pass


class ConvergenceCriterion(ABC):
    """Abstract base class for convergence checking."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if algorithm has converged.

        Args:
            current_state: Dictionary containing current algorithm state

        Returns:
            True if converged, False otherwise
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []


class ClusteringObjective(ABC):
    """Abstract base class for clustering objective functions."""

    @abstractmethod
    def compute(self, points: Tensor, representatives: Tensor,
                labels: Tensor, **kwargs) -> Tensor:
        """Compute objective function value.

        Args:
            points: (n, d) tensor of data points
            representatives: (k, d) tensor of cluster representatives
            labels: (n,) hard assignments

        Returns:
            Scalar objective value
        """
        pass
