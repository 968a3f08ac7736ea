"""
K-medoids clustering (Partitioning Around Medoids).

Classic PAM on a precomputed pairwise distance matrix:

BUILD
    Greedy deterministic seeding (see ``BuildInit``).
SWAP
    Each pass scores every (medoid, non-medoid) exchange and applies the
    single best one if it strictly lowers the total cost. Passes repeat
    until no exchange helps or ``max_iter`` passes have run.

Medoids are always rows of the input; nothing is synthesized. Both phases
cost O(n^2) or more per pass, against K-means' O(n k) per iteration.
"""

from typing import Optional, Tuple, Union
import numpy as np
import torch
from torch import Tensor

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.data_structures import RunResult
from ..assignments.hard import HardAssignment
from ..distances.euclidean import distance_matrix
from ..initialization.build import BuildInit
from ..utils.convergence import NoImprovement
from ..utils.metrics import total_cost
from ..utils.validation import check_positive_int


def swap_costs(distances: Tensor, medoid_indices: Tensor) -> Tensor:
    """Total cost after every possible single swap.

    Args:
        distances: (n, n) pairwise distance matrix
        medoid_indices: (k,) current medoids

    Returns:
        (k, n) tensor whose entry [m, h] is the total cost after replacing
        medoid slot m with point h; entries for current medoids are inf.
    """
    n_points = distances.shape[0]
    n_medoids = medoid_indices.shape[0]

    to_medoids = distances[:, medoid_indices]                     # (n, k)
    nearest_slot = torch.argmin(to_medoids, dim=1)                # (n,)
    nearest = torch.gather(to_medoids, 1, nearest_slot.unsqueeze(1)).squeeze(1)

    if n_medoids > 1:
        masked = to_medoids.clone()
        masked.scatter_(1, nearest_slot.unsqueeze(1), float('inf'))
        second = masked.min(dim=1).values
    else:
        second = torch.full_like(nearest, float('inf'))

    # Points keep their nearest medoid unless h is closer ...
    keep = torch.minimum(nearest.unsqueeze(1), distances)        # (n, n)
    # ... except those whose nearest medoid is the one being removed
    lose = torch.minimum(second.unsqueeze(1), distances)         # (n, n)

    owners = torch.zeros(n_medoids, n_points, dtype=distances.dtype)
    owners[nearest_slot, torch.arange(n_points)] = 1.0

    costs = keep.sum(dim=0).unsqueeze(0) + owners @ (lose - keep)  # (k, n)
    costs[:, medoid_indices] = float('inf')
    return costs


class KMedoids(BaseClusteringAlgorithm):
    """K-medoids clustering with the PAM algorithm.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    max_iter : int, default=300
        Maximum number of swap passes
    verbose : int, default=0
        Verbosity level
    random_state : int or torch.Generator, optional
        Accepted for interface symmetry with KMeans; PAM is deterministic

    Attributes
    ----------
    medoid_indices_ : Tensor of shape (n_clusters,)
        Row indices of the medoids; cluster i is represented by
        ``medoid_indices_[i]``
    cluster_centers_ : Tensor of shape (n_clusters, n_features)
        Coordinates of the medoids
    labels_ : Tensor of shape (n_samples,)
        Cluster assignments for training data
    inertia_ : float
        Total distance from points to their medoid
    n_iter_ : int
        Number of accepted swaps
    """

    def __init__(self,
                 n_clusters: int,
                 max_iter: int = 300,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None):
        super().__init__(
            n_clusters=n_clusters,
            max_iter=max_iter,
            tol=0.0,
            verbose=verbose,
            random_state=random_state
        )
        self.assignment_strategy = HardAssignment()
        self.initialization_strategy = BuildInit()

    def _run(self, X: Tensor, generator: torch.Generator) -> RunResult:
        check_positive_int(self.max_iter, 'max_iter')
        n_points = X.shape[0]

        if self.n_clusters == n_points:
            medoids = torch.arange(n_points)
            return RunResult(
                labels=torch.arange(n_points),
                representatives=X[medoids].clone(),
                iterations=0,
                converged=True,
                objective=0.0,
                medoid_indices=medoids,
                history=(0.0,)
            )

        distances = distance_matrix(X)

        medoids = self.initialization_strategy.initialize(
            X, self.n_clusters, distances=distances
        )
        cost = total_cost(distances, medoids)
        history = [cost]

        if self.verbose >= 2:
            print(f"BUILD: medoids = {medoids.tolist()}, cost = {cost:.6f}")

        medoids, n_swaps, converged, history = self._swap(distances, medoids, history)

        labels, _ = self.assignment_strategy.compute_assignments(distances[:, medoids])

        return RunResult(
            labels=labels,
            representatives=X[medoids].clone(),
            iterations=n_swaps,
            converged=converged,
            objective=history[-1],
            medoid_indices=medoids,
            history=tuple(history)
        )

    def _swap(self, distances: Tensor, medoids: Tensor,
              history: list) -> Tuple[Tensor, int, bool, list]:
        """SWAP phase: apply the best improving exchange once per pass."""
        convergence_criterion = NoImprovement()
        medoids = medoids.clone()
        cost = history[-1]
        n_points = distances.shape[0]

        for iteration in range(self.max_iter):
            costs = swap_costs(distances, medoids)
            # Flattened argmin walks medoid slots first, candidates second,
            # so the first pair found wins exact ties
            best = int(torch.argmin(costs).item())
            slot, candidate = divmod(best, n_points)
            proposed = costs[slot, candidate].item()

            if convergence_criterion.check({
                'iteration': iteration,
                'objective': cost,
                'proposed_objective': proposed
            }):
                return medoids, iteration, True, history

            if self.verbose >= 2:
                print(f"Swap {iteration:3d}: medoid {medoids[slot].item()} -> {candidate}, "
                      f"cost = {proposed:.6f}")

            medoids[slot] = candidate
            cost = total_cost(distances, medoids)
            history.append(cost)

        return medoids, self.max_iter, False, history

    @property
    def medoid_indices_(self) -> Tensor:
        self._check_fitted()
        return self.result_.medoid_indices


def kmedoids(matrix: Union[Tensor, np.ndarray, list],
             k: int,
             rng: Optional[Union[int, torch.Generator]] = None,
             max_iterations: int = 300,
             verbose: int = 0) -> RunResult:
    """Run PAM and return its result.

    Args:
        matrix: (n, d) feature matrix (not modified)
        k: Number of clusters, 1 <= k <= n
        rng: Accepted for symmetry with ``kmeans``; unused
        max_iterations: Cap on swap passes
        verbose: Verbosity level

    Returns:
        RunResult with ``medoid_indices`` set
    """
    model = KMedoids(n_clusters=k, max_iter=max_iterations, random_state=rng, verbose=verbose)
    model.fit(matrix)
    return model.result_
