"""
K-means clustering algorithm.

Lloyd's algorithm with multi-start restarts: every restart seeds its
centroids with distinct random data points, alternates assignment and
mean-update steps until the centroids stop moving, and the restart with
the lowest inertia wins.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Optional, List, Union, Dict, Any
import numpy as np
import torch
from torch import Tensor

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.data_structures import RunResult
from ..base.exceptions import DimensionMismatch
from ..base.interfaces import ClusteringObjective
from ..assignments.hard import HardAssignment
from ..distances.euclidean import EuclideanDistance
from ..initialization.random import RandomInit
from ..updates.mean import MeanUpdater
from ..utils.convergence import CentroidShift
from ..utils.metrics import inertia
from ..utils.validation import check_positive_int, spawn_seeds, validate_data


class KMeansObjective(ClusteringObjective):
    """K-means objective: sum of squared distances to centroids."""

    def compute(self, points: Tensor, representatives: Tensor,
                labels: Tensor, **kwargs) -> Tensor:
        """Compute within-cluster sum of squares."""
        return torch.tensor(inertia(points, labels, representatives), dtype=points.dtype)


class KMeans(BaseClusteringAlgorithm):
    """K-means clustering algorithm.

    Classic K-means that partitions data into K clusters by minimizing
    within-cluster sum of squared distances.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    n_init : int, default=10
        Number of restarts; the lowest-inertia run is kept (first on ties)
    init : str or array-like, default='random'
        Initialization method:
        - 'random' : k distinct data points sampled uniformly
        - array of shape (n_clusters, n_features) : Use as initial centers
          (forces a single run)
    max_iter : int, default=100
        Maximum number of Lloyd iterations per restart
    tol : float, default=1e-4
        Convergence tolerance on the summed centroid movement
    verbose : int, default=0
        Verbosity level
    random_state : int or torch.Generator, optional
        Random seed for reproducibility
    n_jobs : int, default=1
        Number of worker threads the restarts are spread over. Results do
        not depend on this value.

    Attributes
    ----------
    cluster_centers_ : Tensor of shape (n_clusters, n_features)
        Cluster centroids
    labels_ : Tensor of shape (n_samples,)
        Cluster assignments for training data
    inertia_ : float
        Sum of squared distances to the assigned cluster center
    n_iter_ : int
        Number of centroid updates of the winning restart. With k equal
        to the number of distinct points this is 0; duplicate rows can
        leave a centroid empty at first, and its reseed costs one update.
    converged_ : bool
        Whether the winning restart met the tolerance
    restart_results_ : list of RunResult
        Outcome of every restart, in restart order
    """

    def __init__(self,
                 n_clusters: int,
                 n_init: int = 10,
                 init: Union[str, Tensor, np.ndarray] = 'random',
                 max_iter: int = 100,
                 tol: float = 1e-4,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 n_jobs: int = 1):
        """Initialize K-means algorithm."""
        super().__init__(
            n_clusters=n_clusters,
            max_iter=max_iter,
            tol=tol,
            verbose=verbose,
            random_state=random_state
        )
        self.n_init = n_init
        self.init = init
        self.n_jobs = n_jobs
        self.restart_results_: List[RunResult] = []

        self.assignment_strategy = HardAssignment()
        self.update_strategy = MeanUpdater()
        self.initialization_strategy = RandomInit()
        self.distance = EuclideanDistance(squared=True)
        self.objective = KMeansObjective()

    def _validate_params(self, X: Tensor) -> Optional[Tensor]:
        check_positive_int(self.n_init, 'n_init')
        check_positive_int(self.max_iter, 'max_iter')
        check_positive_int(self.n_jobs, 'n_jobs')
        if self.tol < 0:
            raise ValueError(f"tol must be non-negative, got {self.tol}")

        if isinstance(self.init, str):
            if self.init != 'random':
                raise ValueError(f"Unknown init method: {self.init}")
            return None

        centers = validate_data(self.init, copy=True)
        if centers.shape[1] != X.shape[1]:
            raise DimensionMismatch(X.shape[1], centers.shape[1])
        if centers.shape[0] != self.n_clusters:
            raise ValueError(f"Initial centers has {centers.shape[0]} clusters, "
                             f"but n_clusters={self.n_clusters}")
        return centers

    def _run(self, X: Tensor, generator: torch.Generator) -> RunResult:
        initial_centers = self._validate_params(X)
        n_runs = 1 if initial_centers is not None else self.n_init

        # Seeds are drawn up front so threaded and sequential runs agree
        seeds = spawn_seeds(generator, n_runs)

        if self.n_jobs > 1 and n_runs > 1:
            with ThreadPoolExecutor(max_workers=min(self.n_jobs, n_runs)) as executor:
                results = list(executor.map(
                    lambda args: self._lloyd(X, args[1], args[0], initial_centers),
                    enumerate(seeds)
                ))
        else:
            results = [self._lloyd(X, seed, restart, initial_centers)
                       for restart, seed in enumerate(seeds)]

        self.restart_results_ = results

        best = results[0]
        for result in results[1:]:
            if result.objective < best.objective:
                best = result

        return best

    def _lloyd(self, X: Tensor, seed: int, restart: int = 0,
               initial_centers: Optional[Tensor] = None) -> RunResult:
        """One restart of Lloyd's algorithm."""
        generator = torch.Generator()
        generator.manual_seed(seed)

        if initial_centers is not None:
            centers = initial_centers.clone()
        else:
            indices = self.initialization_strategy.initialize(X, self.n_clusters, generator=generator)
            centers = X[indices].clone()

        convergence_criterion = CentroidShift(tol=self.tol)
        history = []
        converged = False
        n_iter = self.max_iter

        for iteration in range(self.max_iter):
            # Assignment step
            squared = self.distance.compute(X, centers)
            labels, min_squared = self.assignment_strategy.compute_assignments(squared)
            history.append(self.objective.compute(X, centers, labels).item())

            # Update step
            new_centers = self.update_strategy.update(
                X, labels, centers, min_distances=torch.sqrt(min_squared)
            )

            converged = convergence_criterion.check({
                'iteration': iteration,
                'previous_centers': centers,
                'centers': new_centers
            })
            centers = new_centers

            if self.verbose >= 2:
                print(f"Restart {restart:2d} iteration {iteration:3d}: "
                      f"inertia = {history[-1]:.6f}")

            if converged:
                n_iter = iteration
                break

        # Final assignment against the finished centroids
        squared = self.distance.compute(X, centers)
        labels, _ = self.assignment_strategy.compute_assignments(squared)
        objective = self.objective.compute(X, centers, labels).item()
        history.append(objective)

        if self.verbose >= 2:
            print(f"Restart {restart:2d} finished: inertia = {objective:.6f}, "
                  f"converged = {converged}")

        return RunResult(
            labels=labels,
            representatives=centers,
            iterations=n_iter,
            converged=converged,
            objective=objective,
            history=tuple(history)
        )

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        params = super().get_params(deep)
        params.update({'n_init': self.n_init, 'init': self.init, 'n_jobs': self.n_jobs})
        return params

    def score(self, X: Tensor, y: Optional[Tensor] = None) -> float:
        """Opposite of the value of X on the K-means objective.

        Parameters
        ----------
        X : Tensor of shape (n_samples, n_features)
            New data
        y : Ignored
            Not used

        Returns
        -------
        score : float
            Negative of sum of squared distances to centers
        """
        X = validate_data(X)
        labels = self.predict(X)
        return -inertia(X, labels, self.cluster_centers_)


def kmeans(matrix: Union[Tensor, np.ndarray, list],
           k: int,
           restarts: int = 10,
           max_iterations: int = 100,
           tolerance: float = 1e-4,
           rng: Optional[Union[int, torch.Generator]] = None,
           n_jobs: int = 1,
           verbose: int = 0) -> RunResult:
    """Run K-means and return the best restart.

    Args:
        matrix: (n, d) feature matrix (not modified)
        k: Number of clusters, 1 <= k <= n
        restarts: Number of independent random starts, >= 1
        max_iterations: Iteration cap per restart
        tolerance: Stop once summed centroid movement is <= tolerance
        rng: Seed or generator
        n_jobs: Worker threads for the restarts
        verbose: Verbosity level

    Returns:
        RunResult of the lowest-inertia restart
    """
    model = KMeans(n_clusters=k, n_init=restarts, max_iter=max_iterations,
                   tol=tolerance, random_state=rng, n_jobs=n_jobs, verbose=verbose)
    model.fit(matrix)
    return model.result_
