"""
Base class for the clustering engines.

Provides the shared estimator skeleton: input validation, random-state
handling, progress reporting, and the fitted attributes exposed after a
run. Subclasses only implement ``_run``, a pure function of the validated
matrix and a generator that returns a RunResult.
"""

from abc import abstractmethod
from typing import Optional, Dict, Any, Union
import time
import warnings

import numpy as np
import torch
from torch import Tensor

from .data_structures import RunResult
from ..assignments.hard import HardAssignment
from ..distances.euclidean import EuclideanDistance
from ..utils.validation import validate_data, check_n_clusters, check_random_state


class BaseClusteringAlgorithm:
    """Base class for partition-based clustering engines.

    Subclasses need to implement ``_run(X, generator) -> RunResult``.
    """

    def __init__(self,
                 n_clusters: int,
                 max_iter: int = 100,
                 tol: float = 1e-4,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None):
        """
        Args:
            n_clusters: Number of clusters K
            max_iter: Maximum iterations (Lloyd steps or swap passes)
            tol: Convergence tolerance
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
            random_state: Seed or generator for reproducibility
        """
        self.n_clusters = n_clusters
        self.max_iter = max_iter
        self.tol = tol
        self.verbose = verbose
        self.random_state = random_state

        # Algorithm state
        self.fitted_ = False
        self.result_: Optional[RunResult] = None
        self.n_iter_ = 0
        self.converged_ = False
        self.labels_: Optional[Tensor] = None
        self.history_ = []

    @abstractmethod
    def _run(self, X: Tensor, generator: torch.Generator) -> RunResult:
        """Run the algorithm on validated data.

        Args:
            X: (n, d) validated float64 tensor; must not be modified
            generator: Random source for this fit

        Returns:
            RunResult of the fit
        """
        pass

    def fit(self, X: Union[Tensor, np.ndarray, list], y: Optional[Tensor] = None) -> 'BaseClusteringAlgorithm':
        """Fit the clustering model.

        Args:
            X: (n, d) data
            y: Ignored (for sklearn compatibility)

        Returns:
            Self

        Raises:
            EmptyInput: If X has no rows
            InvalidK: If n_clusters is not in [1, n]
        """
        X = validate_data(X)
        check_n_clusters(self.n_clusters, X.shape[0])
        generator = check_random_state(self.random_state)

        if self.verbose:
            print(f"Fitting {self.__class__.__name__} with {self.n_clusters} clusters "
                  f"on {X.shape[0]} points...")

        start_time = time.perf_counter()
        result = self._run(X, generator)
        total_time = time.perf_counter() - start_time

        self.result_ = result
        self.labels_ = result.labels
        self.n_iter_ = result.iterations
        self.converged_ = result.converged
        self.history_ = list(result.history)
        self.fitted_ = True

        if self.verbose:
            if not result.converged:
                warnings.warn(f"{self.__class__.__name__} failed to converge after "
                              f"{self.max_iter} iterations")
            print(f"Objective: {result.objective:.6f} after {result.iterations} iterations")
            print(f"Total fitting time: {total_time:.3f}s")

        return self

    def fit_predict(self, X: Union[Tensor, np.ndarray, list], y: Optional[Tensor] = None) -> Tensor:
        """Fit and return cluster assignments.

        Args:
            X: (n, d) data
            y: Ignored

        Returns:
            (n,) tensor of cluster assignments
        """
        self.fit(X)
        return self.labels_

    def predict(self, X: Union[Tensor, np.ndarray, list]) -> Tensor:
        """Assign new points to the nearest fitted representative.

        Args:
            X: (n, d) data

        Returns:
            (n,) tensor of cluster assignments
        """
        self._check_fitted()
        X = validate_data(X)

        distances = EuclideanDistance(squared=True).compute(X, self.result_.representatives)
        labels, _ = HardAssignment().compute_assignments(distances)
        return labels

    def _check_fitted(self) -> None:
        if not self.fitted_:
            raise RuntimeError("Model must be fitted before use")

    @property
    def cluster_centers_(self) -> Tensor:
        """Get cluster centroids (K-means) or medoid coordinates (K-medoids)."""
        self._check_fitted()
        return self.result_.representatives

    @property
    def inertia_(self) -> float:
        """Get final objective value."""
        self._check_fitted()
        return self.result_.objective

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'n_clusters': self.n_clusters,
            'max_iter': self.max_iter,
            'tol': self.tol,
            'verbose': self.verbose,
            'random_state': self.random_state
        }

    def set_params(self, **params) -> 'BaseClusteringAlgorithm':
        """Set parameters (sklearn compatibility)."""
        valid = self.get_params()
        for key, value in params.items():
            if key not in valid:
                raise ValueError(f"Invalid parameter {key!r} for {self.__class__.__name__}")
            setattr(self, key, value)
        return self
