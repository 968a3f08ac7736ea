"""
Input validation and preprocessing utilities.

Provides functions for validating and preprocessing data before clustering,
including handling of edge cases, data type conversion, and sanity checks.
"""

from typing import Optional, Union, Tuple
import torch
from torch import Tensor
import numpy as np

from ..base.exceptions import EmptyInput, InvalidK


def validate_data(X: Union[Tensor, np.ndarray, list],
                  dtype: torch.dtype = torch.float64,
                  ensure_2d: bool = True,
                  ensure_finite: bool = True,
                  copy: bool = False) -> Tensor:
    """Validate and convert input data to a CPU tensor.

    Args:
        X: Input data (tensor, numpy array, or list)
        dtype: Target data type
        ensure_2d: Whether to ensure 2D shape
        ensure_finite: Whether to check for inf/nan
        copy: Whether to force a copy

    Returns:
        Validated tensor

    Raises:
        EmptyInput: If X has no rows
        ValueError: If validation fails
    """
    # Convert to tensor
    if isinstance(X, Tensor):
        X = X.detach().to(device='cpu', dtype=dtype)
    elif isinstance(X, np.ndarray):
        X = torch.from_numpy(np.asarray(X, dtype=np.float64)).to(dtype=dtype)
    elif isinstance(X, (list, tuple)):
        if len(X) == 0:
            raise EmptyInput()
        try:
            X = torch.tensor(X, dtype=dtype)
        except ValueError as exc:
            raise ValueError(f"Rows must all have the same number of features: {exc}") from exc
    else:
        raise TypeError(f"Cannot convert {type(X)} to tensor")

    if copy:
        X = X.clone()

    # Ensure 2D
    if ensure_2d:
        if X.dim() == 1:
            X = X.unsqueeze(1)
        elif X.dim() != 2:
            raise ValueError(f"Expected 2D array, got {X.dim()}D")

    if X.shape[0] == 0:
        raise EmptyInput()
    if ensure_2d and X.shape[1] == 0:
        raise ValueError("Found 0 features, but need at least 1")

    # Check for finite values
    if ensure_finite:
        if torch.isnan(X).any():
            raise ValueError("Input contains NaN values")
        if torch.isinf(X).any():
            raise ValueError("Input contains infinite values")

    return X


def check_n_clusters(n_clusters: int, n_samples: int) -> None:
    """Validate number of clusters.

    Args:
        n_clusters: Number of clusters
        n_samples: Number of samples

    Raises:
        TypeError: If n_clusters is not an integer
        InvalidK: If n_clusters is outside [1, n_samples]
    """
    if isinstance(n_clusters, bool) or not isinstance(n_clusters, (int, np.integer)):
        raise TypeError(f"n_clusters must be int, got {type(n_clusters)}")

    if n_clusters < 1:
        raise InvalidK(n_clusters)

    if n_clusters > n_samples:
        raise InvalidK(n_clusters, n_samples)


def check_positive_int(value: int, name: str) -> None:
    """Raise ValueError unless value is an integer >= 1."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be int, got {type(value)}")
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> torch.Generator:
    """Create generator from random state.

    Args:
        random_state: Seed, generator, or None for a fresh nondeterministic seed

    Returns:
        Generator
    """
    if random_state is None:
        generator = torch.Generator()
        generator.seed()
        return generator
    elif isinstance(random_state, (int, np.integer)) and not isinstance(random_state, bool):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    elif isinstance(random_state, torch.Generator):
        return random_state
    else:
        raise TypeError(f"random_state must be int or Generator, got {type(random_state)}")


def spawn_seeds(generator: torch.Generator, n: int) -> list:
    """Draw n independent integer seeds from a generator."""
    return torch.randint(0, 2 ** 62, (n,), generator=generator).tolist()


def scale_data(X: Tensor, method: str = 'standard',
               return_params: bool = False) -> Union[Tensor, Tuple[Tensor, dict]]:
    """Scale/normalize data.

    Args:
        X: (n, d) data tensor
        method: Scaling method
            - 'standard': Zero mean, unit (sample) standard deviation
            - 'minmax': Scale to [0, 1]
        return_params: Whether to return scaling parameters

    Returns:
        Scaled data and optionally scaling parameters
    """
    if method == 'standard':
        mean = X.mean(dim=0, keepdim=True)
        if X.shape[0] > 1:
            std = X.std(dim=0, keepdim=True)
        else:
            std = torch.zeros_like(mean)
        std = torch.where(std == 0, torch.ones_like(std), std)
        X_scaled = (X - mean) / std
        params = {'mean': mean, 'std': std}

    elif method == 'minmax':
        min_vals = X.min(dim=0, keepdim=True)[0]
        max_vals = X.max(dim=0, keepdim=True)[0]
        range_vals = max_vals - min_vals
        range_vals = torch.where(range_vals == 0, torch.ones_like(range_vals), range_vals)
        X_scaled = (X - min_vals) / range_vals
        params = {'min': min_vals, 'range': range_vals}

    else:
        raise ValueError(f"Unknown scaling method: {method}")

    if return_params:
        return X_scaled, params
    else:
        return X_scaled

