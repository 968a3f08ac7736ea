"""
Synthetic Gaussian-blob datasets for the benchmark.

Three isotropic blobs at fixed means with a shared standard deviation.
Blob sizes are as equal as possible, so a sweep over n compares like with
like; points are concatenated blob by blob, so ground-truth labels are
contiguous runs.
"""

from typing import Optional, Sequence, Tuple, Union
import torch
from torch import Tensor

from ..base.exceptions import EmptyInput
from ..utils.validation import check_positive_int, check_random_state, scale_data, validate_data

DEFAULT_CENTERS = ((2.0, 2.0), (6.0, 6.0), (10.0, 2.0))
DEFAULT_STD = 0.5


def blob_sizes(n: int, n_blobs: int) -> list:
    """Split n into n_blobs near-equal parts; leftovers go to the first blobs."""
    base, extra = divmod(n, n_blobs)
    return [base + (1 if i < extra else 0) for i in range(n_blobs)]


def make_blobs(n: int,
               seed: Optional[Union[int, torch.Generator]] = None,
               centers: Sequence[Sequence[float]] = DEFAULT_CENTERS,
               std: float = DEFAULT_STD) -> Tuple[Tensor, Tensor]:
    """
    Sample labeled Gaussian blobs.

    Parameters
    ----------
    n : int
        Total number of points (each blob gets n // n_blobs, the remainder
        is spread over the first blobs).
    seed : int, torch.Generator or None
        Random source; a fixed int seed reproduces the same matrix.
    centers : sequence of (d,) means
        Blob means, default (2,2), (6,6), (10,2).
    std : float
        Shared per-axis standard deviation, default 0.5.

    Returns
    -------
    X : (n, d) float64 tensor
        Points, blob 0 first.
    y : (n,) int64 tensor
        Generating blob of every point.
    """
    if n == 0:
        raise EmptyInput("Cannot generate a dataset with 0 points")
    check_positive_int(n, 'n')
    if std < 0:
        raise ValueError(f"std must be non-negative, got {std}")

    generator = check_random_state(seed)
    means = torch.as_tensor(centers, dtype=torch.float64)
    if means.dim() != 2:
        raise ValueError(f"centers must be 2D, got {means.dim()}D")
    n_blobs, dimension = means.shape

    points = []
    labels = []
    for blob, size in enumerate(blob_sizes(n, n_blobs)):
        noise = torch.randn(size, dimension, generator=generator, dtype=torch.float64)
        points.append(means[blob] + std * noise)
        labels.append(torch.full((size,), blob, dtype=torch.long))

    return torch.cat(points, dim=0), torch.cat(labels, dim=0)


def generate(n: int, seed: Optional[Union[int, torch.Generator]] = None) -> Tensor:
    """Feature matrix of the three default blobs (labels dropped)."""
    X, _ = make_blobs(n, seed)
    return X


def standardize(matrix: Union[Tensor, list]) -> Tensor:
    """Center every column on zero and scale it to unit standard deviation.

    Returns a new tensor; the input is left untouched. Constant columns are
    centered but not scaled.
    """
    X = validate_data(matrix)
    return scale_data(X, method='standard')
