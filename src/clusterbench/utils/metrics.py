"""
Clustering evaluation metrics.

Provides the objectives the engines minimize (inertia for K-means, total
medoid cost for PAM) and external metrics that compare a clustering to
ground-truth blob labels.
"""

from typing import Tuple
import torch
from torch import Tensor


def inertia(X: Tensor, labels: Tensor, centers: Tensor) -> float:
    """Compute sum of squared distances to assigned centers (inertia).

    Args:
        X: (n, d) data points
        labels: (n,) cluster labels
        centers: (k, d) cluster centers

    Returns:
        Total inertia (lower is better)
    """
    diff = X - centers[labels]
    return torch.sum(diff * diff).item()


def total_cost(distances: Tensor, medoid_indices: Tensor) -> float:
    """Sum over all points of the distance to the nearest medoid.

    Args:
        distances: (n, n) pairwise distance matrix
        medoid_indices: (k,) row indices of the medoids

    Returns:
        Total assignment cost (lower is better)
    """
    return distances[:, medoid_indices].min(dim=1).values.sum().item()


# External metrics (require ground truth)

def contingency_matrix(labels_true: Tensor, labels_pred: Tensor) -> Tensor:
    """Build contingency matrix for comparing clusterings.

    Args:
        labels_true: (n,) true labels
        labels_pred: (n,) predicted labels

    Returns:
        Contingency matrix C where C[i,j] is the number of samples
        with true label i and predicted label j
    """
    labels_true = torch.as_tensor(labels_true).long()
    labels_pred = torch.as_tensor(labels_pred).long()
    if labels_true.shape != labels_pred.shape:
        raise ValueError(f"Label vectors differ in length: {labels_true.shape[0]} "
                         f"vs {labels_pred.shape[0]}")

    n_true = labels_true.max().item() + 1
    n_pred = labels_pred.max().item() + 1

    flat = labels_true * n_pred + labels_pred
    counts = torch.bincount(flat, minlength=n_true * n_pred)
    return counts.reshape(n_true, n_pred)


def adjusted_rand_score(labels_true: Tensor, labels_pred: Tensor) -> float:
    """Compute Adjusted Rand Index.

    ARI is 1.0 for perfect match, 0.0 for random labeling.

    Args:
        labels_true: (n,) ground truth labels
        labels_pred: (n,) predicted labels

    Returns:
        ARI score in [-1, 1]
    """
    contingency = contingency_matrix(labels_true, labels_pred).double()

    row_sum = contingency.sum(dim=1)
    col_sum = contingency.sum(dim=0)
    n = contingency.sum()

    sum_comb = torch.sum(contingency * (contingency - 1)) / 2
    sum_comb_r = torch.sum(row_sum * (row_sum - 1)) / 2
    sum_comb_c = torch.sum(col_sum * (col_sum - 1)) / 2

    if n < 2:
        return 1.0

    expected_index = sum_comb_r * sum_comb_c / (n * (n - 1) / 2)
    max_index = (sum_comb_r + sum_comb_c) / 2

    if max_index - expected_index == 0:
        return 1.0

    ari = (sum_comb - expected_index) / (max_index - expected_index)
    return ari.item()


def best_match_recovery(labels_true: Tensor, labels_pred: Tensor) -> Tuple[Tensor, bool]:
    """Per-true-cluster share of points landing in its dominant predicted id.

    Args:
        labels_true: (n,) ground truth labels
        labels_pred: (n,) predicted labels

    Returns:
        (recovery, distinct): recovery[i] is the fraction of true cluster i
        assigned to its most common predicted id; distinct is True when no
        two true clusters share a dominant id.
    """
    contingency = contingency_matrix(labels_true, labels_pred)
    sizes = contingency.sum(dim=1).clamp(min=1)
    top, dominant = contingency.max(dim=1)
    recovery = top.double() / sizes.double()
    distinct = torch.unique(dominant).numel() == dominant.numel()
    return recovery, distinct
