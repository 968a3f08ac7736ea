# tests/utils.py
"""
Small, reusable helpers used across the clusterbench test suite.

Functions:
- labels_equal_up_to_perm(y1, y2, k): whether two labelings differ only by renaming ids.
- perm_invariant_accuracy(y_pred, y_true, k): best accuracy over all id renamings.
- is_partition(labels, n, k): every index has exactly one id in [0, k).
- is_non_increasing(values, atol): monotone sequence check with float slack.
- time_block / print_timing: re-exported timing helpers.
"""

from __future__ import annotations

import itertools
from typing import Sequence

import numpy as np
import torch

from clusterbench.utils.timing import time_block, print_timing  # noqa: F401


def _to_numpy(x) -> np.ndarray:
    if isinstance(x, torch.Tensor):
        return x.detach().cpu().numpy()
    return np.asarray(x)


def labels_equal_up_to_perm(y1, y2, k: int) -> bool:
    """Return True if y2 can be relabeled to equal y1 exactly."""
    y1 = _to_numpy(y1)
    y2 = _to_numpy(y2)
    for perm in itertools.permutations(range(k)):
        mapping = np.array(perm)
        if np.array_equal(y1, mapping[y2]):
            return True
    return False


def perm_invariant_accuracy(y_pred, y_true, k: int) -> float:
    """
    Best accuracy over relabelings of the predicted ids.

    O(k!) brute force; the suite keeps k small.
    """
    y_pred = _to_numpy(y_pred)
    y_true = _to_numpy(y_true)
    if y_pred.shape != y_true.shape:
        raise ValueError(f"Shape mismatch: {y_pred.shape} vs {y_true.shape}")
    best = 0.0
    for perm in itertools.permutations(range(k)):
        mapping = np.array(perm)
        best = max(best, float(np.mean(mapping[y_pred] == y_true)))
    return best


def is_partition(labels, n: int, k: int) -> bool:
    """Every one of the n indices carries exactly one id in [0, k)."""
    labels = _to_numpy(labels)
    return (labels.shape == (n,)
            and labels.min() >= 0
            and labels.max() < k
            and len(np.unique(labels)) <= k)


def is_non_increasing(values: Sequence[float], atol: float = 1e-9) -> bool:
    """values[i+1] <= values[i] (+ atol * max(1, |values[i]|)) for all i."""
    return all(b <= a + atol * max(1.0, abs(a)) for a, b in zip(values, values[1:]))
