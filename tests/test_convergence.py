# tests/test_convergence.py
"""
Convergence criteria behavior.

Covers:
- CentroidShift: summed per-centroid movement against tol, inclusive bound
- NoImprovement: strict gain required, relative slack for float noise

Pure logic checks on tiny tensors.
"""

from __future__ import annotations

import pytest
import torch

from clusterbench.utils.convergence import CentroidShift, NoImprovement


def _centers(rows):
    return torch.tensor(rows, dtype=torch.float64)


def test_centroid_shift_sums_row_norms():
    crit = CentroidShift(tol=1.0)
    prev = _centers([[0.0, 0.0], [5.0, 5.0]])
    # Each centroid moves 0.6, total 1.2 > tol
    cur = _centers([[0.6, 0.0], [5.0, 5.6]])

    assert not crit.check({'iteration': 0, 'previous_centers': prev, 'centers': cur})
    assert crit.history[-1]['shift'] == pytest.approx(1.2)


def test_centroid_shift_bound_is_inclusive():
    crit = CentroidShift(tol=0.5)
    prev = _centers([[0.0, 0.0]])
    cur = _centers([[0.0, 0.5]])
    assert crit.check({'previous_centers': prev, 'centers': cur})


def test_centroid_shift_zero_tol_requires_no_movement():
    crit = CentroidShift(tol=0.0)
    prev = _centers([[1.0, 2.0]])
    assert crit.check({'previous_centers': prev, 'centers': prev.clone()})
    assert not crit.check({'previous_centers': prev, 'centers': prev + 1e-9})


def test_centroid_shift_rejects_negative_tol():
    with pytest.raises(ValueError):
        CentroidShift(tol=-1e-3)


def test_centroid_shift_reset_clears_history():
    crit = CentroidShift(tol=0.1)
    prev = _centers([[0.0]])
    crit.check({'previous_centers': prev, 'centers': prev})
    assert len(crit.history) == 1
    crit.reset()
    assert crit.history == []


def test_no_improvement_strict_gain():
    crit = NoImprovement()
    assert not crit.check({'objective': 10.0, 'proposed_objective': 9.0})
    assert crit.check({'objective': 10.0, 'proposed_objective': 10.0})
    assert crit.check({'objective': 10.0, 'proposed_objective': 11.0})


def test_no_improvement_ignores_float_noise():
    crit = NoImprovement(rel_tol=1e-12)
    current = 1234.5
    assert crit.check({'objective': current, 'proposed_objective': current - 1e-13})
    assert not crit.check({'objective': current, 'proposed_objective': current - 1e-6})


def test_no_improvement_records_gain():
    crit = NoImprovement()
    crit.check({'iteration': 3, 'objective': 5.0, 'proposed_objective': 4.0})
    assert crit.history[-1] == {'iteration': 3, 'objective': 5.0, 'gain': 1.0}
