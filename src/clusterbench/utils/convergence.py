"""
Convergence criteria for the clustering engines.

- K-means stops when the summed movement of all centroids falls to the
  tolerance.
- PAM stops when the best candidate swap no longer strictly lowers cost.
"""

from typing import Dict, Any
import torch

from ..base.interfaces import ConvergenceCriterion


class CentroidShift(ConvergenceCriterion):
    """Convergence when the sum of centroid displacements is <= tol."""

    def __init__(self, tol: float = 1e-4):
        """
        Args:
            tol: Upper bound on total centroid movement between iterations
        """
        super().__init__()
        if tol < 0:
            raise ValueError(f"tol must be non-negative, got {tol}")
        self.tol = tol

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Compare previous and current centroids."""
        previous = current_state['previous_centers']
        current = current_state['centers']

        shift = torch.sqrt(torch.sum((current - previous) ** 2, dim=1)).sum().item()

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'shift': shift
        })

        return shift <= self.tol


class NoImprovement(ConvergenceCriterion):
    """Convergence when the best available move does not strictly improve.

    A move counts as an improvement only if it lowers the objective by more
    than ``rel_tol * max(1, |objective|)``; this keeps floating-point noise
    from sustaining endless zero-gain swaps.
    """

    def __init__(self, rel_tol: float = 1e-12):
        super().__init__()
        self.rel_tol = rel_tol

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check whether the proposed objective beats the current one."""
        current = current_state['objective']
        proposed = current_state['proposed_objective']
        gain = current - proposed

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'objective': current,
            'gain': gain
        })

        return not gain > self.rel_tol * max(1.0, abs(current))
