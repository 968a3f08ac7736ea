# tests/test_kmedoids.py
"""
K-medoids (PAM): BUILD seeding, SWAP improvement, medoid invariants.
"""

from __future__ import annotations

import importlib
import itertools

import pytest
import torch

from clusterbench import InvalidK, KMedoids, distance_matrix, kmedoids
from clusterbench.algorithms import swap_costs
from clusterbench.initialization import BuildInit
from clusterbench.utils import total_cost
from utils import is_partition

# The package re-exports the kmedoids function under the submodule name
kmedoids_module = importlib.import_module("clusterbench.algorithms.kmedoids")


def _line():
    """Two groups of three on a line: {0, 1, 2} and {10, 11, 12}."""
    return torch.tensor([[0.0], [1.0], [2.0], [10.0], [11.0], [12.0]], dtype=torch.float64)


def test_build_is_greedy_and_breaks_ties_low():
    X = _line()
    # Points 2 and 10 tie as the single best medoid; the lower index wins
    medoids = BuildInit().initialize(X, 2)
    assert medoids.tolist() == [2, 4]


def test_build_accepts_precomputed_distances():
    X = _line()
    D = distance_matrix(X)
    assert torch.equal(BuildInit().initialize(X, 2, distances=D),
                       BuildInit().initialize(X, 2))


def test_swap_improves_build_solution():
    X = _line()
    pam = KMedoids(n_clusters=2).fit(X)

    assert sorted(pam.medoid_indices_.tolist()) == [1, 4]
    assert pam.history_ == [5.0, 4.0]
    assert pam.n_iter_ == 1
    assert pam.converged_
    assert pam.inertia_ == 4.0
    assert pam.labels_.tolist() == [0, 0, 0, 1, 1, 1]


def test_swap_costs_match_brute_force(rng):
    X = torch.randn(12, 2, generator=rng, dtype=torch.float64)
    D = distance_matrix(X)
    medoids = torch.tensor([0, 5, 9])

    costs = swap_costs(D, medoids)

    assert costs.shape == (3, 12)
    for slot, h in itertools.product(range(3), range(12)):
        if h in medoids.tolist():
            assert costs[slot, h] == float('inf')
            continue
        swapped = medoids.clone()
        swapped[slot] = h
        assert costs[slot, h].item() == pytest.approx(total_cost(D, swapped), rel=1e-12)


def test_swap_costs_single_medoid():
    X = _line()
    D = distance_matrix(X)
    costs = swap_costs(D, torch.tensor([0]))
    assert costs[0, 2].item() == pytest.approx(D[:, 2].sum().item())


def test_medoids_are_input_rows(blobs_300):
    X, _ = blobs_300
    result = kmedoids(X, 3)

    medoids = result.medoid_indices
    assert medoids.shape == (3,)
    assert len(set(medoids.tolist())) == 3
    assert torch.equal(result.representatives, X[medoids])
    assert is_partition(result.labels, 300, 3)
    # Every medoid belongs to its own cluster
    assert result.labels[medoids].tolist() == [0, 1, 2]


def test_result_is_a_swap_local_optimum(blobs_300):
    X, _ = blobs_300
    result = kmedoids(X, 4)
    D = distance_matrix(X)

    assert result.converged
    assert result.objective == pytest.approx(total_cost(D, result.medoid_indices))
    best_swap = swap_costs(D, result.medoid_indices).min().item()
    assert best_swap >= result.objective - 1e-9 * result.objective


def test_cost_history_strictly_decreases(blobs_300):
    X, _ = blobs_300
    result = kmedoids(X, 5)

    assert len(result.history) == result.iterations + 1
    assert all(b < a for a, b in zip(result.history, result.history[1:]))


def test_deterministic_and_rng_independent(blobs_300):
    X, _ = blobs_300
    a = kmedoids(X, 3, rng=1)
    b = kmedoids(X, 3, rng=2)

    assert torch.equal(a.medoid_indices, b.medoid_indices)
    assert torch.equal(a.labels, b.labels)
    assert a.objective == b.objective


def test_k_equals_n_gives_singletons():
    X = torch.tensor([[0.0, 1.0], [2.0, 3.0], [4.0, 5.0]], dtype=torch.float64)
    result = kmedoids(X, 3)

    assert result.medoid_indices.tolist() == [0, 1, 2]
    assert result.labels.tolist() == [0, 1, 2]
    assert result.objective == 0.0
    assert result.converged
    assert result.iterations == 0


def test_single_medoid_minimizes_total_distance():
    X = _line()
    result = kmedoids(X, 1)
    # Points 2 and 3 (values 2 and 10) tie; BUILD keeps the lower index
    assert result.medoid_indices.tolist() == [2]
    assert torch.all(result.labels == 0)


def test_swap_pass_cap():
    pam = KMedoids(n_clusters=2, max_iter=1).fit(_line())
    assert pam.n_iter_ == 1
    assert not pam.converged_


@pytest.mark.parametrize("k", [0, 7])
def test_invalid_k_raises_before_distance_matrix(monkeypatch, k):
    def fail(*args, **kwargs):
        raise AssertionError("distance matrix built for an invalid k")

    monkeypatch.setattr(kmedoids_module, "distance_matrix", fail)

    with pytest.raises(InvalidK):
        kmedoids(_line(), k)


def test_engine_uses_module_distance_matrix(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("module distance_matrix called")

    monkeypatch.setattr(kmedoids_module, "distance_matrix", fail)

    with pytest.raises(AssertionError, match="module distance_matrix"):
        kmedoids(_line(), 2)


def test_input_not_modified():
    X = _line()
    before = X.clone()
    kmedoids(X, 2)
    assert torch.equal(X, before)


def test_predict_uses_medoids():
    pam = KMedoids(n_clusters=2).fit(_line())
    new = torch.tensor([[-5.0], [20.0]], dtype=torch.float64)
    labels = pam.predict(new)
    assert labels.tolist() == [pam.labels_[0].item(), pam.labels_[5].item()]
