"""
Input validation: conversion, typed errors, random state, scaling.
"""

from __future__ import annotations

import numpy as np
import pytest
import torch

from clusterbench.base.exceptions import EmptyInput, InvalidK
from clusterbench.utils.validation import (
    check_n_clusters,
    check_positive_int,
    check_random_state,
    scale_data,
    spawn_seeds,
    validate_data,
)


def test_validate_data_converts_inputs():
    from_list = validate_data([[1, 2], [3, 4]])
    from_numpy = validate_data(np.array([[1, 2], [3, 4]], dtype=np.float32))
    from_tensor = validate_data(torch.tensor([[1, 2], [3, 4]]))

    for X in (from_list, from_numpy, from_tensor):
        assert X.dtype == torch.float64
        assert X.shape == (2, 2)
        assert X.tolist() == [[1.0, 2.0], [3.0, 4.0]]


def test_validate_data_promotes_1d_to_column():
    assert validate_data([1.0, 2.0, 3.0]).shape == (3, 1)


@pytest.mark.parametrize("empty", [[], np.zeros((0, 2)), torch.zeros(0, 2)])
def test_validate_data_empty_input(empty):
    with pytest.raises(EmptyInput):
        validate_data(empty)


def test_validate_data_rejects_ragged_rows():
    with pytest.raises(ValueError):
        validate_data([[1.0, 2.0], [3.0]])


def test_validate_data_rejects_non_finite():
    with pytest.raises(ValueError, match="NaN"):
        validate_data([[1.0, float("nan")]])
    with pytest.raises(ValueError, match="infinite"):
        validate_data([[1.0, float("inf")]])


def test_validate_data_rejects_unknown_type():
    with pytest.raises(TypeError):
        validate_data("not a matrix")


@pytest.mark.parametrize("k", [0, -1, 11])
def test_check_n_clusters_invalid(k):
    with pytest.raises(InvalidK):
        check_n_clusters(k, 10)


def test_check_n_clusters_bounds_accepted():
    check_n_clusters(1, 10)
    check_n_clusters(10, 10)
    check_n_clusters(np.int64(3), 10)


def test_check_n_clusters_type():
    with pytest.raises(TypeError):
        check_n_clusters(2.0, 10)


def test_check_positive_int():
    check_positive_int(1, "restarts")
    with pytest.raises(ValueError, match="restarts"):
        check_positive_int(0, "restarts")


def test_check_random_state_variants():
    g = torch.Generator().manual_seed(3)
    assert check_random_state(g) is g

    a = check_random_state(7)
    b = check_random_state(7)
    assert torch.equal(torch.rand(4, generator=a), torch.rand(4, generator=b))

    assert isinstance(check_random_state(None), torch.Generator)

    with pytest.raises(TypeError):
        check_random_state("seed")


def test_spawn_seeds_reproducible():
    assert spawn_seeds(check_random_state(5), 4) == spawn_seeds(check_random_state(5), 4)
    assert len(set(spawn_seeds(check_random_state(5), 16))) == 16


def test_scale_data_standard(rng):
    X = torch.randn(200, 2, generator=rng, dtype=torch.float64) * torch.tensor([3.0, 0.2]) + 5.0
    Z, params = scale_data(X, method="standard", return_params=True)

    assert torch.allclose(Z.mean(dim=0), torch.zeros(2, dtype=torch.float64), atol=1e-12)
    assert torch.allclose(Z.std(dim=0), torch.ones(2, dtype=torch.float64), atol=1e-12)
    assert set(params) == {"mean", "std"}


def test_scale_data_constant_column_is_centered_only():
    X = torch.tensor([[1.0, 4.0], [3.0, 4.0]], dtype=torch.float64)
    Z = scale_data(X)
    assert Z[:, 1].tolist() == [0.0, 0.0]


def test_scale_data_unknown_method():
    with pytest.raises(ValueError):
        scale_data(torch.ones(2, 2), method="zscore")


def test_scale_data_minmax():
    X = torch.tensor([[0.0, 5.0], [2.0, 5.0], [4.0, 5.0]], dtype=torch.float64)
    Z = scale_data(X, method="minmax")
    assert Z[:, 0].tolist() == [0.0, 0.5, 1.0]
    assert Z[:, 1].tolist() == [0.0, 0.0, 0.0]
