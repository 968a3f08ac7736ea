import importlib
import pytest

@pytest.mark.parametrize("module", [
    "clusterbench",
    "clusterbench.algorithms",
    "clusterbench.assignments",
    "clusterbench.base",
    "clusterbench.benchmark",
    "clusterbench.datasets",
    "clusterbench.distances",
    "clusterbench.initialization",
    "clusterbench.updates",
    "clusterbench.utils",
    "clusterbench.visualization",
])
def test_submodules_exist(module):
    mod = importlib.import_module(module)
    assert mod is not None


def test_errors_are_value_errors():
    from clusterbench import ClusteringError, DimensionMismatch, InvalidK, EmptyInput, BenchmarkAborted

    for exc in (DimensionMismatch, InvalidK, EmptyInput, BenchmarkAborted):
        assert issubclass(exc, ClusteringError)
    assert issubclass(ClusteringError, ValueError)
