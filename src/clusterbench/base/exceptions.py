"""
Error types raised by the clustering engines and the benchmark harness.

All errors derive from ValueError so callers that already guard clustering
calls with ``except ValueError`` keep working.
"""

from typing import List, Optional


class ClusteringError(ValueError):
    """Base class for clustering failures."""


class DimensionMismatch(ClusteringError):
    """Two vectors (or a vector and a matrix) disagree on feature count."""

    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(f"Dimension mismatch: expected {expected} features, got {got}")


class InvalidK(ClusteringError):
    """Requested cluster count is outside 1..n_samples."""

    def __init__(self, n_clusters, n_samples: Optional[int] = None):
        self.n_clusters = n_clusters
        self.n_samples = n_samples
        if n_samples is None:
            msg = f"n_clusters must be positive, got {n_clusters}"
        else:
            msg = (f"n_clusters must be in [1, {n_samples}] for {n_samples} "
                   f"samples, got {n_clusters}")
        super().__init__(msg)


class EmptyInput(ClusteringError):
    """Input matrix has no rows."""

    def __init__(self, msg: str = "Input contains no samples"):
        super().__init__(msg)


class BenchmarkAborted(ClusteringError):
    """A benchmark sweep stopped on an engine failure.

    ``records`` holds the timing records collected before the failure and
    ``cause`` the original exception (also chained as ``__cause__``).
    """

    def __init__(self, records: List, cause: BaseException,
                 dataset_size: Optional[int] = None, method=None):
        self.records = list(records)
        self.cause = cause
        self.dataset_size = dataset_size
        self.method = method
        where = ""
        if dataset_size is not None:
            where = f" at n={dataset_size}"
            if method is not None:
                where += f" ({method.value})"
        super().__init__(f"Benchmark aborted{where} after {len(self.records)} "
                         f"records: {cause}")
