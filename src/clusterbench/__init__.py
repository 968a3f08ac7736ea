"""
clusterbench: K-Means and K-Medoids (PAM) clustering with a timing harness.

This package implements two partition-based clustering engines from first
principles and a benchmark that times them across dataset sizes:
- K-means (Lloyd's algorithm with multi-start restarts)
- K-medoids (Partitioning Around Medoids, BUILD + SWAP)

Example usage:
    >>> from clusterbench import KMeans, KMedoids, generate, standardize
    >>>
    >>> X = standardize(generate(300, seed=0))
    >>>
    >>> kmeans = KMeans(n_clusters=3, n_init=10, random_state=0).fit(X)
    >>> pam = KMedoids(n_clusters=3).fit(X)
    >>>
    >>> kmeans.labels_, pam.medoid_indices_
    >>>
    >>> from clusterbench import benchmark
    >>> records = benchmark([300, 600, 1200], k=3, seed=0)
"""

__version__ = '0.1.0'

# Import main algorithms
from .algorithms.kmeans import KMeans, kmeans
from .algorithms.kmedoids import KMedoids, kmedoids

# Distances
from .distances.euclidean import euclidean_distance, distance_matrix

# Data
from .datasets import make_blobs, generate, standardize, load_csv

# Benchmark
from .benchmark import (
    BenchmarkConfig,
    benchmark,
    run_benchmark,
    timing_table,
    format_timing_table,
    save_timings
)

# Convenience imports
from .base import (
    Method,
    RunResult,
    TimingRecord,
    ClusteringError,
    DimensionMismatch,
    InvalidK,
    EmptyInput,
    BenchmarkAborted
)

__all__ = [
    # Algorithms
    'KMeans',
    'kmeans',
    'KMedoids',
    'kmedoids',

    # Distances
    'euclidean_distance',
    'distance_matrix',

    # Data
    'make_blobs',
    'generate',
    'standardize',
    'load_csv',

    # Benchmark
    'BenchmarkConfig',
    'benchmark',
    'run_benchmark',
    'timing_table',
    'format_timing_table',
    'save_timings',

    # Core data structures
    'Method',
    'RunResult',
    'TimingRecord',

    # Errors
    'ClusteringError',
    'DimensionMismatch',
    'InvalidK',
    'EmptyInput',
    'BenchmarkAborted',

    # Version
    '__version__'
]
