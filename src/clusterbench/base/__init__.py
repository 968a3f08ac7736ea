"""Base classes, data structures and errors for the clustering engines."""

from .interfaces import (
    DistanceMetric,
    InitializationStrategy,
    AssignmentStrategy,
    ParameterUpdater,
    ConvergenceCriterion,
    ClusteringObjective
)

from .data_structures import (
    Method,
    AssignmentMatrix,
    RunResult,
    TimingRecord
)

from .exceptions import (
    ClusteringError,
    DimensionMismatch,
    InvalidK,
    EmptyInput,
    BenchmarkAborted
)

from .clustering_base import BaseClusteringAlgorithm

__all__ = [
    # Interfaces
    'DistanceMetric',
    'InitializationStrategy',
    'AssignmentStrategy',
    'ParameterUpdater',
    'ConvergenceCriterion',
    'ClusteringObjective',

    # Data structures
    'Method',
    'AssignmentMatrix',
    'RunResult',
    'TimingRecord',

    # Errors
    'ClusteringError',
    'DimensionMismatch',
    'InvalidK',
    'EmptyInput',
    'BenchmarkAborted',

    # Base algorithm
    'BaseClusteringAlgorithm'
]
