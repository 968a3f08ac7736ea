"""Utility functions for the clustering engines."""

from .convergence import (
    CentroidShift,
    NoImprovement
)

from .metrics import (
    inertia,
    total_cost,
    contingency_matrix,
    adjusted_rand_score,
    best_match_recovery
)

from .validation import (
    validate_data,
    check_n_clusters,
    check_positive_int,
    check_random_state,
    spawn_seeds,
    scale_data
)

from .timing import (
    Stopwatch,
    time_block,
    format_timing,
    print_timing
)

__all__ = [
    # Convergence criteria
    'CentroidShift',
    'NoImprovement',

    # Metrics
    'inertia',
    'total_cost',
    'contingency_matrix',
    'adjusted_rand_score',
    'best_match_recovery',

    # Validation
    'validate_data',
    'check_n_clusters',
    'check_positive_int',
    'check_random_state',
    'spawn_seeds',
    'scale_data',

    # Timing
    'Stopwatch',
    'time_block',
    'format_timing',
    'print_timing'
]
