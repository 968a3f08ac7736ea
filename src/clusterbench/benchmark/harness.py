"""
Benchmark harness timing K-means against K-medoids over a size sweep.

For every dataset size, in the order given, a fresh blob matrix is
generated and standardized (untimed), then one K-means run (all restarts)
and one PAM run are timed with ``time.perf_counter``. Any engine failure
stops the sweep; the records gathered so far travel with the raised
``BenchmarkAborted``.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..algorithms.kmeans import KMeans
from ..algorithms.kmedoids import KMedoids
from ..base.data_structures import Method, TimingRecord
from ..base.exceptions import BenchmarkAborted
from ..datasets.blobs import generate, standardize
from ..utils.validation import check_positive_int
from ..utils.timing import time_block


@dataclass
class BenchmarkConfig:
    """Configuration surface of a benchmark sweep.

    Attributes:
        k: Number of clusters for both engines
        restarts: K-means restarts per run
        max_iterations: K-means iteration cap and PAM swap-pass cap
        tolerance: K-means centroid-movement tolerance
        dataset_sizes: Sizes to sweep, processed in order
        seed: Seed for data generation and K-means seeding
        n_jobs: Worker threads for K-means restarts
        verbose: 0 silent, 1 timing lines, 2 engine progress as well
    """

    k: int = 3
    restarts: int = 10
    max_iterations: int = 100
    tolerance: float = 1e-4
    dataset_sizes: Tuple[int, ...] = (300, 600, 1200)
    seed: int = 42
    n_jobs: int = 1
    verbose: int = 0

    def __post_init__(self):
        self.dataset_sizes = tuple(self.dataset_sizes)
        check_positive_int(self.restarts, 'restarts')
        check_positive_int(self.max_iterations, 'max_iterations')
        check_positive_int(self.n_jobs, 'n_jobs')
        if self.tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {self.tolerance}")
        for size in self.dataset_sizes:
            check_positive_int(size, 'dataset size')

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _engines(config: BenchmarkConfig) -> List[Tuple[Method, Any]]:
    engine_verbose = max(0, config.verbose - 1)
    return [
        (Method.KMEANS, KMeans(
            n_clusters=config.k,
            n_init=config.restarts,
            max_iter=config.max_iterations,
            tol=config.tolerance,
            random_state=config.seed,
            n_jobs=config.n_jobs,
            verbose=engine_verbose
        )),
        (Method.KMEDOIDS, KMedoids(
            n_clusters=config.k,
            max_iter=config.max_iterations,
            random_state=config.seed,
            verbose=engine_verbose
        )),
    ]


def run_benchmark(config: BenchmarkConfig) -> List[TimingRecord]:
    """Run the sweep described by ``config``.

    Returns:
        Two records per size (K-means first), in sweep order

    Raises:
        BenchmarkAborted: On the first engine failure, carrying the
            records collected before it
    """
    records: List[TimingRecord] = []

    for n in config.dataset_sizes:
        X = standardize(generate(n, config.seed))

        for method, engine in _engines(config):
            meta = {"n": n, "k": config.k}
            try:
                with time_block(method.value, meta, verbose=config.verbose) as watch:
                    engine.fit(X)
            except Exception as exc:
                raise BenchmarkAborted(records, exc, dataset_size=n, method=method) from exc

            records.append(TimingRecord(
                dataset_size=n,
                method=method,
                elapsed_seconds=watch.elapsed
            ))

    return records


def benchmark(sizes: Sequence[int], k: int, seed: int,
              config: Optional[BenchmarkConfig] = None) -> List[TimingRecord]:
    """Time K-means and K-medoids on a fresh blob dataset per size.

    Args:
        sizes: Dataset sizes, processed in the given order
        k: Number of clusters
        seed: Seed for generation and K-means seeding
        config: Optional base configuration for the remaining knobs
            (restarts, iteration caps, tolerance, threads, verbosity);
            its sizes, k and seed are overridden by the arguments

    Returns:
        ``2 * len(sizes)`` timing records

    Raises:
        BenchmarkAborted: On the first engine failure
    """
    base = config.to_dict() if config is not None else {}
    base.update({'dataset_sizes': tuple(sizes), 'k': k, 'seed': seed})
    return run_benchmark(BenchmarkConfig(**base))
