"""Benchmark harness and timing reports."""

from .harness import BenchmarkConfig, benchmark, run_benchmark
from .report import timing_table, format_timing_table, save_timings

__all__ = [
    'BenchmarkConfig',
    'benchmark',
    'run_benchmark',
    'timing_table',
    'format_timing_table',
    'save_timings'
]
