"""
Wall-clock timing helpers.

Timing lines use a compact, machine-readable format:

    [timing] kmeans {"n":300,"k":3} 0.012s
"""

from __future__ import annotations

import json
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator


class Stopwatch:
    """Holds the elapsed seconds of a finished ``time_block``."""

    def __init__(self) -> None:
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def stop(self) -> float:
        self.elapsed = max(0.0, time.perf_counter() - self.start)
        return self.elapsed


@contextmanager
def time_block(label: str, meta: Dict[str, Any] | None = None,
               verbose: int = 0) -> Iterator[Stopwatch]:
    """
    Context manager timing a block with ``time.perf_counter``.

    The yielded Stopwatch carries ``elapsed`` once the block exits; when
    ``verbose`` is set a single summary line is printed as well.

    Example
    -------
    >>> with time_block("fit", {"n": 300, "k": 3}) as sw:
    ...     model.fit(X)
    >>> sw.elapsed
    0.0123
    """
    watch = Stopwatch()
    try:
        yield watch
    finally:
        watch.stop()
        if verbose:
            print_timing(label, watch.elapsed, **(meta or {}))


def format_timing(label: str, seconds: float, **meta: Any) -> str:
    meta_str = ""
    if meta:
        try:
            meta_str = " " + json.dumps(meta, separators=(",", ":"))
        except TypeError:
            meta_str = " " + repr(meta)
    return f"[timing] {label}{meta_str} {seconds:.3f}s"


def print_timing(label: str, seconds: float, **meta: Any) -> None:
    """Print timing in a compact, machine-readable single line."""
    print(format_timing(label, seconds, **meta))
