"""
Tabular views of benchmark timing records.
"""

import csv
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from ..base.data_structures import TimingRecord

HEADER = ("size", "method", "seconds")


def timing_table(records: Iterable[TimingRecord]) -> List[Tuple[int, str, float]]:
    """(size, method, seconds) rows in record order."""
    return [record.as_row() for record in records]


def format_timing_table(records: Iterable[TimingRecord]) -> str:
    """Render records as an aligned plain-text table."""
    rows = timing_table(records)
    lines = [f"{HEADER[0]:>8}  {HEADER[1]:<10}  {HEADER[2]:>10}"]
    for size, method, seconds in rows:
        lines.append(f"{size:>8d}  {method:<10}  {seconds:>10.4f}")
    return "\n".join(lines)


def save_timings(records: Iterable[TimingRecord], path: Union[str, Path]) -> Path:
    """Write records as CSV with a size,method,seconds header."""
    path = Path(path)
    with path.open("w", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(HEADER)
        writer.writerows(timing_table(records))
    return path
