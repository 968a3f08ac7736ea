"""
Tabular loaders producing feature matrices.
"""

from pathlib import Path
from typing import Optional, Sequence, Union
import warnings

import numpy as np
from torch import Tensor

from ..utils.validation import validate_data


def load_csv(path: Union[str, Path],
             delimiter: str = ",",
             skip_header: int = 0,
             usecols: Optional[Sequence[int]] = None) -> Tensor:
    """Read a numeric CSV into a validated (n, d) feature matrix.

    Args:
        path: File to read
        delimiter: Column separator
        skip_header: Number of leading lines to skip
        usecols: Optional column indices to keep

    Returns:
        (n, d) float64 tensor

    Raises:
        EmptyInput: If the file holds no data rows
        ValueError: If rows are ragged or contain non-numeric fields
    """
    with warnings.catch_warnings():
        # An empty file is reported as EmptyInput below
        warnings.simplefilter("ignore", UserWarning)
        try:
            data = np.loadtxt(path, delimiter=delimiter, skiprows=skip_header,
                              usecols=usecols, dtype=np.float64, ndmin=2)
        except ValueError as exc:
            raise ValueError(f"Could not parse {path} as a rectangular numeric table: {exc}") from exc

    return validate_data(data)
