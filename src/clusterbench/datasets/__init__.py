"""Dataset generation and loading."""

from .blobs import DEFAULT_CENTERS, DEFAULT_STD, blob_sizes, make_blobs, generate, standardize
from .loaders import load_csv

__all__ = [
    'DEFAULT_CENTERS',
    'DEFAULT_STD',
    'blob_sizes',
    'make_blobs',
    'generate',
    'standardize',
    'load_csv'
]
