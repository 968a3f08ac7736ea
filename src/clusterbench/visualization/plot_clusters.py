"""
Cluster and benchmark visualization utilities.

Scatter plots of 2D clustering results (centroids or medoids marked) and
line plots of benchmark timings against dataset size. Plotting is an
optional consumer of engine output; the engines never import it.
"""

from typing import Optional, List, Sequence, Union
from torch import Tensor
import matplotlib.pyplot as plt
import numpy as np

from ..base.data_structures import Method, TimingRecord


def _to_numpy(x: Union[Tensor, np.ndarray, list]) -> np.ndarray:
    if isinstance(x, Tensor):
        return x.detach().cpu().numpy()
    return np.asarray(x)


def plot_clusters_2d(X: Union[Tensor, np.ndarray],
                     labels: Union[Tensor, np.ndarray],
                     centers: Optional[Union[Tensor, np.ndarray]] = None,
                     medoid_indices: Optional[Union[Tensor, np.ndarray]] = None,
                     ax: Optional[plt.Axes] = None,
                     colors: Optional[List[str]] = None,
                     alpha: float = 0.7,
                     center_marker: str = 'X',
                     center_size: int = 200,
                     point_size: int = 30,
                     show_legend: bool = True,
                     title: Optional[str] = None) -> plt.Axes:
    """Plot 2D clustering results.

    Args:
        X: (n, 2) data points
        labels: (n,) cluster labels
        centers: Optional (k, 2) centroids
        medoid_indices: Optional (k,) medoid rows of X, drawn as squares
        ax: Matplotlib axes (created if None)
        colors: List of colors for clusters
        alpha: Point transparency
        center_marker: Marker for centers
        center_size: Size of center markers
        point_size: Size of data points
        show_legend: Whether to show legend
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    X_np = _to_numpy(X)
    labels_np = _to_numpy(labels)
    if X_np.ndim != 2 or X_np.shape[1] != 2:
        raise ValueError(f"plot_clusters_2d expects (n, 2) points, got {X_np.shape}")

    unique_labels = np.unique(labels_np)
    n_clusters = len(unique_labels)

    if colors is None:
        cmap = plt.get_cmap('tab10' if n_clusters <= 10 else 'tab20')
        colors = [cmap(i % cmap.N) for i in range(n_clusters)]

    for i, label in enumerate(unique_labels):
        mask = labels_np == label
        ax.scatter(X_np[mask, 0], X_np[mask, 1],
                   color=colors[i % len(colors)],
                   s=point_size,
                   alpha=alpha,
                   edgecolors='black',
                   linewidth=0.5,
                   label=f'Cluster {label}')

    if centers is not None:
        centers_np = _to_numpy(centers)
        ax.scatter(centers_np[:, 0], centers_np[:, 1],
                   c='black',
                   marker=center_marker,
                   s=center_size,
                   edgecolors='white',
                   linewidth=2,
                   label='Centroids',
                   zorder=10)

    if medoid_indices is not None:
        medoids_np = X_np[_to_numpy(medoid_indices).astype(int)]
        ax.scatter(medoids_np[:, 0], medoids_np[:, 1],
                   facecolors='none',
                   edgecolors='black',
                   marker='s',
                   s=center_size,
                   linewidth=2,
                   label='Medoids',
                   zorder=10)

    ax.set_xlabel('Feature 1')
    ax.set_ylabel('Feature 2')

    if title:
        ax.set_title(title)

    if show_legend:
        ax.legend()

    return ax


def plot_timings(records: Sequence[TimingRecord],
                 ax: Optional[plt.Axes] = None,
                 log_scale: bool = False,
                 title: Optional[str] = 'Clustering time vs dataset size') -> plt.Axes:
    """Plot elapsed seconds against dataset size, one line per method.

    Args:
        records: Timing records from the benchmark harness
        ax: Matplotlib axes (created if None)
        log_scale: Use logarithmic y axis
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 5))

    for method in Method:
        points = [(r.dataset_size, r.elapsed_seconds) for r in records if r.method == method]
        if not points:
            continue
        sizes, seconds = zip(*points)
        ax.plot(sizes, seconds, marker='o', label=method.value)

    ax.set_xlabel('Dataset size (n)')
    ax.set_ylabel('Elapsed time (s)')
    if log_scale:
        ax.set_yscale('log')
    if title:
        ax.set_title(title)
    ax.legend()

    return ax
