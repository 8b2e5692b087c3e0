"""
Pairwise distance computation over collections of time series.

Series may have different lengths. Because the banded distance resolves its
band from the second argument, ``D[i, j]`` and ``D[j, i]`` are computed
separately; the returned matrices are not assumed symmetric.

``inf`` entries mean "no admissible alignment" and are kept as-is; k-NN
queries rank them last.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray
from joblib import Parallel, delayed

from .band import BandConfig
from .distances import distance
from .distances.variants import DistanceVariant
from .exceptions import InvalidConfiguration
from .sequence import ArrayLike, SequenceView, as_view

logger = logging.getLogger(__name__)


# ============================================================================
# Distance Method Registry
# ============================================================================

# method name -> variant name
_DISTANCE_REGISTRY: Dict[str, str] = {
    'dtw': 'dtw',
    'dynamic_time_warping': 'dtw',
}


def _get_method(method: str) -> str:
    variant = _DISTANCE_REGISTRY.get(method.lower())
    if variant is None:
        raise InvalidConfiguration(
            f"Unknown distance method: {method}. "
            f"Available: {list(_DISTANCE_REGISTRY.keys())}"
        )
    return variant


def _as_views(series: Sequence[ArrayLike]) -> List[SequenceView]:
    if isinstance(series, np.ndarray) and series.ndim != 2:
        raise ValueError(f"series must be a 2D array or a list, got shape {series.shape}")
    return [as_view(s) for s in series]


# ============================================================================
# Matrices
# ============================================================================

def pairwise_distances(series: Sequence[ArrayLike],
                       config: Optional[BandConfig] = None,
                       variant: Union[str, DistanceVariant] = "dtw",
                       n_jobs: int = 1,
                       engine: str = "auto") -> NDArray[np.float64]:
    """
    Calculate the full pairwise distance matrix.

    Parameters
    ----------
    series : list of 1-D arrays, or array (n_series, n_timepoints)
        Time series to compare (lengths may differ)
    config : BandConfig, optional
        Band configuration (default ``BandConfig()``)
    variant : str or DistanceVariant
        Distance variant
    n_jobs : int
        Number of parallel workers (-1 = all cores)
    engine : str
        Kernel selection passed to the engine

    Returns
    -------
    D : array (n_series, n_series)
        ``D[i, j] = distance(series[i], series[j])``, diagonal = 0

    Examples
    --------
    >>> D = pairwise_distances([[1, 2, 3], [1, 2, 2, 3]], BandConfig(1.0))
    >>> D.shape
    (2, 2)
    """
    views = _as_views(series)
    n_series = len(views)
    pairs = [(i, j) for i in range(n_series) for j in range(n_series) if i != j]

    logger.info(f"Computing {n_series}x{n_series} distance matrix ({len(pairs)} pairs)")

    D = np.zeros((n_series, n_series))
    for (i, j), d in zip(pairs, _compute_pairs(views, pairs, config, variant,
                                               n_jobs, engine)):
        D[i, j] = d

    n_inf = int(np.isinf(D).sum())
    if n_inf:
        logger.info(f"{n_inf} pairs have no admissible alignment under the band")
    return D


def _compute_pairs(views: List[SequenceView], pairs: List[Tuple[int, int]],
                   config: Optional[BandConfig], variant, n_jobs: int,
                   engine: str) -> List[float]:
    if n_jobs == 1:
        return [distance(views[i], views[j], config, variant, engine)
                for i, j in pairs]
    # Threading backend: calls share no mutable state
    return Parallel(n_jobs=n_jobs, backend='threading')(
        delayed(distance)(views[i], views[j], config, variant, engine)
        for i, j in pairs
    )


def partial_distances(series: Sequence[ArrayLike], start_idx: int, end_idx: int,
                      config: Optional[BandConfig] = None,
                      variant: Union[str, DistanceVariant] = "dtw",
                      engine: str = "auto") -> NDArray[np.float64]:
    """
    Calculate rows ``start_idx:end_idx`` of the distance matrix.

    Used to split large matrices into batches.

    Returns
    -------
    D_part : array (end_idx - start_idx, n_series)
    """
    views = _as_views(series)
    n_series = len(views)

    if start_idx < 0 or end_idx > n_series or start_idx >= end_idx:
        raise ValueError(f"Invalid indices: start={start_idx}, end={end_idx}, n={n_series}")

    D_part = np.zeros((end_idx - start_idx, n_series))
    for i in range(start_idx, end_idx):
        for j in range(n_series):
            if i != j:
                D_part[i - start_idx, j] = distance(views[i], views[j], config,
                                                    variant, engine)

    logger.info(f"Computed partial distance matrix: rows {start_idx}:{end_idx}")
    return D_part


# ============================================================================
# Queries
# ============================================================================

def nearest_neighbors(query: ArrayLike, candidates: Sequence[ArrayLike],
                      k: int = 1, config: Optional[BandConfig] = None,
                      variant: Union[str, DistanceVariant] = "dtw",
                      engine: str = "auto") -> Tuple[NDArray[np.int64], NDArray[np.float64]]:
    """
    Find the ``k`` candidates closest to ``query``.

    Distances are ``distance(query, candidate)``. Candidates at ``inf`` are
    ranked last; ties keep candidate order.

    Returns
    -------
    indices : array (k,)
    distances : array (k,)
    """
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    views = _as_views(candidates)
    q = as_view(query)
    d = np.array([distance(q, c, config, variant, engine) for c in views])
    order = np.argsort(d, kind="stable")[:k]
    return order, d[order]


def ts_dist(series: Sequence[ArrayLike], method: str = 'dtw',
            n_jobs: int = 1, **kwargs) -> NDArray[np.float64]:
    """
    Calculate a pairwise distance matrix by registered method name.

    ``kwargs`` are forwarded to :func:`pairwise_distances`.
    """
    return pairwise_distances(series, variant=_get_method(method),
                              n_jobs=n_jobs, **kwargs)
