"""
Dynamic Time Warping (DTW) distance.

Berndt, D. and Clifford, J. (1994). Using dynamic time warping to find
patterns in time series. AAAI-94 Workshop on Knowledge Discovery in
Databases.
"""

from __future__ import annotations

from typing import Optional, Union

from ..band import BandConfig
from ..sequence import ArrayLike
from .engine import BandedDistanceEngine
from .variants import DistanceVariant


def distance(seq_a: ArrayLike, seq_b: ArrayLike,
             config: Optional[BandConfig] = None,
             variant: Union[str, DistanceVariant] = "dtw",
             engine: str = "auto") -> float:
    """
    Compute the banded DTW distance between two time series.

    Args:
        seq_a, seq_b: Input time series (1-D, possibly different lengths)
        config: Band configuration; defaults to ``BandConfig()``
        variant: Variant name or instance
        engine: Kernel selection, see :class:`BandedDistanceEngine`

    Returns:
        DTW distance, ``inf`` when the band admits no alignment
    """
    return BandedDistanceEngine(engine).compute(seq_a, seq_b, config, variant)


def dtw_distance(x: ArrayLike, y: ArrayLike, band_size: float = 0.1) -> float:
    """Shorthand for :func:`distance` taking the band as a plain fraction."""
    return distance(x, y, BandConfig(band_size))
