"""
Elastic distance functions for time series.

This module provides the banded dynamic-programming engine and the
distance variants that plug into it.
"""

from .dtw import distance, dtw_distance
from .engine import BandedDistanceEngine
from .variants import (
    DTW,
    DistanceVariant,
    get_variant,
    ordered_predecessor,
    register_variant,
    squared_difference,
)

__all__ = [
    "distance",
    "dtw_distance",
    "BandedDistanceEngine",
    "DTW",
    "DistanceVariant",
    "get_variant",
    "ordered_predecessor",
    "register_variant",
    "squared_difference",
]
