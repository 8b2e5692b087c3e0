"""
Cost and recurrence rules for the elastic distance family.

A :class:`DistanceVariant` bundles the three pieces that differ between
family members sharing the banded dynamic-programming skeleton:

- ``cost(a, b)``: local cost of aligning two values
- ``combine(i, j, deletion, insertion, match)``: accumulated cost picked
  from the three predecessors (missing predecessors are passed as ``inf``)
- ``finalize(total)``: transform applied to the terminal cell
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict

from ..exceptions import InvalidConfiguration


@dataclass(frozen=True)
class DistanceVariant:
    """Strategy object plugged into the banded engine."""
    name: str
    cost: Callable[[float, float], float]
    combine: Callable[[int, int, float, float, float], float]
    finalize: Callable[[float], float]


def squared_difference(a: float, b: float) -> float:
    diff = a - b
    return diff * diff


def ordered_predecessor(i: int, j: int, deletion: float, insertion: float,
                        match: float) -> float:
    """
    DTW predecessor choice.

    This is an ordered sequence of strict comparisons, not ``min()``:
    deletion wins only when it is strictly below both others, insertion
    only when strictly below both others, and match takes every remaining
    case, including a deletion/insertion tie below match.

    Args:
        i, j: Cell coordinates (0-based)
        deletion: ``current[j - 1]``
        insertion: ``previous[j]``
        match: ``previous[j - 1]``

    Returns:
        The chosen predecessor cost
    """
    if i == 0 or (j != 0 and match > deletion and deletion < insertion):
        return deletion
    if j == 0 or (i != 0 and match > insertion and insertion < deletion):
        return insertion
    return match


DTW = DistanceVariant(
    name="dtw",
    cost=squared_difference,
    combine=ordered_predecessor,
    finalize=math.sqrt,
)

_VARIANT_REGISTRY: Dict[str, DistanceVariant] = {
    'dtw': DTW,
    'dynamic_time_warping': DTW,
}


def register_variant(variant: DistanceVariant, *aliases: str) -> None:
    """Register ``variant`` under its name and any aliases."""
    for key in (variant.name, *aliases):
        _VARIANT_REGISTRY[key.lower()] = variant


def get_variant(variant) -> DistanceVariant:
    """Look up a variant by name; variant instances are returned unchanged."""
    if isinstance(variant, DistanceVariant):
        return variant
    found = _VARIANT_REGISTRY.get(str(variant).lower())
    if found is None:
        raise InvalidConfiguration(
            f"Unknown distance variant: {variant}. "
            f"Available: {sorted(_VARIANT_REGISTRY.keys())}"
        )
    return found
