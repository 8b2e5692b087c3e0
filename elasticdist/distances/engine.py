"""
Banded dynamic-programming distance engine.

The engine evaluates the alignment recurrence of an elastic distance over a
Sakoe-Chiba band using two rolling rows of length ``len(y)``; the full cost
matrix is never allocated. Row ``i`` visits columns
``max(0, i - w - 1) .. min(m - 1, i + w + 1)``, writing ``inf`` to the
columns of that range that fall outside ``|i - j| <= w``.

Two kernels are provided and must agree exactly:

- ``_banded_python``: generic, driven by any :class:`DistanceVariant`
- ``_dtw_banded_numba``: numba-compiled, hard-wired to the DTW rule
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Union

import numpy as np
from numba import njit

from ..band import BandConfig
from ..exceptions import EmptySequence, InvalidConfiguration
from ..sequence import ArrayLike, as_view
from .variants import DTW, DistanceVariant, get_variant

logger = logging.getLogger(__name__)

ENGINES = ("auto", "python", "numba")


@njit(cache=True)
def _dtw_banded_numba(x: np.ndarray, y: np.ndarray, band: int) -> float:
    """Numba-accelerated banded DTW with the ordered predecessor rule."""
    n, m = len(x), len(y)
    curr = np.full(m, np.inf)
    prev = np.full(m, np.inf)

    for i in range(n):
        # Swap rows; curr is overwritten cell by cell
        tmp = prev
        prev = curr
        curr = tmp

        lo = max(0, i - band - 1)
        hi = min(m - 1, i + band + 1)
        if lo > hi:
            # Row lies entirely outside the band
            curr[:] = np.inf
            continue

        for j in range(lo, hi + 1):
            if abs(i - j) <= band:
                diff = x[i] - y[j]
                cost = diff * diff
                if i + j != 0:
                    if i == 0 or (j != 0 and prev[j - 1] > curr[j - 1]
                                  and curr[j - 1] < prev[j]):
                        cost += curr[j - 1]
                    elif j == 0 or (i != 0 and prev[j - 1] > prev[j]
                                    and prev[j] < curr[j - 1]):
                        cost += prev[j]
                    else:
                        cost += prev[j - 1]
                curr[j] = cost
            else:
                curr[j] = np.inf

    return math.sqrt(curr[m - 1])


def _banded_python(x: np.ndarray, y: np.ndarray, band: int,
                   variant: DistanceVariant) -> float:
    """Generic banded kernel; predecessors that do not exist are passed as inf."""
    n, m = len(x), len(y)
    inf = math.inf
    current = np.full(m, inf)
    previous = np.full(m, inf)

    for i in range(n):
        previous, current = current, previous

        lo = max(0, i - band - 1)
        hi = min(m - 1, i + band + 1)
        if lo > hi:
            current.fill(inf)
            continue

        for j in range(lo, hi + 1):
            if abs(i - j) > band:
                current[j] = inf
                continue
            cost = variant.cost(x[i], y[j])
            if i == 0 and j == 0:
                current[j] = cost
                continue
            deletion = current[j - 1] if j > 0 else inf
            insertion = previous[j] if i > 0 else inf
            match = previous[j - 1] if (i > 0 and j > 0) else inf
            current[j] = cost + variant.combine(i, j, deletion, insertion, match)

    return float(variant.finalize(current[m - 1]))


class BandedDistanceEngine:
    """
    Compute elastic distances over a Sakoe-Chiba band.

    Args:
        engine: ``'auto'`` (numba for DTW, Python otherwise), ``'python'``
            or ``'numba'`` (DTW only)

    Examples
    --------
    >>> from elasticdist import BandConfig
    >>> BandedDistanceEngine().compute([0, 0, 0], [1, 1, 1], BandConfig(1.0))
    1.7320508075688772
    """

    def __init__(self, engine: str = "auto"):
        engine = engine.lower()
        if engine not in ENGINES:
            raise InvalidConfiguration(
                f"engine must be one of {ENGINES}, got {engine}"
            )
        self.engine = engine

    def _use_numba(self, variant: DistanceVariant) -> bool:
        if self.engine == "python":
            return False
        if variant is DTW:
            return True
        if self.engine == "numba":
            raise InvalidConfiguration(
                f"numba kernel only supports the dtw variant, got {variant.name}"
            )
        return False

    def compute(self, seq_a: ArrayLike, seq_b: ArrayLike,
                config: Optional[BandConfig] = None,
                variant: Union[str, DistanceVariant] = DTW) -> float:
        """
        Distance between ``seq_a`` and ``seq_b``.

        The band half-width is resolved from ``len(seq_b)``, so swapping the
        arguments may change the result.

        Returns:
            Non-negative distance, or ``inf`` when no admissible alignment
            reaches the terminal cell

        Raises:
            EmptySequence: If either sequence has length 0
        """
        a, b = as_view(seq_a), as_view(seq_b)
        if len(a) == 0 or len(b) == 0:
            raise EmptySequence(
                f"Sequences must be non-empty, got lengths {len(a)} and {len(b)}"
            )
        variant = get_variant(variant)
        if config is None:
            config = BandConfig()
        band = config.half_width(len(b))
        use_numba = self._use_numba(variant)
        logger.debug(
            f"{variant.name}: n={len(a)}, m={len(b)}, band={band}, "
            f"kernel={'numba' if use_numba else 'python'}"
        )
        if use_numba:
            return float(_dtw_banded_numba(a.values, b.values, band))
        return _banded_python(a.values, b.values, band, variant)
