"""
Sakoe-Chiba band configuration.

The band is given as a fraction of the reference (second) sequence's
length and resolved into an integer half-width when a distance is computed.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from .exceptions import InvalidConfiguration

DEFAULT_BAND_SIZE = 0.1


@dataclass(frozen=True)
class BandConfig:
    """Band-width fraction in [0, 1]."""
    fraction: float = DEFAULT_BAND_SIZE

    def __post_init__(self):
        """Validate band fraction."""
        f = self.fraction
        if isinstance(f, bool) or not isinstance(f, numbers.Real):
            raise InvalidConfiguration(
                f"band fraction must be a real number, got {f!r}"
            )
        if not math.isfinite(f):
            raise InvalidConfiguration(f"band fraction must be finite, got {f}")
        if not 0.0 <= f <= 1.0:
            raise InvalidConfiguration(
                f"band fraction must be in [0, 1], got {f}"
            )
        object.__setattr__(self, "fraction", float(f))

    def half_width(self, reference_length: int) -> int:
        """
        Resolve the band into an integer half-width.

        Args:
            reference_length: Length of the second sequence

        Returns:
            ``ceil(fraction * reference_length)``
        """
        return int(math.ceil(reference_length * self.fraction))


def configure(fraction: float) -> BandConfig:
    """Build a :class:`BandConfig`, raising ``InvalidConfiguration`` on bad input."""
    return BandConfig(fraction)
