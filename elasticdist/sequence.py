"""
Read-only views over numeric sequences.
"""

from __future__ import annotations

from typing import Iterator, Sequence, Union

import numpy as np
from numpy.typing import NDArray

ArrayLike = Union["SequenceView", Sequence[float], NDArray[np.float64]]


class SequenceView:
    """
    Immutable 1-D view over a sequence of finite real numbers.

    Positions passed to :meth:`value_at` are 1-based; the underlying array
    (``values``) is 0-based and marked read-only.

    Args:
        data: Any 1-D array-like of real numbers

    Raises:
        ValueError: If ``data`` is not 1-D or contains NaN/inf
    """

    __slots__ = ("_values",)

    def __init__(self, data: ArrayLike):
        if isinstance(data, SequenceView):
            self._values = data._values
            return
        values = np.array(data, dtype=np.float64)
        if values.ndim != 1:
            raise ValueError(f"Sequence must be 1-D, got shape {values.shape}")
        if not np.all(np.isfinite(values)):
            raise ValueError("Sequence values must be finite")
        values.flags.writeable = False
        self._values = values

    @property
    def values(self) -> NDArray[np.float64]:
        return self._values

    def value_at(self, position: int) -> float:
        """Return the value at a 1-based ``position``."""
        if not 1 <= position <= len(self._values):
            raise IndexError(
                f"Position {position} out of range for length {len(self._values)}"
            )
        return float(self._values[position - 1])

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values.tolist())

    def __repr__(self) -> str:
        return f"SequenceView(length={len(self)})"


def as_view(data: ArrayLike) -> SequenceView:
    """Wrap ``data`` in a :class:`SequenceView` unless it already is one."""
    if isinstance(data, SequenceView):
        return data
    return SequenceView(data)
