"""
Reading time series collections and writing distance matrices.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Union

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _resolve_format(path: Path, format: str) -> str:
    if format != "auto":
        return format
    suffix = path.suffix.lower().lstrip(".")
    return suffix if suffix in {"npy", "csv", "txt", "json"} else "csv"


def load_series(path: PathLike, format: str = "auto",
                delimiter: str = ",") -> List[np.ndarray]:
    """
    Load a collection of time series, one series per row.

    Text files may be ragged (lines of different lengths); blank lines are
    skipped. ``.txt`` files split on whitespace when ``delimiter`` does not
    occur in a line.

    Args:
        path: Input file (``.npy``, ``.csv`` or ``.txt``)
        format: ``'auto'`` (from suffix), ``'npy'``, ``'csv'`` or ``'txt'``
        delimiter: Field separator for text files

    Returns:
        List of 1-D float arrays
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    fmt = _resolve_format(path, format)

    if fmt == "npy":
        arr = np.load(path)
        if arr.ndim == 1:
            arr = arr[None, :]
        if arr.ndim != 2:
            raise ValueError(f"Expected 1D or 2D array in {path}, got shape {arr.shape}")
        series = [np.asarray(row, dtype=np.float64) for row in arr]
    else:
        series = []
        with open(path, "r") as f:
            for lineno, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                fields = line.split(delimiter) if delimiter in line else line.split()
                try:
                    series.append(np.array([float(v) for v in fields]))
                except ValueError as e:
                    raise ValueError(f"{path}:{lineno}: {e}") from e

    if not series:
        raise ValueError(f"No series found in {path}")
    logger.info(f"Loaded {len(series)} series from {path}")
    return series


def save_matrix(D: NDArray[np.float64], path: PathLike, format: str = "auto",
                overwrite: bool = True) -> Path:
    """
    Write a distance matrix.

    ``inf`` is kept: ``inf`` in CSV, ``Infinity`` in JSON.
    """
    path = Path(path)
    if path.exists() and not overwrite:
        raise FileExistsError(f"Output exists and overwrite is disabled: {path}")
    fmt = _resolve_format(path, format)
    path.parent.mkdir(parents=True, exist_ok=True)

    if fmt == "npy":
        with open(path, "wb") as f:
            np.save(f, D)
    elif fmt in ("csv", "txt"):
        np.savetxt(path, D, delimiter=",")
    elif fmt == "json":
        with open(path, "w") as f:
            json.dump(np.asarray(D).tolist(), f)
    else:
        raise ValueError(f"Unsupported output format: {fmt}")

    logger.info(f"Wrote {D.shape[0]}x{D.shape[1]} matrix to {path}")
    return path
