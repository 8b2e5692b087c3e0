"""
YAML-driven distance pipeline: load series, compute the matrix, save it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Union

import numpy as np

from .config import PipelineConfig
from .io import load_series, save_matrix
from .pairwise import pairwise_distances

logger = logging.getLogger(__name__)


def _nearest(D: np.ndarray, k: int) -> Dict[int, list]:
    """k nearest rows per series, excluding the series itself; inf ranks last."""
    result = {}
    for i in range(D.shape[0]):
        row = D[i].copy()
        row[i] = np.inf
        order = [int(j) for j in np.argsort(row, kind="stable") if j != i][:k]
        result[i] = order
    return result


def run_pipeline(config: Union[PipelineConfig, str, Path]) -> Dict[str, Any]:
    """
    Run the pipeline described by ``config``.

    Args:
        config: A :class:`PipelineConfig` or path to a YAML file

    Returns:
        Summary dict with ``n_series``, ``n_unreachable``, ``output`` and,
        when ``compute.k`` is set, ``neighbors``
    """
    if not isinstance(config, PipelineConfig):
        config = PipelineConfig.from_yaml(config)

    logging.getLogger("elasticdist").setLevel(config.logging.level)

    series = load_series(config.dataset.path, config.dataset.format,
                         config.dataset.delimiter)
    try:
        D = pairwise_distances(
            series,
            config.distance.band(),
            variant=config.distance.variant,
            n_jobs=config.compute.n_jobs,
            engine=config.distance.engine,
        )
    except ValueError:
        if config.logging.log_errors:
            logger.exception(f"Distance computation failed for {config.dataset.path}")
        raise

    out = save_matrix(D, config.output.path, config.output.format,
                      config.output.overwrite)
    summary: Dict[str, Any] = {
        "n_series": len(series),
        "n_unreachable": int(np.isinf(D).sum()),
        "output": str(out),
    }
    if config.compute.k is not None:
        summary["neighbors"] = _nearest(D, config.compute.k)
    logger.info(
        f"Pipeline done: {summary['n_series']} series, "
        f"{summary['n_unreachable']} unreachable pairs -> {out}"
    )
    return summary
