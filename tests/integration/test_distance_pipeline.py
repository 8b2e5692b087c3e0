"""
End-to-end tests for the distance pipeline.

Loads a known fixture dataset, computes the matrix from a YAML config and
checks the written output and neighbour summary.
"""

import json
import math

import numpy as np
import pytest
import yaml

from elasticdist import BandConfig, PipelineConfig, distance, run_pipeline
from elasticdist.io import load_series


@pytest.fixture
def known_fixture_dataset(tmp_path):
    """
    Create a known fixture dataset with predictable outputs.

    - Series 0: sine wave (40 points)
    - Series 1: same sine, time-stretched (50 points)
    - Series 2: constant (40 points)
    - Series 3: short ramp (5 points), unreachable from the long series
      under a narrow band
    """
    t40 = np.linspace(0, 2 * np.pi, 40)
    t50 = np.linspace(0, 2 * np.pi, 50)
    rows = [np.sin(t40), np.sin(t50), np.full(40, 0.5), np.arange(5.0)]
    path = tmp_path / "series.csv"
    path.write_text("\n".join(",".join(repr(float(v)) for v in r) for r in rows) + "\n")
    return path


def _config(tmp_path, dataset, **distance):
    settings = {"band_size": 0.3}
    settings.update(distance)
    data = {
        "dataset": {"path": str(dataset)},
        "distance": settings,
        "compute": {"n_jobs": 2, "k": 1},
        "output": {"format": "json", "path": str(tmp_path / "out" / "D.json")},
        "logging": {"level": "DEBUG"},
    }
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(data))
    return path


class TestDistancePipeline:
    """Full load -> matrix -> save runs."""

    def test_run_from_yaml(self, tmp_path, known_fixture_dataset):
        summary = run_pipeline(_config(tmp_path, known_fixture_dataset))
        assert summary["n_series"] == 4

        D = np.array(json.loads((tmp_path / "out" / "D.json").read_text()))
        assert D.shape == (4, 4)
        assert np.all(np.diag(D) == 0.0)
        # Stretched sine is closer to the sine than the constant is
        assert D[0, 1] < D[0, 2]
        # Long -> short (band from 5 points) is unreachable
        assert D[0, 3] == math.inf
        assert summary["n_unreachable"] == int(np.isinf(D).sum()) > 0
        assert summary["neighbors"][0] == [1]

    def test_matches_direct_calls(self, tmp_path, known_fixture_dataset):
        cfg = PipelineConfig.from_yaml(_config(tmp_path, known_fixture_dataset,
                                               engine="python"))
        run_pipeline(cfg)
        D = np.array(json.loads((tmp_path / "out" / "D.json").read_text()))
        series = load_series(known_fixture_dataset)
        assert np.isclose(D[1, 0], distance(series[1], series[0], BandConfig(0.3)))
