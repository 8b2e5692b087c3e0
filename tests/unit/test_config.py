"""Tests for YAML pipeline configuration."""

import pytest
import yaml

from elasticdist import BandConfig, InvalidConfiguration, PipelineConfig
from elasticdist.config import (
    ComputeConfig,
    DatasetConfig,
    DistanceSettings,
    LoggingConfig,
    OutputConfig,
)


def _base_dict():
    return {
        "dataset": {"path": "data/series.csv"},
        "distance": {"variant": "dtw", "band_size": 0.25},
        "output": {"format": "json", "path": "out/D.json"},
    }


class TestSections:
    """Validation of individual sections."""

    def test_distance_defaults(self):
        settings = DistanceSettings()
        assert settings.variant == "dtw"
        assert settings.band() == BandConfig(0.1)

    def test_invalid_band(self):
        with pytest.raises(InvalidConfiguration):
            DistanceSettings(band_size=1.5)

    def test_invalid_variant(self):
        with pytest.raises(InvalidConfiguration):
            DistanceSettings(variant="lcss")

    def test_invalid_engine(self):
        with pytest.raises(ValueError):
            DistanceSettings(engine="cuda")

    def test_dataset_requires_path(self):
        with pytest.raises(ValueError):
            DatasetConfig(path="")

    def test_dataset_format(self):
        with pytest.raises(ValueError):
            DatasetConfig(path="x.parquet", format="parquet")

    @pytest.mark.parametrize("n_jobs", [0, -2])
    def test_invalid_n_jobs(self, n_jobs):
        with pytest.raises(ValueError):
            ComputeConfig(n_jobs=n_jobs)

    def test_invalid_k(self):
        with pytest.raises(ValueError):
            ComputeConfig(k=0)

    def test_output_format(self):
        with pytest.raises(ValueError):
            OutputConfig(format="parquet")

    def test_logging_level_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"
        with pytest.raises(ValueError):
            LoggingConfig(level="loud")


class TestPipelineConfig:
    """Loading complete configurations."""

    def test_from_dict(self):
        cfg = PipelineConfig.from_dict(_base_dict())
        assert cfg.distance.band_size == 0.25
        assert cfg.compute.n_jobs == 1
        assert cfg.logging.level == "INFO"

    def test_from_yaml_round_trip(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump(_base_dict()))
        cfg = PipelineConfig.from_yaml(path)
        assert cfg.to_dict()["output"]["path"] == "out/D.json"
        assert PipelineConfig.from_dict(cfg.to_dict()) == cfg

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            PipelineConfig.from_yaml(tmp_path / "missing.yaml")

    @pytest.mark.parametrize("section", ["dataset", "distance", "output"])
    def test_missing_section(self, tmp_path, section):
        data = _base_dict()
        del data[section]
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump(data))
        with pytest.raises(ValueError, match=section):
            PipelineConfig.from_yaml(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ValueError):
            PipelineConfig.from_yaml(path)

    def test_unknown_key(self):
        data = _base_dict()
        data["distance"]["window"] = 3
        with pytest.raises(TypeError):
            PipelineConfig.from_dict(data)
