"""
Configuration schemas for elasticdist YAML-based pipeline.

Provides type-safe, validated configuration classes using dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from pathlib import Path
import yaml

from .band import BandConfig, DEFAULT_BAND_SIZE
from .distances.engine import ENGINES
from .distances.variants import get_variant


@dataclass
class DatasetConfig:
    """Dataset configuration."""
    path: str
    format: str = "auto"
    delimiter: str = ","

    def __post_init__(self):
        """Validate dataset configuration."""
        if not self.path:
            raise ValueError("Dataset path is required")
        valid_format = {"auto", "npy", "csv", "txt"}
        if self.format not in valid_format:
            raise ValueError(f"format must be one of {valid_format}, got {self.format}")


@dataclass
class DistanceSettings:
    """Distance function configuration."""
    variant: str = "dtw"
    band_size: float = DEFAULT_BAND_SIZE
    engine: str = "auto"

    def __post_init__(self):
        """Validate distance configuration."""
        get_variant(self.variant)
        if self.engine not in ENGINES:
            raise ValueError(f"engine must be one of {set(ENGINES)}, got {self.engine}")
        self.band()

    def band(self) -> BandConfig:
        return BandConfig(self.band_size)


@dataclass
class ComputeConfig:
    """Execution configuration."""
    n_jobs: int = 1
    k: Optional[int] = None

    def __post_init__(self):
        """Validate compute configuration."""
        if self.n_jobs == 0 or self.n_jobs < -1:
            raise ValueError(f"n_jobs must be >= 1 or -1, got {self.n_jobs}")
        if self.k is not None and self.k < 1:
            raise ValueError(f"k must be >= 1, got {self.k}")


@dataclass
class OutputConfig:
    """Output configuration."""
    format: str = "npy"
    path: str = "results/distances.npy"
    overwrite: bool = True

    def __post_init__(self):
        """Validate output configuration."""
        valid_format = {"npy", "csv", "json"}
        if self.format not in valid_format:
            raise ValueError(f"format must be one of {valid_format}, got {self.format}")


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_errors: bool = True

    def __post_init__(self):
        valid_level = {"DEBUG", "INFO", "WARNING", "ERROR"}
        self.level = self.level.upper()
        if self.level not in valid_level:
            raise ValueError(f"level must be one of {valid_level}, got {self.level}")


@dataclass
class PipelineConfig:
    """Complete pipeline configuration."""
    dataset: DatasetConfig
    distance: DistanceSettings
    output: OutputConfig
    compute: ComputeConfig = field(default_factory=ComputeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> PipelineConfig:
        """Create PipelineConfig from dictionary (e.g., from YAML)."""
        return cls(
            dataset=DatasetConfig(**data['dataset']),
            distance=DistanceSettings(**(data.get('distance') or {})),
            output=OutputConfig(**(data.get('output') or {})),
            compute=ComputeConfig(**(data.get('compute') or {})),
            logging=LoggingConfig(**(data.get('logging') or {}))
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> PipelineConfig:
        """Load configuration from YAML file."""
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path, 'r') as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {yaml_path}")

        # Validate required sections
        required = ['dataset', 'distance', 'output']
        for section in required:
            if section not in data:
                raise ValueError(f"Missing required section: {section}")

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        from dataclasses import asdict
        return asdict(self)
