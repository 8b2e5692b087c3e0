"""
elasticdist: elastic distances for time series

Banded dynamic time warping and related edit-distance variants, with
pairwise matrices and nearest-neighbour queries on top.
"""

from .band import BandConfig, configure
from .distances import (
    DTW,
    BandedDistanceEngine,
    DistanceVariant,
    distance,
    dtw_distance,
    get_variant,
    register_variant,
)
from .exceptions import ElasticDistError, EmptySequence, InvalidConfiguration
from .pairwise import nearest_neighbors, pairwise_distances, partial_distances, ts_dist
from .sequence import SequenceView

__version__ = "0.1.0"

__all__ = [
    'BandConfig',
    'configure',
    'DTW',
    'BandedDistanceEngine',
    'DistanceVariant',
    'distance',
    'dtw_distance',
    'get_variant',
    'register_variant',
    'ElasticDistError',
    'EmptySequence',
    'InvalidConfiguration',
    'nearest_neighbors',
    'pairwise_distances',
    'partial_distances',
    'ts_dist',
    'SequenceView',
]

# Configuration and pipeline modules
from .config import PipelineConfig
from .pipeline import run_pipeline
__all__.extend(['PipelineConfig', 'run_pipeline'])
