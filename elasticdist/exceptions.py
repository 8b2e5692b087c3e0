"""
Exception hierarchy for elasticdist.

All errors derive from ``ValueError`` so callers that already guard numeric
input with ``except ValueError`` keep working.
"""


class ElasticDistError(ValueError):
    """Base class for elasticdist errors."""


class InvalidConfiguration(ElasticDistError):
    """Raised when a band fraction, variant, method or engine is invalid."""


class EmptySequence(ElasticDistError):
    """Raised when a distance is requested on a zero-length sequence."""
