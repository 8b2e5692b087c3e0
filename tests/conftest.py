"""
Test configuration and fixtures for pytest.

This file contains fixtures and configuration that will be available to all tests.
"""
import numpy as np
import pytest

# Set random seed for reproducibility
np.random.seed(42)


def reference_banded_dtw(x, y, band):
    """
    Naive full-matrix DTW (squared cost, sqrt result) over a Sakoe-Chiba band.

    Cells with |i - j| > band are unreachable.
    """
    n, m = len(x), len(y)
    C = np.full((n + 1, m + 1), np.inf)
    C[0, 0] = 0.0
    for i in range(1, n + 1):
        for j in range(1, m + 1):
            if abs(i - j) <= band:
                diff = x[i - 1] - y[j - 1]
                C[i, j] = diff * diff + min(C[i - 1, j], C[i, j - 1], C[i - 1, j - 1])
    return np.sqrt(C[n, m])


@pytest.fixture
def reference_dtw():
    """Naive banded DTW reference implementation."""
    return reference_banded_dtw


@pytest.fixture
def sample_time_series():
    """Generate a sample time series for testing."""
    return np.random.randn(30)


@pytest.fixture
def sample_series_pair():
    """Two random series of different lengths."""
    rng = np.random.default_rng(7)
    return rng.normal(size=15), rng.normal(size=12)


@pytest.fixture
def ragged_series():
    """Collection of series with different lengths."""
    rng = np.random.default_rng(11)
    return [rng.normal(size=n) for n in (8, 10, 9, 3)]
