"""
Test configuration and fixtures for pytest.

This file contains fixtures and configuration that will be available to all tests.
"""
import numpy as np
import pytest

# Set random seed for reproducibility
np.random.seed(42)


# Common test data fixtures
@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(3363)


@pytest.fixture
def sample_time_series():
    """Generate a sample time series for testing."""
    return np.random.randn(128)


@pytest.fixture
def ramp():
    """The series 1..8 used for the reference encoding."""
    return np.arange(1, 9, dtype=float)


@pytest.fixture
def series_file(tmp_path):
    """A one-column text file with a noisy sine wave."""
    x = np.sin(np.linspace(0, 6 * np.pi, 96)) + 0.1 * np.random.randn(96)
    path = tmp_path / "series.txt"
    np.savetxt(path, x)
    return path
