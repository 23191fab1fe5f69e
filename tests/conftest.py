"""
Test configuration and fixtures for pytest.

This file contains fixtures and configuration that will be available to all tests.
"""
import numpy as np
import pandas as pd
import pytest

# Set random seed for reproducibility
np.random.seed(42)


@pytest.fixture
def sample_series():
    """The five-point series used throughout the examples."""
    return np.array([2, 4, 6, 8, 9])


@pytest.fixture
def sample_time_series():
    """Generate a sample time series for testing."""
    return np.random.randn(100)


@pytest.fixture
def sample_csv(tmp_path):
    """CSV file with an unsorted time column and an integer value column."""
    path = tmp_path / "series.csv"
    pd.DataFrame({
        "timestamp": [3, 0, 4, 1, 2],
        "value": [8, 2, 9, 4, 6],
    }).to_csv(path, index=False)
    return path
