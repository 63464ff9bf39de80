"""Pytest fixtures for spectrafit tests."""

import pytest

import numpy as np

from spectrafit.core.fitting.simulation import simulate_spectrum


@pytest.fixture
def two_gaussians():
    """Two well-separated Gaussian peaks and their sampled spectrum."""
    x = np.linspace(-1.0, 1.0, 201)
    truth = [
        {"x": -0.5, "y": 0.2, "width": 0.2},
        {"x": 0.5, "y": 0.2, "width": 0.3},
    ]
    return {"x": x, "y": simulate_spectrum(x, truth)}, truth


@pytest.fixture
def two_gaussian_guesses():
    """Initial guesses within 10% of the generating peaks."""
    return [
        {"x": -0.52, "y": 0.19, "width": 0.21},
        {"x": 0.52, "y": 0.18, "width": 0.28},
    ]


@pytest.fixture
def simple_data():
    """Small three-point spectrum."""
    return {"x": [-1.0, 0.0, 1.0], "y": [1.0, 2.0, 1.0]}


@pytest.fixture
def sample_config_file(tmp_path):
    """Create a sample configuration file."""
    config_file = tmp_path / "spectrafit.toml"
    config_file.write_text(
        """
[shape]
kind = "lorentzian"

[optimization]
kind = "trf"
max_factor_x = 1.0

[optimization.options]
max_iterations = 250

[optimization.parameters.width]
min = 0.05
"""
    )
    return config_file
