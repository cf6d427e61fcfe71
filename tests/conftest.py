"""
Pytest configuration and shared fixtures.
"""
import sys
from pathlib import Path

# Add project root to path so "numlab" can be imported without installing
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np
import pytest


@pytest.fixture
def rng() -> np.random.Generator:
    """Deterministic generator for stochastic routines."""
    return np.random.default_rng(12345)


@pytest.fixture
def gappy_series() -> np.ndarray:
    """Short series with a leading gap, an interior gap and a trailing gap."""
    return np.array([np.nan, 1.0, np.nan, np.nan, 4.0, 2.0, np.nan])


@pytest.fixture
def run_yaml(tmp_path: Path) -> Path:
    """Write a complete run configuration and return its path."""
    path = tmp_path / "run.yaml"
    path.write_text(
        "seed: 7\n"
        "simulation:\n"
        "  model: arma\n"
        "  n: 200\n"
        "  mu: 0.5\n"
        "  phi: [0.5]\n"
        "  theta: [0.3, 0.1]\n"
        "  noise_sd: 1.0\n"
        "mixture:\n"
        "  n: 50\n"
        "  weights: [0.7, 0.3]\n"
        "  means: [0.0, 3.0]\n"
        "  sds: [1.0, 0.5]\n"
        "rolling:\n"
        "  window: 10\n"
        "output:\n"
        f"  path: {tmp_path / 'out' / 'series.csv'}\n",
        encoding="utf-8",
    )
    return path
