"""Pytest configuration and shared fixtures."""

import math

import numpy as np
import pytest
import sys
from pathlib import Path

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from qperceptron.core.quantum.register import QuantumRegister


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: statistical tests with many trials")


class FixedSource:
    """Random source that replays fixed values and counts draws."""

    def __init__(self, *values):
        self.values = list(values)
        self.draws = 0

    def random(self):
        self.draws += 1
        return self.values.pop(0)


class ForbiddenSource:
    """Random source for paths that must stay deterministic."""

    def random(self):
        raise AssertionError("random source must not be consumed")


@pytest.fixture
def rng():
    """Provide a seeded generator."""
    return np.random.default_rng(1234)


@pytest.fixture
def register(rng):
    """Provide a fresh two-qubit register."""
    return QuantumRegister(2, rng=rng)


@pytest.fixture
def bell_state():
    """(|00> + |11>) / sqrt(2)"""
    v = np.zeros(4, dtype=np.complex128)
    v[0] = v[3] = 1 / math.sqrt(2)
    return v


@pytest.fixture
def temp_output_dir(tmp_path):
    """Provide a temporary directory for test outputs."""
    return tmp_path / "outputs"


@pytest.fixture(scope="session")
def project_root_path():
    """Provide the project root path."""
    return Path(__file__).parent.parent


@pytest.fixture
def fixed_source():
    """Factory for random sources that replay the given values."""
    return FixedSource


@pytest.fixture
def forbidden_source():
    """Random source that fails the test if it is drawn from."""
    return ForbiddenSource()
