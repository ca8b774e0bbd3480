"""Pytest fixtures for mcprimer tests."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import numpy as np
import pytest


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def rng() -> np.random.Generator:
    """A seeded generator owned by the test."""
    return np.random.default_rng(12345)
