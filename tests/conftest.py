"""Shared fixtures for the test suite."""

import sys
from pathlib import Path

import pytest

# Add src to path so the suite runs from a plain checkout
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from jaunty_extensions.utils import create_rng  # noqa: E402


@pytest.fixture
def rng():
    """Seeded generator for reproducible draws."""
    return create_rng(12345)
