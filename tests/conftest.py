"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.engine import BandEngine
from src.models.calibration import DEFAULT_CONFIG


@pytest.fixture
def default_config():
    """Published calibration."""
    return DEFAULT_CONFIG


@pytest.fixture(scope="session")
def shared_engine():
    """Engine built once for read-only tests."""
    return BandEngine()


@pytest.fixture
def engine():
    """Fresh engine with an empty cache."""
    return BandEngine()
