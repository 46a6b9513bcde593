"""Shared pytest configuration for SearchTreeLib tests."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from searchtreelib import build_tree

SCENARIO_VALUES = [10, 5, 15, 3, 7, 12, 18]


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large degenerate trees (deselect with -m 'not slow')")


@pytest.fixture
def scenario_tree():
    """Seven-node tree built from 10, 5, 15, 3, 7, 12, 18.

    Structure:
             10
           /    \\
          5      15
         / \\    /  \\
        3   7  12   18
    """
    return build_tree(SCENARIO_VALUES)
