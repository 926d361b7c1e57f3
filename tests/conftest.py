"""
Pytest configuration file for the lazy list tests.

This file ensures that the project root is in the Python path so that test
files can import lazylist, utils and models, and provides shared fixtures.
"""

import sys
from pathlib import Path

# Add the parent directory to the Python path
parent_dir = Path(__file__).parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

import pytest

import models
from utils import clear_performance_metrics


@pytest.fixture(autouse=True)
def restore_settings():
    """Every test starts and ends with default settings and no recorded metrics"""
    models.reset_settings()
    clear_performance_metrics()
    yield
    models.reset_settings()
    clear_performance_metrics()


@pytest.fixture
def numbers():
    """The sample list used throughout the scenarios"""
    from lazylist import from_array
    return from_array([1, 2, 6, 10, 12, 202])


@pytest.fixture
def sample_lists():
    """Lists of assorted shapes for property checks"""
    from lazylist import empty, from_array, from_values, map, concat, tail, take
    return [
        empty(),
        from_values(7),
        from_array([1, 2, 6, 10, 12, 202]),
        from_array(range(20)),
        map(lambda x: x * 3, from_array(range(10))),
        concat(from_values(1, 2), from_values(3, 4, 5)),
        tail(from_values(9, 8, 7, 6, 5)),
        take(4, from_array(range(100))),
        from_array([[1, 2], [3], []]),
    ]
