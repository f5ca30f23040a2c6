"""Shared pytest fixtures for the JSONNav test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running tests excluded by run_tests.py")


@pytest.fixture
def sample_tree():
    """The two-branch object used throughout the docs.

    {"k1": {"k2": "v1"}, "k3": {"k4": "v2"}}
    """
    return {"k1": {"k2": "v1"}, "k3": {"k4": "v2"}}


@pytest.fixture
def orders_tree():
    """A document mixing objects, arrays of objects and leaf arrays."""
    return {
        "customer": {"name": "Ada", "address": {"city": "London", "zip": "N1"}},
        "orders": [
            {"id": 1, "items": [{"sku": "A", "qty": 2}, {"sku": "B", "qty": 1}]},
            {"id": 2, "items": [{"sku": "C", "qty": 5}]},
            {"id": 3, "items": []},
        ],
        "tags": ["new", "vip"],
        "note": None,
    }
