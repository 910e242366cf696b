"""Shared test fixtures for shape composition tests."""
import matplotlib

matplotlib.use("Agg")

import pytest
from psshapes import Rectangle


@pytest.fixture
def tall():
    """Rectangle with height 4, width 2."""
    return Rectangle(2, 4)


@pytest.fixture
def wide():
    """Rectangle with height 2, width 6."""
    return Rectangle(6, 2)
