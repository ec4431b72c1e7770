# -*- coding: utf-8 -*-
# Foilmesh/tests/conftest.py

import numpy as np
import pytest

from geometry.geo.geo_loader import sanitize_points
from geometry.loaders.naca_loader import generate_naca
from geometry.topology.edges import classify_edges


@pytest.fixture
def naca0012():
    """Closed, CCW NACA 0012 contour (201 rows) starting at the trailing edge."""
    raw = generate_naca("naca0012", density=101)
    return sanitize_points(raw.points, source=raw.name)


@pytest.fixture
def classified(naca0012):
    return classify_edges(naca0012, 0.175)


@pytest.fixture
def diamond():
    """Closed CCW rhombus with vertices at x = 1, 0.5, 0, 0.5 (TE first)."""
    return np.array([
        [1.0, 0.0],
        [0.5, 0.1],
        [0.0, 0.0],
        [0.5, -0.1],
        [1.0, 0.0],
    ])
