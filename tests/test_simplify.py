# -*- coding: utf-8 -*-
# Foilmesh/tests/test_simplify.py

import numpy as np
import pytest

from geometry.curves import adjust_density, streamline
from geometry.curves.simplify import triangle_area
from geometry.topology.loop import is_closed


def test_triangle_area():
    a, b, c = np.array([0.0, 0.0]), np.array([1.0, 0.0]), np.array([0.0, 2.0])
    assert triangle_area(a, b, c) == pytest.approx(1.0)
    assert triangle_area(a, c, b) == pytest.approx(1.0)


def test_streamline_to_target_stays_within_hull(naca0012):
    out = streamline(naca0012, target=60)
    assert out.shape[0] <= 61
    assert is_closed(out)
    assert out[:, 0].min() >= naca0012[:, 0].min()
    assert out[:, 0].max() <= naca0012[:, 0].max()
    assert out[:, 1].min() >= naca0012[:, 1].min()
    assert out[:, 1].max() <= naca0012[:, 1].max()
    # Survivors are original vertices, in original order.
    idx = [int(np.flatnonzero((naca0012[:-1] == p).all(axis=1))[0]) for p in out[:-1]]
    assert idx == sorted(idx)


def test_streamline_keeps_end_points(naca0012):
    out = streamline(naca0012, target=10)
    assert np.array_equal(out[0], naca0012[0])
    assert np.array_equal(out[-2], naca0012[-2])


def test_tolerance_blocks_large_removals(naca0012):
    tol = 1e-7
    out = streamline(naca0012, tolerance=tol)
    assert 3 < out.shape[0] < naca0012.shape[0]
    # Nothing left to remove at this tolerance.
    again = streamline(out, tolerance=tol)
    assert again.shape == out.shape


def test_zero_tolerance_removes_nothing_from_curved_contour(naca0012):
    assert streamline(naca0012, tolerance=0.0).shape == naca0012.shape


def test_no_removal_at_or_below_target(diamond):
    assert np.array_equal(streamline(diamond, target=4), diamond)


def test_small_input_unchanged():
    tri = np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0], [0.0, 0.0]])
    assert np.array_equal(streamline(tri, target=3), tri)


def test_ties_go_to_first_index():
    # Interior vertices 1 and 2 have equal areas; the first is removed.
    pts = np.array([[0.0, 0.0], [1.0, 1.0], [2.0, 1.0], [3.0, 0.0], [4.0, 0.0], [5.0, 0.0]])
    out = streamline(pts, target=5)
    assert out.shape[0] == 5
    assert not (out == [1.0, 1.0]).all(axis=1).any()
    assert (out == [2.0, 1.0]).all(axis=1).any()


def test_collinear_points_are_not_candidates():
    pts = np.array([[0.0, 0.0], [1.0, 0.0], [2.0, 0.0], [3.0, 0.0]])
    assert np.array_equal(streamline(pts, target=3), pts)


def test_invalid_arguments(diamond):
    with pytest.raises(ValueError):
        streamline(diamond, target=2)
    with pytest.raises(ValueError):
        streamline(diamond, tolerance=-1.0)


def test_adjust_density_both_directions(naca0012):
    fewer = adjust_density(naca0012, 81)
    assert fewer.shape[0] <= 81
    assert is_closed(fewer)
    more = adjust_density(naca0012, 801)
    n = naca0012.shape[0]
    assert more.shape[0] == (n - 1) * ((801 - n) // (n - 1) + 1) + 1
    assert more.shape[0] <= 801
    with pytest.raises(ValueError):
        adjust_density(naca0012, 3)
