# -*- coding: utf-8 -*-
# Foilmesh/tests/test_edges.py

import numpy as np
import pytest

from geometry.errors import ClassificationError, ConfigError
from geometry.primitives import ANCHOR_ROLES, Role
from geometry.topology.edges import classify_edges, find_role, missing_anchors, validate_intercept


def _index(points, role):
    return next(i for i, p in enumerate(points) if p.label == role)


def test_every_anchor_held_exactly_once(classified):
    for role in ANCHOR_ROLES:
        assert sum(1 for p in classified if p.label == role) == 1
    assert missing_anchors(classified) == []


def test_anchor_order_and_trailing_last(classified):
    up = _index(classified, Role.UPSIDE)
    le = _index(classified, Role.LEADING)
    lo = _index(classified, Role.LOWERSIDE)
    te = _index(classified, Role.TRAILING)
    assert up < le < lo < te == len(classified) - 1


def test_tags_are_sequential(classified):
    assert [p.tag for p in classified] == list(range(1, len(classified) + 1))


def test_split_points_sit_on_intercept(classified):
    assert find_role(classified, Role.UPSIDE).x == pytest.approx(0.175)
    assert find_role(classified, Role.LOWERSIDE).x == pytest.approx(0.175)
    assert find_role(classified, Role.UPSIDE).y > 0
    assert find_role(classified, Role.LOWERSIDE).y < 0


def test_leading_and_trailing_positions(classified):
    le = find_role(classified, Role.LEADING)
    te = find_role(classified, Role.TRAILING)
    assert (le.x, le.y) == pytest.approx((0.0, 0.0))
    assert (te.x, te.y) == pytest.approx((1.0, 0.0))


def test_symmetric_section_gives_equal_split_heights(naca0012):
    pts = classify_edges(naca0012, 0.25)
    up, lo = find_role(pts, Role.UPSIDE), find_role(pts, Role.LOWERSIDE)
    assert abs(up.y) == pytest.approx(abs(lo.y), abs=1e-12)


def test_inserted_points_grow_contour_by_two(naca0012):
    opened = naca0012.shape[0] - 1
    assert len(classify_edges(naca0012, 0.175)) == opened + 2


def test_exact_intercept_vertex_is_labeled_in_place(diamond):
    pts = classify_edges(diamond, 0.5)
    assert len(pts) == 4
    up, lo = find_role(pts, Role.UPSIDE), find_role(pts, Role.LOWERSIDE)
    assert (up.x, up.y) == (0.5, 0.1)
    assert (lo.x, lo.y) == (0.5, -0.1)


def test_open_and_closed_input_agree(naca0012):
    a = classify_edges(naca0012)
    b = classify_edges(naca0012[:-1])
    assert [(p.x, p.y, p.label) for p in a] == [(p.x, p.y, p.label) for p in b]


def test_blunt_trailing_edge_gets_synthetic_point():
    pts = np.array([
        [1.0, 0.01],
        [0.6, 0.06],
        [0.3, 0.07],
        [0.1, 0.04],
        [0.0, 0.0],
        [0.1, -0.04],
        [0.3, -0.05],
        [0.6, -0.04],
        [1.0, -0.01],
    ])
    out = classify_edges(pts, 0.2)
    assert out[0].label is None
    assert (out[-1].x, out[-1].y, out[-1].label) == (1.0, 0.0, Role.TRAILING)
    assert sum(1 for p in out if p.label == Role.TRAILING) == 1
    assert len(out) == len(pts) + 3


@pytest.mark.parametrize("bad", [0.0, -0.1, 0.51, "abc"])
def test_intercept_outside_domain(bad, naca0012):
    with pytest.raises(ConfigError):
        classify_edges(naca0012, bad)


def test_validate_intercept_bounds():
    assert validate_intercept(0.5) == 0.5
    assert validate_intercept("0.2") == 0.2


def test_degenerate_contours():
    with pytest.raises(ClassificationError):
        classify_edges(np.array([[0.0, 0.0], [1.0, 0.1], [0.0, 0.0]]))
    with pytest.raises(ClassificationError):
        classify_edges(np.array([[0.5, 0.0], [0.5, 1.0], [0.5, 2.0], [0.5, 3.0]]))


def test_contour_short_of_intercept_raises(diamond):
    # Chord spans x in [2, 3]; neither arc reaches x = 0.2.
    shifted = diamond + np.array([2.0, 0.0])
    with pytest.raises(ClassificationError):
        classify_edges(shifted, 0.2)

