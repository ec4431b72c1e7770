# -*- coding: utf-8 -*-
# Foilmesh/tests/test_primitives.py

import numpy as np
import pytest

from geometry.errors import ConfigError, FoilError, SchemaError
from geometry.primitives import LabeledPoint, Point, Role, to_array, to_points


def test_point_arithmetic():
    a, b = Point(1.0, 2.0), Point(3.0, -2.0)
    assert a + b == Point(4.0, 0.0)
    assert b - a == Point(2.0, -4.0)
    assert 2 * a == Point(2.0, 4.0)
    assert a * 0.5 == Point(0.5, 1.0)
    assert a.distance(Point(4.0, 6.0)) == pytest.approx(5.0)


def test_point_lerp_endpoints_are_exact():
    a, b = Point(0.1, 0.7), Point(0.3, -0.2)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0).isclose(b, 1e-15)
    assert a.lerp(b, 0.5).isclose(Point(0.2, 0.25), 1e-15)


def test_isclose_zero_tolerance_is_exact():
    a = Point(1.0, 1.0)
    assert a.isclose(Point(1.0, 1.0))
    assert not a.isclose(Point(1.0, 1.0 + 1e-15))
    assert a.isclose(Point(1.0, 1.0 + 1e-15), tol=1e-12)


def test_labeled_point_is_immutable_and_copies():
    p = LabeledPoint(Point(0.0, 0.0))
    q = p.with_tag(3).with_label(Role.LEADING)
    assert p.tag == 0 and p.label is None
    assert q.tag == 3 and q.label is Role.LEADING
    assert (q.x, q.y) == (0.0, 0.0)


def test_array_conversion_roundtrip():
    arr = np.array([[0.0, 1.0], [2.0, 3.0]])
    assert np.array_equal(to_array(to_points(arr)), arr)


def test_error_context_in_message():
    err = SchemaError("Out-of-range value.", {"key": "boundary.radius", "value": -1})
    assert isinstance(err, ConfigError)
    assert isinstance(err, FoilError)
    assert "key='boundary.radius'" in str(err)
    assert err.context["value"] == -1
