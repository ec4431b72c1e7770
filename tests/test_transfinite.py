# -*- coding: utf-8 -*-
# Foilmesh/tests/test_transfinite.py

import pytest

from geometry.errors import ConfigError
from mesh.core.transfinite import (
    BUMP_DAMPING,
    OUTER_SECTOR_FACTOR,
    CurveRole,
    Distribution,
    Sector,
    TransfiniteSpec,
    default_specs,
)


def test_points_from_accuracy():
    assert TransfiniteSpec(CurveRole.WAKE, accuracy=0.1).points == 10
    assert TransfiniteSpec(CurveRole.WAKE, accuracy=0.03).points == 33
    assert TransfiniteSpec(CurveRole.WAKE, accuracy=0.0).points == 1
    assert TransfiniteSpec(CurveRole.WAKE, accuracy=5.0).points == 1


def test_negative_accuracy_rejected():
    with pytest.raises(ConfigError):
        TransfiniteSpec(CurveRole.WAKE, accuracy=-0.1)


def test_derivations():
    spec = TransfiniteSpec(CurveRole.CONTOUR, 0.1, Distribution.BUMP, 0.4)
    assert spec.reversed().stretch == -0.4
    assert spec.stretched(Sector.INNER).stretch == 0.4
    assert spec.stretched(Sector.OUTER).stretch == pytest.approx(0.4 * OUTER_SECTOR_FACTOR)
    assert spec.stretched("outer", reversed=True).stretch == pytest.approx(-0.4 * OUTER_SECTOR_FACTOR)
    wake = TransfiniteSpec(CurveRole.WAKE, 0.1, Distribution.PROGRESSION, 1.2)
    bumped = wake.bump(reversed=True)
    assert bumped.distribution is Distribution.BUMP
    assert bumped.stretch == pytest.approx(-1.2 / BUMP_DAMPING)
    assert wake.stretch == 1.2


def test_kernel_args():
    assert TransfiniteSpec(CurveRole.INLET, 0.05, Distribution.BETA, 0.9).kernel_args() == (20, "Beta", 0.9)
    assert TransfiniteSpec(CurveRole.INLET, 0.5, Distribution.UNIFORM, 3.0).kernel_args() == (2, "Progression", 1.0)


def test_from_dict():
    spec = TransfiniteSpec.from_dict("walls", {"accuracy": 0.25, "distribution": "BUMP"})
    assert spec.role is CurveRole.WALLS
    assert spec.points == 4
    assert spec.distribution is Distribution.BUMP
    assert spec.stretch == 1.0
    with pytest.raises(ConfigError):
        TransfiniteSpec.from_dict("walls", {"distribution": "cubic"})


def test_default_specs():
    specs = default_specs()
    assert set(specs) == set(CurveRole)
    assert specs[CurveRole.CONTOUR].distribution is Distribution.BUMP
    assert all(s.points == 10 for s in specs.values())
