# -*- coding: utf-8 -*-
# Foilmesh/tests/test_config.py

import json

import pytest

from geometry.errors import SchemaError
from mesh.config import (
    boundary_from_config,
    build_config,
    load_config,
    normalize_params,
    transfinite_from_config,
)
from mesh.core.transfinite import CurveRole, Distribution


def test_defaults():
    cfg = build_config()
    assert cfg["contour"]["intercept"] == 0.175
    assert cfg["contour"]["points"] is None
    assert cfg["boundary"] == {"type": "c-type", "radius": 1.0, "plane": 0.0, "accuracy": 1.0}
    assert cfg["transfinite"]["contour"]["distribution"] == "bump"
    assert cfg["output"]["format"] == "msh"
    assert cfg["output"]["dimension"] == 2


def test_defaults_are_not_shared():
    a = build_config({"radius": 3.0})
    b = build_config()
    assert a["boundary"]["radius"] == 3.0
    assert b["boundary"]["radius"] == 1.0


def test_flat_aliases_and_case():
    cfg = build_config({"Radius": 5, "INTERCEPT": 0.25, "dim": 3, "Format": ".SU2"})
    assert cfg["boundary"]["radius"] == 5
    assert cfg["contour"]["intercept"] == 0.25
    assert cfg["output"]["dimension"] == 3


def test_nested_sections_merge_per_role():
    cfg = build_config({"transfinite": {"Wake": {"stretch": 1.2}}})
    assert cfg["transfinite"]["wake"] == {"accuracy": 0.1, "distribution": "progression", "stretch": 1.2}
    specs = transfinite_from_config(cfg)
    assert specs[CurveRole.WAKE].stretch == 1.2
    assert specs[CurveRole.CONTOUR].distribution is Distribution.BUMP


def test_boundary_from_config():
    b = boundary_from_config(build_config({"boundary": {"radius": 8, "plane": 1.5}}))
    assert (b.radius, b.plane, b.accuracy) == (8.0, 1.5, 1.0)


@pytest.mark.parametrize("params, key", [
    ({"intercept": 0.0}, "contour.intercept"),
    ({"intercept": 0.6}, "contour.intercept"),
    ({"points": 3}, "contour.points"),
    ({"points": 10.5}, "contour.points"),
    ({"points": float("inf")}, "contour.points"),
    ({"points": float("nan")}, "contour.points"),
    ({"radius": -1}, "boundary.radius"),
    ({"accuracy": 0}, "boundary.accuracy"),
    ({"plane": float("nan")}, "boundary.plane"),
    ({"dimension": 4}, "output.dimension"),
    ({"timeout_s": 0}, "output.timeout_s"),
    ({"radius": "wide"}, "boundary.radius"),
    ({"transfinite": {"walls": {"accuracy": -0.5}}}, "transfinite.walls.accuracy"),
    ({"transfinite": {"walls": {"distribution": "cubic"}}}, "transfinite.walls.distribution"),
])
def test_out_of_range_values(params, key):
    with pytest.raises(SchemaError) as info:
        build_config(params)
    assert info.value.context["key"] == key


@pytest.mark.parametrize("params", [
    {"type": "h-type-ish"},
    {"format": "obj"},
])
def test_bad_enums(params):
    with pytest.raises(SchemaError):
        build_config(params)


@pytest.mark.parametrize("params", [
    {"colour": "red"},
    {"boundary": {"diameter": 2}},
    {"transfinite": {"walls": {"count": 3}}},
    {"transfinite": {"walls": 3}},
])
def test_unknown_keys(params):
    with pytest.raises(SchemaError):
        normalize_params(params)


def test_load_config(tmp_path):
    path = tmp_path / "mesh.json"
    path.write_text(json.dumps({"boundary": {"radius": 12}, "output": {"format": "vtk"}}), encoding="utf-8")
    cfg = load_config(str(path))
    assert cfg["boundary"]["radius"] == 12
    assert cfg["output"]["format"] == "vtk"


def test_load_config_errors(tmp_path):
    with pytest.raises(SchemaError):
        load_config(str(tmp_path / "missing.json"))
    bad = tmp_path / "bad.json"
    bad.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(SchemaError):
        load_config(str(bad))
