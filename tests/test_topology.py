# -*- coding: utf-8 -*-
# Foilmesh/tests/test_topology.py

import pytest

from geometry.errors import ClassificationError, ConfigError
from geometry.primitives import Role
from mesh.core.errors import KernelError
from mesh.core.kernels import RecordingKernel
from mesh.core.topology import (
    BLOCKS,
    CURVES,
    PHYSICAL_GROUPS,
    Boundary,
    CTypeTopologyBuilder,
    topology_builder,
)
from mesh.core.transfinite import CurveRole, Distribution, TransfiniteSpec


def _emit(contour, **kwargs):
    kernel = RecordingKernel()
    kernel.initialize()
    kernel.add_model("test")
    tags = CTypeTopologyBuilder(contour, **kwargs).emit(kernel)
    return kernel, tags


def test_well_formed_blocks(classified):
    kernel, tags = _emit(classified)
    assert len(kernel.points) == len(classified) + 7
    assert len(kernel.curves) == len(CURVES) == 15
    assert len(kernel.loops) == len(BLOCKS) == 5
    assert len(kernel.surfaces) == 5
    assert set(kernel.transfinite_surfaces) == set(kernel.surfaces)
    assert set(kernel.recombined) == set(kernel.surfaces)
    assert all(arr == ("Left", ()) for arr in kernel.transfinite_surfaces.values())
    assert kernel.options["Mesh.SaveAll"] == 1
    assert list(tags["curves"]) == [name for name, _, _ in CURVES]


def test_curve_kinds_and_order(classified):
    kernel, tags = _emit(classified)
    kinds = [kernel.curves[tags["curves"][name]][0] for name, _, _ in CURVES]
    assert kinds[:3] == ["bspline"] * 3
    assert kinds[9] == "arc"
    assert kinds.count("line") == 11
    assert [tags["curves"][name] for name, _, _ in CURVES] == list(range(1, 16))


def test_contour_splines_cover_the_contour(classified):
    kernel, tags = _emit(classified)
    fore = kernel.curves[tags["curves"]["foremost"]][1]
    mid = kernel.curves[tags["curves"]["upper_to_lower"]][1]
    aft = kernel.curves[tags["curves"]["aft"]][1]
    n = len(classified)
    assert fore[0] == n and fore[1] == 1
    assert fore[-1] == mid[0] and mid[-1] == aft[0] and aft[-1] == n
    # Every contour point appears on exactly one spline apart from the shared anchors.
    assert len(fore) + len(mid) + len(aft) == n + 3


def test_physical_groups(classified):
    kernel, tags = _emit(classified)
    groups = {name: (dim, members) for (dim, _), (name, members) in kernel.groups.items()}
    assert set(groups) == {"farfield", "wall"}
    assert groups["farfield"] == (1, tuple(range(4, 11)))
    assert groups["wall"] == (1, (1, 2, 3))
    assert [g[0] for g in PHYSICAL_GROUPS] == list(tags["groups"])


def test_corner_positions(classified):
    kernel, tags = _emit(classified, boundary=Boundary(radius=4.0, plane=0.5, accuracy=0.2))
    pts = {name: kernel.points[tag] for name, tag in tags["points"].items()}
    assert pts["firstmost"][:2] == pytest.approx((0.0, -2.0))
    assert pts["lowermost"][:2] == pytest.approx((1.0, -2.0))
    assert pts["bottom_right"][:2] == pytest.approx((5.0, -2.0))
    assert pts["rightmost"][:2] == pytest.approx((5.0, 0.0))
    assert pts["top_right"][:2] == pytest.approx((5.0, 2.0))
    assert pts["upmost"][:2] == pytest.approx((1.0, 2.0))
    assert pts["lastmost"][:2] == pytest.approx((0.0, 2.0))
    assert all(p[2] == 0.5 and p[3] == 0.2 for p in kernel.points.values())


def test_transfinite_plan(classified):
    specs = {
        CurveRole.CONTOUR: TransfiniteSpec(CurveRole.CONTOUR, 0.05, Distribution.BUMP, 0.2),
        CurveRole.WAKE: TransfiniteSpec(CurveRole.WAKE, 0.1, Distribution.PROGRESSION, 1.1),
        CurveRole.WALLS: TransfiniteSpec(CurveRole.WALLS, 0.25, Distribution.PROGRESSION, 1.3),
    }
    kernel, tags = _emit(classified, transfinite=specs)
    tf = {name: kernel.transfinite_curves[tag] for name, tag in tags["curves"].items()}
    assert len(tf) == 15
    assert tf["foremost"] == (20, "Bump", 0.2)
    assert tf["top_fore"] == (20, "Bump", pytest.approx(4.0))
    assert tf["upper_to_lower"] == (10, "Progression", 1.0)
    assert tf["wake_centerline"] == (10, "Progression", 1.1)
    assert tf["top_aft"][1] == "Bump" and tf["top_aft"][2] == pytest.approx(1.1 / 4.75)
    assert tf["bottom_aft"][2] == pytest.approx(-1.1 / 4.75)
    assert tf["upper_inlet_cut"] == (4, "Progression", -1.3)
    assert tf["outlet_lower"] == (4, "Progression", 1.3)


def test_generate_requires_synchronize(classified):
    kernel, _ = _emit(classified)
    with pytest.raises(KernelError):
        kernel.generate(2)
    kernel.synchronize()
    kernel.generate(2)
    assert kernel.calls("generate")[0].args == {"dim": 2}


def test_missing_anchor_fails_before_kernel(classified):
    broken = [p.with_label(None) if p.label is Role.UPSIDE else p for p in classified]
    kernel = RecordingKernel()
    with pytest.raises(ClassificationError):
        builder = CTypeTopologyBuilder(broken)
        builder.emit(kernel)
    assert kernel.commands == []


def test_anchor_order_enforced(classified):
    swapped = [p.with_label({Role.UPSIDE: Role.LOWERSIDE, Role.LOWERSIDE: Role.UPSIDE}.get(p.label, p.label))
               for p in classified]
    with pytest.raises(ClassificationError):
        CTypeTopologyBuilder(swapped)


def test_boundary_validation():
    with pytest.raises(ConfigError):
        Boundary(radius=0.0)
    with pytest.raises(ConfigError):
        Boundary(accuracy=-1.0)


def test_only_c_type_has_a_template(classified):
    assert isinstance(topology_builder("C", classified), CTypeTopologyBuilder)
    with pytest.raises(ConfigError):
        topology_builder("o-type", classified)
    with pytest.raises(ConfigError):
        topology_builder("x-type", classified)


def test_named_commands_are_logged_with_their_arguments():
    kernel = RecordingKernel()
    kernel.initialize()
    kernel.add_model("naca")
    kernel.set_option("Mesh.SaveAll", 1)
    p1 = kernel.add_point(0.0, 0.0, 0.0, 0.1, 1)
    p2 = kernel.add_point(1.0, 0.0, 0.0, 0.1, 2)
    kernel.add_line(p1, p2, 1)
    kernel.add_physical_group(1, [1], "wall", 1)
    assert kernel.calls("add_model")[0].args == {"name": "naca"}
    assert kernel.calls("set_option")[0].args == {"name": "Mesh.SaveAll", "value": 1}
    assert kernel.calls("add_physical_group")[0].args["name"] == "wall"
    assert kernel.model == "naca"
    assert kernel.options == {"Mesh.SaveAll": 1}
