# -*- coding: utf-8 -*-
# Foilmesh/mesh/core/topology.py

"""
Project: Foilmesh
Date: 9/25/2026

Purpose:
--------
C-type structured far-field template. A classified contour (leading, trailing, upside and
lowerside anchors) is wrapped in a C-shaped outer boundary and split into five
quadrilateral blocks, and the whole topology is emitted into a MeshKernel.

Main Tasks:
-----------
    1. Place the contour points and seven far-field corners (firstmost, lowermost, bottom-
       right, rightmost, top-right, upmost, lastmost) relative to LE/TE and the radius R.
    2. Build fifteen named curves (three contour B-splines, six outer lines, the inlet arc,
       five connectors) and five named blocks from a symbolic connectivity table.
    3. Assign transfinite node distributions by curve role, mark every block transfinite
       and recombined, and emit the "farfield" and "wall" physical groups.

Notes:
------
- Integer tags come from per-category counters in construction order; the tables below
  are keyed by name only.
- Loop members are (curve name, direction); direction -1 traverses the curve reversed.
- A missing anchor is reported at construction, before any kernel command.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from geometry.errors import ClassificationError, ConfigError
from geometry.primitives import ANCHOR_ROLES, LabeledPoint, Role
from .base import MeshKernel
from .formats import MeshType, parse_mesh_type
from .transfinite import CurveRole, Sector, TransfiniteSpec, default_specs

logger = logging.getLogger(__name__)

__all__ = [
    "Boundary",
    "CURVES",
    "BLOCKS",
    "TRANSFINITE_PLAN",
    "PHYSICAL_GROUPS",
    "CTypeTopologyBuilder",
    "topology_builder",
]


@dataclass(frozen=True)
class Boundary:
    """
    Far-field parameters.

    radius : float
        Extent R of the C-domain (half-height R/2 above and below, R downstream of TE).
    plane : float
        z-coordinate of every point.
    accuracy : float
        Characteristic mesh size assigned to points.
    """
    radius: float = 1.0
    plane: float = 0.0
    accuracy: float = 1.0

    def __post_init__(self):
        if not self.radius > 0:
            raise ConfigError("Boundary radius must be > 0.", {"radius": self.radius})
        if not self.accuracy > 0:
            raise ConfigError("Boundary accuracy must be > 0.", {"accuracy": self.accuracy})


# Corner name → (x anchor, x offset in R, y anchor, y offset in R).
# Anchor "leading"/"trailing" takes that point's coordinate; "le_y" is the leading-edge y.
_CORNERS = (
    (Role.FIRSTMOST, "leading", 0.0, "le_y", -0.5),
    (Role.LOWERMOST, "trailing", 0.0, "le_y", -0.5),
    ("bottom_right", "trailing", 1.0, "le_y", -0.5),
    (Role.RIGHTMOST, "trailing", 1.0, "te_y", 0.0),
    ("top_right", "trailing", 1.0, "le_y", 0.5),
    (Role.UPMOST, "trailing", 0.0, "le_y", 0.5),
    (Role.LASTMOST, "leading", 0.0, "le_y", 0.5),
)

# name, kind, points. B-spline entries name the contour anchors they run between.
CURVES = (
    ("foremost", "bspline", ("trailing", "upside")),
    ("upper_to_lower", "bspline", ("upside", "lowerside")),
    ("aft", "bspline", ("lowerside", "trailing")),
    ("bottom_fore", "line", ("firstmost", "lowermost")),
    ("bottom_aft", "line", ("lowermost", "bottom_right")),
    ("outlet_lower", "line", ("bottom_right", "rightmost")),
    ("outlet_upper", "line", ("rightmost", "top_right")),
    ("top_aft", "line", ("top_right", "upmost")),
    ("top_fore", "line", ("upmost", "lastmost")),
    ("inlet_arc", "arc", ("lastmost", "leading", "firstmost")),
    ("lower_inlet_cut", "line", ("firstmost", "lowerside")),
    ("lower_wake_cut", "line", ("trailing", "lowermost")),
    ("wake_centerline", "line", ("rightmost", "trailing")),
    ("upper_wake_cut", "line", ("upmost", "trailing")),
    ("upper_inlet_cut", "line", ("upside", "lastmost")),
)

BLOCKS = (
    ("inlet", (("lower_inlet_cut", 1), ("upper_to_lower", -1), ("upper_inlet_cut", 1), ("inlet_arc", 1))),
    ("lower", (("lower_inlet_cut", 1), ("aft", 1), ("lower_wake_cut", 1), ("bottom_fore", -1))),
    ("lower_wake", (("lower_wake_cut", 1), ("bottom_aft", 1), ("outlet_lower", 1), ("wake_centerline", 1))),
    ("upper_wake", (("outlet_upper", 1), ("top_aft", 1), ("upper_wake_cut", 1), ("wake_centerline", -1))),
    ("upper", (("upper_wake_cut", 1), ("foremost", 1), ("upper_inlet_cut", 1), ("top_fore", -1))),
)

# curve name, spec role, variant applied to the role's spec.
TRANSFINITE_PLAN = (
    ("foremost", CurveRole.CONTOUR, "inner"),
    ("aft", CurveRole.CONTOUR, "inner"),
    ("top_fore", CurveRole.CONTOUR, "outer"),
    ("bottom_fore", CurveRole.CONTOUR, "outer"),
    ("upper_to_lower", CurveRole.INLET, None),
    ("inlet_arc", CurveRole.INLET, None),
    ("wake_centerline", CurveRole.WAKE, None),
    ("top_aft", CurveRole.WAKE, "bump"),
    ("bottom_aft", CurveRole.WAKE, "bump_reversed"),
    ("upper_inlet_cut", CurveRole.WALLS, "reversed"),
    ("outlet_upper", CurveRole.WALLS, "reversed"),
    ("outlet_lower", CurveRole.WALLS, None),
    ("lower_inlet_cut", CurveRole.WALLS, None),
    ("upper_wake_cut", CurveRole.WALLS, None),
    ("lower_wake_cut", CurveRole.WALLS, "reversed"),
)

PHYSICAL_GROUPS = (
    ("farfield", 1, ("bottom_fore", "bottom_aft", "outlet_lower", "outlet_upper",
                     "top_aft", "top_fore", "inlet_arc")),
    ("wall", 1, ("foremost", "upper_to_lower", "aft")),
)


def _apply_variant(spec: TransfiniteSpec, variant: Optional[str]) -> TransfiniteSpec:
    if variant is None:
        return spec
    if variant == "inner":
        return spec.stretched(Sector.INNER)
    if variant == "outer":
        return spec.stretched(Sector.OUTER)
    if variant == "reversed":
        return spec.reversed()
    if variant == "bump":
        return spec.bump()
    if variant == "bump_reversed":
        return spec.bump(reversed=True)
    raise ValueError("Unknown transfinite variant '{}'.".format(variant))


class _Counter:
    def __init__(self):
        self.last = 0

    def next(self) -> int:
        self.last += 1
        return self.last


class CTypeTopologyBuilder:
    """
    Emit the five-block C-type topology for a classified contour.

    Parameters
    ----------
    contour : Sequence[LabeledPoint]
        Output of `classify_edges`: anchors present, trailing point last.
    boundary : Boundary
        Radius, z-plane and point mesh size.
    transfinite : dict, optional
        CurveRole → TransfiniteSpec; missing roles use `default_specs()`.
    Raises
    ------
    ClassificationError
        If an anchor is missing or the anchors are out of order.
    """

    def __init__(self,
                 contour: Sequence[LabeledPoint],
                 boundary: Optional[Boundary] = None,
                 transfinite: Optional[Dict[CurveRole, TransfiniteSpec]] = None):
        self.contour: List[LabeledPoint] = list(contour)
        self.boundary = boundary or Boundary()
        specs = default_specs()
        specs.update(transfinite or {})
        self.transfinite = specs
        self._anchor_index = self._locate_anchors()

    # --------------------
    # Validation
    # --------------------
    def _locate_anchors(self) -> Dict[str, int]:
        index: Dict[str, int] = {}
        for i, p in enumerate(self.contour):
            if p.label in ANCHOR_ROLES:
                if p.label.value in index:
                    raise ClassificationError("Anchor held by more than one point.", {"role": p.label.value})
                index[p.label.value] = i
        missing = [r.value for r in ANCHOR_ROLES if r.value not in index]
        if missing:
            raise ClassificationError("Contour is missing anchors.", {"missing": missing})

        up, lo, te = index["upside"], index["lowerside"], index["trailing"]
        le = index["leading"]
        if not (up < le < lo < te == len(self.contour) - 1):
            raise ClassificationError(
                "Anchors out of order; expected upside < leading < lowerside < trailing (last).",
                {"upside": up, "leading": le, "lowerside": lo, "trailing": te, "points": len(self.contour)})
        return index

    # --------------------
    # Emission
    # --------------------
    def _corner_positions(self):
        le = self.contour[self._anchor_index["leading"]]
        te = self.contour[self._anchor_index["trailing"]]
        R = self.boundary.radius
        ref = {"leading": le.x, "trailing": te.x, "le_y": le.y, "te_y": te.y}
        for name, xa, dx, ya, dy in _CORNERS:
            key = name.value if isinstance(name, Role) else name
            yield key, ref[xa] + dx * R, ref[ya] + dy * R

    def _emit_points(self, kernel: MeshKernel, counter: _Counter) -> Dict[str, int]:
        z, size = self.boundary.plane, self.boundary.accuracy
        self._contour_tags = []
        for p in self.contour:
            self._contour_tags.append(kernel.add_point(p.x, p.y, z, size, counter.next()))
        names = {role: self._contour_tags[i] for role, i in self._anchor_index.items()}
        for key, x, y in self._corner_positions():
            names[key] = kernel.add_point(x, y, z, size, counter.next())
        return names

    def _spline_tags(self, start: str, end: str) -> List[int]:
        tags = self._contour_tags
        i, j = self._anchor_index[start], self._anchor_index[end]
        if start == "trailing":
            return [tags[i]] + tags[:j + 1]
        return tags[i:j + 1]

    def emit(self, kernel: MeshKernel) -> Dict[str, Dict[str, int]]:
        """
        Issue every geometry and structured-meshing command for the template.

        Returns
        -------
        dict
            {"points": {...}, "curves": {...}, "loops": {...}, "surfaces": {...},
             "groups": {...}} mapping names to the integer tags used.
        """
        point_tags = self._emit_points(kernel, _Counter())

        curves: Dict[str, int] = {}
        counter = _Counter()
        for name, kind, ends in CURVES:
            tag = counter.next()
            if kind == "bspline":
                curves[name] = kernel.add_bspline(self._spline_tags(*ends), tag)
            elif kind == "arc":
                a, c, b = (point_tags[e] for e in ends)
                curves[name] = kernel.add_circle_arc(a, c, b, tag)
            else:
                a, b = (point_tags[e] for e in ends)
                curves[name] = kernel.add_line(a, b, tag)

        loops: Dict[str, int] = {}
        surfaces: Dict[str, int] = {}
        loop_counter, surface_counter = _Counter(), _Counter()
        for name, members in BLOCKS:
            signed = [direction * curves[curve] for curve, direction in members]
            loops[name] = kernel.add_curve_loop(signed, loop_counter.next())
            surfaces[name] = kernel.add_plane_surface(loops[name], surface_counter.next())

        for name, role, variant in TRANSFINITE_PLAN:
            spec = _apply_variant(self.transfinite[role], variant)
            kernel.set_transfinite_curve(curves[name], *spec.kernel_args())

        for name, _ in BLOCKS:
            kernel.set_transfinite_surface(surfaces[name], "Left", [])
            kernel.set_recombine(2, surfaces[name])

        groups: Dict[str, int] = {}
        group_counter = _Counter()
        for name, dim, members in PHYSICAL_GROUPS:
            groups[name] = kernel.add_physical_group(dim, [curves[c] for c in members], name,
                                                     group_counter.next())

        kernel.set_option("Mesh.SaveAll", 1)

        logger.info("[CTypeTopologyBuilder] Emitted %d points, %d curves, %d blocks.",
                    len(self._contour_tags) + len(_CORNERS), len(curves), len(surfaces))
        return {"points": point_tags, "curves": curves, "loops": loops,
                "surfaces": surfaces, "groups": groups}


def topology_builder(mesh_type, contour, boundary=None, transfinite=None):
    """
    Return the template builder for `mesh_type`.

    Raises
    ------
    ConfigError
        For mesh types without a template (H-type, O-type).
    """
    kind = parse_mesh_type(mesh_type)
    if kind is not MeshType.C:
        raise ConfigError("Only C-type meshes are supported.", {"type": kind.value})
    return CTypeTopologyBuilder(contour, boundary, transfinite)
