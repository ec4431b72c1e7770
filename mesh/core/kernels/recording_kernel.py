# -*- coding: utf-8 -*-
# Foilmesh/mesh/core/kernels/recording_kernel.py

"""
Project: Foilmesh
Date: 9/24/2026

Purpose:
--------
In-memory MeshKernel that checks every command against the model built so far and keeps
the ordered command stream. It backs `.geo` dry runs and lets the topology template be
verified without gmsh installed.

Main Tasks:
-----------
    1. Enforce session order (initialize → model → geometry → synchronize → generate →
       write → finalize).
    2. Enforce tag invariants: unique positive tags per category, references only to
       existing entities, curve loops that chain end-to-start and close.
    3. Expose the recorded entities for inspection and render them as a `.geo` script.

Notes:
------
- `write()` produces a file only for `.geo` paths; other formats are recorded only.
- Violations raise KernelError at the offending command.
"""

import logging
from typing import Any, Dict, List, NamedTuple, Sequence, Tuple, Union

from ..base import MeshKernel
from ..errors import KernelError
from ..writer import render_geo_script, write_geo_file

logger = logging.getLogger(__name__)


class Command(NamedTuple):
    """One kernel call: method name and keyword arguments."""
    name: str
    args: Dict[str, Any]


class RecordingKernel(MeshKernel):
    """
    Validating, recording kernel.

    Attributes
    ----------
    commands : list[Command]
        Every accepted call in order.
    points : dict[int, tuple]
        tag → (x, y, z, mesh_size).
    curves : dict[int, tuple]
        tag → (kind, point tags); kind is "line", "arc" or "bspline". Arc point tags are
        (start, center, end).
    loops : dict[int, tuple]
        tag → signed curve tags.
    surfaces : dict[int, int]
        tag → loop tag.
    groups : dict[(int, int), tuple]
        (dim, tag) → (name, entity tags).
    """

    def __init__(self):
        self.commands: List[Command] = []
        self.points: Dict[int, Tuple[float, float, float, float]] = {}
        self.curves: Dict[int, Tuple[str, Tuple[int, ...]]] = {}
        self.loops: Dict[int, Tuple[int, ...]] = {}
        self.surfaces: Dict[int, int] = {}
        self.groups: Dict[Tuple[int, int], Tuple[str, Tuple[int, ...]]] = {}
        self.transfinite_curves: Dict[int, Tuple[int, str, float]] = {}
        self.transfinite_surfaces: Dict[int, Tuple[str, Tuple[int, ...]]] = {}
        self.recombined: Dict[int, int] = {}
        self.options: Dict[str, Union[int, float, str]] = {}
        self.model = None
        self.written: List[str] = []
        self._state = "new"
        self._dirty = False
        self._meshed_dim = None

    # --------------------
    # Helpers
    # --------------------
    def _record(self, _cmd: str, **args) -> None:
        self.commands.append(Command(_cmd, args))

    def _require_model(self, name: str) -> None:
        if self._state != "open" or self.model is None:
            raise KernelError("Command issued outside an open model.", {"command": name, "state": self._state})

    @staticmethod
    def _check_tag(tag: int, taken, what: str) -> int:
        tag = int(tag)
        if tag <= 0:
            raise KernelError("Tags must be positive integers.", {"entity": what, "tag": tag})
        if tag in taken:
            raise KernelError("Duplicate tag.", {"entity": what, "tag": tag})
        return tag

    def _require_points(self, tags: Sequence[int], what: str) -> None:
        missing = [t for t in tags if int(t) not in self.points]
        if missing:
            raise KernelError("Reference to unknown point.", {"entity": what, "points": missing})

    def _endpoints(self, signed: int) -> Tuple[int, int]:
        kind, pts = self.curves[abs(signed)]
        start, end = pts[0], pts[-1]
        return (start, end) if signed > 0 else (end, start)

    def _entities(self, dim: int):
        return {0: self.points, 1: self.curves, 2: self.surfaces}.get(dim, {})

    def calls(self, name: str) -> List[Command]:
        """Recorded commands with the given method name."""
        return [c for c in self.commands if c.name == name]

    # --------------------
    # Session
    # --------------------
    def initialize(self) -> None:
        if self._state == "open":
            raise KernelError("Kernel already initialized.")
        self._state = "open"
        self._record("initialize")

    def add_model(self, name: str) -> None:
        if self._state != "open":
            raise KernelError("add_model before initialize.", {"model": name})
        if self.model is not None:
            raise KernelError("Only one model per session.", {"model": name, "current": self.model})
        self.model = str(name)
        self._record("add_model", name=self.model)

    def synchronize(self) -> None:
        self._require_model("synchronize")
        self._dirty = False
        self._record("synchronize")

    def generate(self, dim: int) -> None:
        self._require_model("generate")
        if self._dirty:
            raise KernelError("Geometry changed since the last synchronize.", {"command": "generate"})
        if not self.surfaces and int(dim) >= 2:
            raise KernelError("Nothing to mesh: no surfaces defined.", {"dim": dim})
        self._meshed_dim = int(dim)
        self._record("generate", dim=int(dim))

    def write(self, path: str) -> str:
        self._require_model("write")
        self._record("write", path=path)
        self.written.append(path)
        if str(path).lower().endswith(".geo"):
            write_geo_file(self.render(), path)
            logger.info("[RecordingKernel] .geo script written to %s", path)
        return path

    def finalize(self) -> None:
        if self._state != "open":
            raise KernelError("finalize without an open session.", {"state": self._state})
        self._state = "closed"
        self._record("finalize")

    def set_option(self, name: str, value: Union[int, float, str]) -> None:
        self._require_model("set_option")
        self.options[name] = value
        self._record("set_option", name=name, value=value)

    # --------------------
    # Geometry
    # --------------------
    def add_point(self, x: float, y: float, z: float, mesh_size: float, tag: int) -> int:
        self._require_model("add_point")
        tag = self._check_tag(tag, self.points, "point")
        self.points[tag] = (float(x), float(y), float(z), float(mesh_size))
        self._dirty = True
        self._record("add_point", x=float(x), y=float(y), z=float(z), mesh_size=float(mesh_size), tag=tag)
        return tag

    def add_line(self, start: int, end: int, tag: int) -> int:
        self._require_model("add_line")
        tag = self._check_tag(tag, self.curves, "curve")
        self._require_points((start, end), "line")
        if int(start) == int(end):
            raise KernelError("Line endpoints must differ.", {"tag": tag, "point": start})
        self.curves[tag] = ("line", (int(start), int(end)))
        self._dirty = True
        self._record("add_line", start=int(start), end=int(end), tag=tag)
        return tag

    def add_circle_arc(self, start: int, center: int, end: int, tag: int) -> int:
        self._require_model("add_circle_arc")
        tag = self._check_tag(tag, self.curves, "curve")
        self._require_points((start, center, end), "arc")
        self.curves[tag] = ("arc", (int(start), int(center), int(end)))
        self._dirty = True
        self._record("add_circle_arc", start=int(start), center=int(center), end=int(end), tag=tag)
        return tag

    def add_bspline(self, point_tags: Sequence[int], tag: int) -> int:
        self._require_model("add_bspline")
        tag = self._check_tag(tag, self.curves, "curve")
        pts = tuple(int(t) for t in point_tags)
        if len(pts) < 2:
            raise KernelError("A B-spline needs at least two control points.", {"tag": tag})
        self._require_points(pts, "bspline")
        self.curves[tag] = ("bspline", pts)
        self._dirty = True
        self._record("add_bspline", point_tags=pts, tag=tag)
        return tag

    def add_curve_loop(self, curve_tags: Sequence[int], tag: int) -> int:
        self._require_model("add_curve_loop")
        tag = self._check_tag(tag, self.loops, "curve loop")
        signed = tuple(int(t) for t in curve_tags)
        missing = [t for t in signed if abs(t) not in self.curves]
        if not signed or missing:
            raise KernelError("Curve loop references unknown curves.", {"loop": tag, "curves": missing})
        ends = [self._endpoints(t) for t in signed]
        for k, (a, b) in enumerate(ends):
            nxt = ends[(k + 1) % len(ends)][0]
            if b != nxt:
                raise KernelError("Curve loop is not closed and connected.",
                                  {"loop": tag, "curve": signed[k], "end": b, "next_start": nxt})
        self.loops[tag] = signed
        self._dirty = True
        self._record("add_curve_loop", curve_tags=signed, tag=tag)
        return tag

    def add_plane_surface(self, loop_tag: int, tag: int) -> int:
        self._require_model("add_plane_surface")
        tag = self._check_tag(tag, self.surfaces, "surface")
        if int(loop_tag) not in self.loops:
            raise KernelError("Surface references an unknown curve loop.", {"surface": tag, "loop": loop_tag})
        self.surfaces[tag] = int(loop_tag)
        self._dirty = True
        self._record("add_plane_surface", loop_tag=int(loop_tag), tag=tag)
        return tag

    # --------------------
    # Structured meshing
    # --------------------
    def set_transfinite_curve(self, tag: int, points: int, kind: str, coef: float) -> None:
        self._require_model("set_transfinite_curve")
        if int(tag) not in self.curves:
            raise KernelError("Transfinite setting on unknown curve.", {"curve": tag})
        if int(points) < 1:
            raise KernelError("Transfinite node count must be >= 1.", {"curve": tag, "points": points})
        if kind not in ("Progression", "Bump", "Beta"):
            raise KernelError("Unknown transfinite mesh type.", {"curve": tag, "kind": kind})
        self.transfinite_curves[int(tag)] = (int(points), kind, float(coef))
        self._record("set_transfinite_curve", tag=int(tag), points=int(points), kind=kind, coef=float(coef))

    def set_transfinite_surface(self, tag: int, arrangement: str = "Left",
                                corner_tags: Sequence[int] = ()) -> None:
        self._require_model("set_transfinite_surface")
        if int(tag) not in self.surfaces:
            raise KernelError("Transfinite setting on unknown surface.", {"surface": tag})
        corners = tuple(int(t) for t in corner_tags)
        self._require_points(corners, "transfinite surface")
        self.transfinite_surfaces[int(tag)] = (arrangement, corners)
        self._record("set_transfinite_surface", tag=int(tag), arrangement=arrangement, corner_tags=corners)

    def set_recombine(self, dim: int, tag: int) -> None:
        self._require_model("set_recombine")
        if int(dim) != 2 or int(tag) not in self.surfaces:
            raise KernelError("Recombine applies to existing surfaces only.", {"dim": dim, "tag": tag})
        self.recombined[int(tag)] = int(dim)
        self._record("set_recombine", dim=int(dim), tag=int(tag))

    def add_physical_group(self, dim: int, tags: Sequence[int], name: str, tag: int) -> int:
        self._require_model("add_physical_group")
        dim = int(dim)
        entities = tuple(int(t) for t in tags)
        known = self._entities(dim)
        missing = [t for t in entities if t not in known]
        if not entities or missing:
            raise KernelError("Physical group references unknown entities.",
                              {"name": name, "dim": dim, "missing": missing})
        if not name:
            raise KernelError("Physical groups must be named.", {"dim": dim, "tag": tag})
        taken = {t for (d, t) in self.groups if d == dim}
        tag = self._check_tag(tag, taken, "physical group")
        self.groups[(dim, tag)] = (str(name), entities)
        self._record("add_physical_group", dim=dim, tags=entities, name=str(name), tag=tag)
        return tag

    # --------------------
    # Output
    # --------------------
    def render(self) -> str:
        """The recorded command stream as `.geo` script text."""
        return render_geo_script(self.commands, header="C-type structured template")
