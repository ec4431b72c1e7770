# -*- coding: utf-8 -*-
# Foilmesh/mesh/core/kernels/gmsh_kernel.py

"""
Project: Foilmesh
Date: 9/22/2026

Purpose:
--------
MeshKernel adapter over the gmsh Python API using the built-in `geo` kernel.

Main Tasks:
-----------
    1. Forward each command to gmsh with explicit tags.
    2. Initialize gmsh without signal handlers when called off the main thread.
    3. Route terminal verbosity through `General.Terminal`.

Notes:
------
- gmsh is process-global; use `mesh.core.session.kernel_session` to serialize access.
- gmsh raises plain Exceptions; the session wraps them as KernelError with the stage name.
"""

import logging
import threading
from typing import Sequence, Union

import gmsh

from ..base import MeshKernel

logger = logging.getLogger(__name__)


class GmshKernel(MeshKernel):
    """
    gmsh-backed kernel.

    Parameters
    ----------
    verbose : bool
        Echo gmsh messages on the terminal.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = bool(verbose)

    # --------------------
    # Session
    # --------------------
    def initialize(self) -> None:
        if gmsh.isInitialized():
            logger.warning("[GmshKernel] gmsh already initialized; finalizing stale session.")
            gmsh.finalize()
        main = threading.current_thread() is threading.main_thread()
        gmsh.initialize(readConfigFiles=False, interruptible=main)
        gmsh.option.setNumber("General.Terminal", 1 if self.verbose else 0)

    def add_model(self, name: str) -> None:
        gmsh.model.add(name)

    def synchronize(self) -> None:
        gmsh.model.geo.synchronize()

    def generate(self, dim: int) -> None:
        gmsh.model.mesh.generate(int(dim))

    def write(self, path: str) -> str:
        gmsh.write(path)
        return path

    def finalize(self) -> None:
        if gmsh.isInitialized():
            gmsh.finalize()

    def set_option(self, name: str, value: Union[int, float, str]) -> None:
        if isinstance(value, str):
            gmsh.option.setString(name, value)
        else:
            gmsh.option.setNumber(name, float(value))

    # --------------------
    # Geometry
    # --------------------
    def add_point(self, x: float, y: float, z: float, mesh_size: float, tag: int) -> int:
        return gmsh.model.geo.addPoint(float(x), float(y), float(z), float(mesh_size), int(tag))

    def add_line(self, start: int, end: int, tag: int) -> int:
        return gmsh.model.geo.addLine(int(start), int(end), int(tag))

    def add_circle_arc(self, start: int, center: int, end: int, tag: int) -> int:
        return gmsh.model.geo.addCircleArc(int(start), int(center), int(end), int(tag),
                                           nx=0.0, ny=0.0, nz=1.0)

    def add_bspline(self, point_tags: Sequence[int], tag: int) -> int:
        return gmsh.model.geo.addBSpline([int(t) for t in point_tags], int(tag))

    def add_curve_loop(self, curve_tags: Sequence[int], tag: int) -> int:
        return gmsh.model.geo.addCurveLoop([int(t) for t in curve_tags], int(tag))

    def add_plane_surface(self, loop_tag: int, tag: int) -> int:
        return gmsh.model.geo.addPlaneSurface([int(loop_tag)], int(tag))

    # --------------------
    # Structured meshing
    # --------------------
    def set_transfinite_curve(self, tag: int, points: int, kind: str, coef: float) -> None:
        gmsh.model.geo.mesh.setTransfiniteCurve(int(tag), int(points), kind, float(coef))

    def set_transfinite_surface(self, tag: int, arrangement: str = "Left",
                                corner_tags: Sequence[int] = ()) -> None:
        gmsh.model.geo.mesh.setTransfiniteSurface(int(tag), arrangement, [int(t) for t in corner_tags])

    def set_recombine(self, dim: int, tag: int) -> None:
        gmsh.model.geo.mesh.setRecombine(int(dim), int(tag))

    def add_physical_group(self, dim: int, tags: Sequence[int], name: str, tag: int) -> int:
        return gmsh.model.geo.addPhysicalGroup(int(dim), [int(t) for t in tags], int(tag), name)
