# -*- coding: utf-8 -*-
# Foilmesh/mesh/core/base.py

"""
Project: Foilmesh
Date: 9/22/2026

Purpose:
--------
Abstract command surface of a meshing kernel. The topology builder and the session
talk only to this interface, so the gmsh adapter and the in-memory recording kernel are
interchangeable.

Abstract Classes:
-----------------
- MeshKernel: ordered geometry/topology commands plus session bracketing.

Notes:
------
- Every `add_*` call receives an explicit tag and returns the tag the kernel used.
- Curve-loop members are signed curve tags; a negative tag means reversed traversal.
- Commands must arrive in program order: initialize, add_model, geometry, synchronize,
  generate, write, finalize.
"""

from abc import ABC, abstractmethod
from typing import Sequence, Union


class MeshKernel(ABC):
    """
    Abstract base class for meshing kernels.
    """

    # --------------------
    # Session
    # --------------------
    @abstractmethod
    def initialize(self) -> None:
        pass

    @abstractmethod
    def add_model(self, name: str) -> None:
        pass

    @abstractmethod
    def synchronize(self) -> None:
        pass

    @abstractmethod
    def generate(self, dim: int) -> None:
        pass

    @abstractmethod
    def write(self, path: str) -> str:
        """Write the current model/mesh to `path`; the extension selects the format."""
        pass

    @abstractmethod
    def finalize(self) -> None:
        pass

    @abstractmethod
    def set_option(self, name: str, value: Union[int, float, str]) -> None:
        pass

    # --------------------
    # Geometry
    # --------------------
    @abstractmethod
    def add_point(self, x: float, y: float, z: float, mesh_size: float, tag: int) -> int:
        pass

    @abstractmethod
    def add_line(self, start: int, end: int, tag: int) -> int:
        pass

    @abstractmethod
    def add_circle_arc(self, start: int, center: int, end: int, tag: int) -> int:
        """Arc from `start` to `end` around `center`, in the z-plane (normal +z)."""
        pass

    @abstractmethod
    def add_bspline(self, point_tags: Sequence[int], tag: int) -> int:
        pass

    @abstractmethod
    def add_curve_loop(self, curve_tags: Sequence[int], tag: int) -> int:
        pass

    @abstractmethod
    def add_plane_surface(self, loop_tag: int, tag: int) -> int:
        pass

    # --------------------
    # Structured meshing
    # --------------------
    @abstractmethod
    def set_transfinite_curve(self, tag: int, points: int, kind: str, coef: float) -> None:
        pass

    @abstractmethod
    def set_transfinite_surface(self, tag: int, arrangement: str = "Left",
                                corner_tags: Sequence[int] = ()) -> None:
        pass

    @abstractmethod
    def set_recombine(self, dim: int, tag: int) -> None:
        pass

    @abstractmethod
    def add_physical_group(self, dim: int, tags: Sequence[int], name: str, tag: int) -> int:
        pass
