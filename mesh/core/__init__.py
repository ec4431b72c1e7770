# -*- coding: utf-8 -*-
# Foilmesh/mesh/core/__init__.py

"""
Project: Foilmesh
Date: 9/22/2026 (Updated: 9/27/2026)

Core Subpackage:
----------------
Structured-mesh engine: an abstract kernel command surface, two implementations, a
serialized kernel session and the C-type topology template that drives them.

Modules:
--------
- base:        MeshKernel abstract interface.
- kernels:     GmshKernel (gmsh Python API) and RecordingKernel (validating recorder).
- session:     Lock-guarded kernel session with stage deadlines.
- topology:    C-type template: corners, curves, blocks, transfinite plan, groups.
- transfinite: Node-distribution specs per curve role.
- formats:     Output format and mesh type enumerations.
- writer:      `.geo` script rendering of a recorded command stream.
- errors:      Kernel error types.
"""

from .base import MeshKernel
from .errors import KernelBusyError, KernelError, KernelTimeoutError
from .formats import MeshFormat, MeshType, output_filename, parse_format, parse_mesh_type
from .kernels import RecordingKernel
from .session import KernelSession, kernel_session
from .topology import Boundary, CTypeTopologyBuilder, topology_builder
from .transfinite import CurveRole, Distribution, Sector, TransfiniteSpec, default_specs
from .writer import render_geo_script, write_geo_file

__all__ = [
    # Kernel interface
    "MeshKernel",
    "RecordingKernel",
    "KernelSession",
    "kernel_session",
    # Errors
    "KernelError",
    "KernelBusyError",
    "KernelTimeoutError",
    # Template
    "Boundary",
    "CTypeTopologyBuilder",
    "topology_builder",
    "CurveRole",
    "Distribution",
    "Sector",
    "TransfiniteSpec",
    "default_specs",
    # Output
    "MeshFormat",
    "MeshType",
    "output_filename",
    "parse_format",
    "parse_mesh_type",
    "render_geo_script",
    "write_geo_file",
]
