# -*- coding: utf-8 -*-
# Foilmesh/mesh/core/kernels/__init__.py

"""
Project: Foilmesh
Date: 9/22/2026

Kernels Subpackage:
-------------------
Concrete MeshKernel implementations.

Modules:
--------
- gmsh_kernel:      Adapter over the gmsh Python API (geo kernel).
- recording_kernel: In-memory kernel that validates and records the command stream;
                    writes it as a `.geo` script. Used for dry runs and tests.
"""

from .recording_kernel import RecordingKernel, Command

# gmsh_kernel is imported explicitly (it loads the gmsh shared library).
__all__ = ["RecordingKernel", "Command"]
