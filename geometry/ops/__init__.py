# -*- coding: utf-8 -*-
# Foilmesh/geometry/ops/__init__.py

"""
Project: Foilmesh
Date: 9/16/2026

Ops Subfolder:
--------------
Lightweight contour utilities. Keeps stable import paths for loaders and the mesh
pipeline while the implementations live in submodules.

Contents
--------
- basic: duplicate removal, LE/TE lookup, chord, normalization, thickness

- Re-exports from topology (single source of truth):
    * ensure_closed, ensure_opened, signed_area, orientation  (geometry.topology.loop)
    * le_te_indices                                           (geometry.topology.indices)
"""

from .basic import (
    Thickness, drop_consecutive_duplicates, leading_edge, trailing_edge,
    chord_length, normalize, thickness,
)
from ..topology.loop import signed_area, orientation, ensure_closed, ensure_opened
from ..topology.indices import le_te_indices

__all__ = [
    # basic
    "Thickness", "drop_consecutive_duplicates", "leading_edge", "trailing_edge",
    "chord_length", "normalize", "thickness",
    # topology-sourced
    "signed_area", "orientation", "ensure_closed", "ensure_opened", "le_te_indices",
]
