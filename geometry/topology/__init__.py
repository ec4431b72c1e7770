# -*- coding: utf-8 -*-
# Foilmesh/geometry/topology/__init__.py

"""
Project: Foilmesh
Date: 9/15/2026

Topology Subfolder:
-------------------
Connectivity and feature operations on closed 2D contours.

Modules:
--------
- loop:        Closed/opened conversions, signed area, orientation, CCW canonicalization.

- indices:     Deterministic LE/TE index detection with explicit tie-breaking.

- edges:       Edge classification: trailing/leading edges plus the upside and lowerside
               boundary-layer split points, re-tagged into a labeled point list.

- _validation: Shared array and closure checks.
"""

__all__ = ["edges", "indices", "loop"]
