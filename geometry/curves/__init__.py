# -*- coding: utf-8 -*-
# Foilmesh/geometry/curves/__init__.py

"""
Project: Foilmesh
Date: 9/17/2026

Curves Subfolder:
-----------------
Point-density operations on ordered contours.

Modules:
--------
- spline:   Catmull-Rom interpolation (uniform / centripetal / chordal knots).
- simplify: Area-based decimation with fixed endpoints.
- density:  Resample toward a target point count using either of the above.
"""

from .spline import SplineKind, fit_spline
from .simplify import streamline
from .density import adjust_density

__all__ = ["SplineKind", "fit_spline", "streamline", "adjust_density"]
