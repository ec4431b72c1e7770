# -*- coding: utf-8 -*-
# Foilmesh/geometry/geo/__init__.py

"""
Project: Foilmesh
Date: 9/20/2026

Geo Subpackage:
---------------
Contour sourcing for the meshing pipeline.

Modules:
--------
- geo_loader: ContourLoader for one contour (file or NACA designation) plus sanitization.

- dispatcher: Extension → loader routing and NACA designation detection.

- library:    ContourLibrary, a caller-owned collection of named contours with JSON I/O.
"""

__all__ = ["geo_loader", "dispatcher", "library"]
