# -*- coding: utf-8 -*-
# Foilmesh/geometry/loaders/__init__.py

"""
Project: Foilmesh
Date: 9/19/2026

Loaders Subpackage:
-------------------
Format-specific readers that turn contour sources into (name, points) records.

Modules:
--------
- dat_loader:  `.dat` text (name line + coordinate lines; comments and commas tolerated).

- json_loader: `{"name", "coordinates": [{"x", "y"}]}` objects, singly or as a list.

- naca_loader: Analytic NACA 4-digit generator.

- _helpers:    RawContour record, name cleanup and point-array validation.

Assumptions & Notes:
--------------------
- Loaders return raw points; dedup, closure, orientation and normalization are applied by
  `ContourLoader` and `ContourLibrary`.
- Units: native file units preserved; no automatic rescaling here.
"""

__all__ = ["dat_loader", "json_loader", "naca_loader"]
