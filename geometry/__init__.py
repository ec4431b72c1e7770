# -*- coding: utf-8 -*-
# Foilmesh/geometry/__init__.py

"""
Project: Foilmesh
Date: 9/14/2026

Modules:
--------
- primitives: Point / LabeledPoint value types and the Role enumeration.

- errors:     Typed exceptions (FoilError, InputError, ConfigError, SchemaError,
              ClassificationError) with compact context suffixes.

- loaders:    Format-specific readers (.dat, .json, NACA 4-digit generator) returning
              (name, points) records.

- geo:        ContourLoader (single contour, sanitized closed+CCW), extension dispatcher,
              and ContourLibrary (caller-owned named collection with JSON I/O).

- ops:        LE/TE/chord queries, normalization, thickness, duplicate filtering.

- curves:     Point-density operations:
                  - curves.spline:   Catmull-Rom fitting (uniform/centripetal/chordal),
                  - curves.simplify: area-based decimation,
                  - curves.density:  resample toward a target count.

- topology:   Closed/opened conversions, orientation, LE/TE indices, and the edge
              classifier that labels leading/trailing/upside/lowerside anchors.

- api:        Minimal facade used by main scripts and mesh.api.
              * load_contour(source, normalize=True, points=None) → ContourLoader
              * prepare_contour(loader_or_points, intercept) → labeled point list

            Usage:
                from geometry.api import load_contour, prepare_contour
"""

__all__ = ["api", "curves", "errors", "geo", "loaders", "ops", "primitives", "topology"]
