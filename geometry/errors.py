# -*- coding: utf-8 -*-
# Foilmesh/geometry/errors.py

"""
Project: Foilmesh
Date: 9/14/2026

Purpose
-------
Typed exceptions shared by the geometry and mesh layers. Every error carries an optional
context dict that is rendered as a compact suffix, so a failure reported from deep inside
the pipeline still names the offending key, file or anchor.

Main Tasks
----------
    1. Define FoilError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: InputError, ConfigError, SchemaError, ClassificationError.

Notes
-----
- Kernel session errors live in mesh.core.errors and derive from FoilError.
"""

__all__ = [
    "FoilError",
    "InputError",
    "ConfigError",
    "SchemaError",
    "ClassificationError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys(), key=str):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class FoilError(Exception):
    """
    Base class for all errors raised by this package.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields appended to the string form (e.g., {"path": "naca.dat", "line": 3}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self):
        base = super().__str__()
        return base + _format_context(self.context)


class InputError(FoilError):
    """
    Malformed contour input:
      - unparsable text or JSON
      - missing 'name' / 'coordinates' / 'x' / 'y' fields
      - empty coordinate sets
    """


class ConfigError(FoilError):
    """
    Invalid request parameters: intercept outside (0, 0.5], unsupported mesh type or
    output format, non-positive radius.
    """


class SchemaError(ConfigError):
    """
    Per-key issues detected while normalizing a configuration dict:
      - unknown keys or sections
      - non-numeric where numeric is required
      - out-of-range scalar values
    """


class ClassificationError(FoilError):
    """
    Contour features could not be located: too few points, a degenerate chord, or a
    labeled contour that lacks one of the four anchors.
    """
