# -*- coding: utf-8 -*-
# Foilmesh/geometry/primitives.py

"""
Project: Foilmesh
Date: 9/14/2026

Purpose
-------
Value types for contour processing: an immutable 2D Point with the handful of affine
operations the spline and classifier need, and a LabeledPoint that carries a 1-based tag
and an optional feature role once a contour has been classified.

Main Tasks
----------
    1. Point arithmetic (add, subtract, scale, lerp, distance) and tolerance equality.
    2. Role enumeration for contour anchors and far-field corners.
    3. Conversions between (N, 2) arrays and point lists.

Notes
-----
- Contours themselves stay (N, 2) float64 arrays; points are used where a single vertex
  needs an identity (labels, tags) or where readability beats vectorization.
"""

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Optional

import numpy as np

__all__ = [
    "Point",
    "Role",
    "LabeledPoint",
    "ANCHOR_ROLES",
    "to_points",
    "to_array",
]


class Role(str, Enum):
    """Named feature a point may hold. At most one point holds each role."""
    LEADING = "leading"
    TRAILING = "trailing"
    UPSIDE = "upside"
    LOWERSIDE = "lowerside"
    FIRSTMOST = "firstmost"
    LOWERMOST = "lowermost"
    RIGHTMOST = "rightmost"
    UPMOST = "upmost"
    LASTMOST = "lastmost"


ANCHOR_ROLES = (Role.LEADING, Role.TRAILING, Role.UPSIDE, Role.LOWERSIDE)


@dataclass(frozen=True)
class Point:
    """An immutable point in the plane."""
    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Point":
        return Point(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def distance(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def lerp(self, other: "Point", u: float) -> "Point":
        """Return (1 - u) * self + u * other."""
        return Point(self.x + (other.x - self.x) * u, self.y + (other.y - self.y) * u)

    def isclose(self, other: "Point", tol: float = 0.0) -> bool:
        """
        Tolerance-aware equality. With `tol == 0` this is exact coordinate equality;
        otherwise both coordinates must agree within `tol` (absolute).
        """
        if tol <= 0.0:
            return self.x == other.x and self.y == other.y
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol

    def as_tuple(self):
        return (self.x, self.y)


@dataclass(frozen=True)
class LabeledPoint:
    """
    A point with a 1-based position tag in the final contour ordering and an optional role.

    Instances are immutable; use `with_tag` / `with_label` to derive updated copies.
    """
    point: Point
    tag: int = 0
    label: Optional[Role] = None

    @property
    def x(self) -> float:
        return self.point.x

    @property
    def y(self) -> float:
        return self.point.y

    def with_tag(self, tag: int) -> "LabeledPoint":
        return replace(self, tag=int(tag))

    def with_label(self, label: Optional[Role]) -> "LabeledPoint":
        return replace(self, label=label)


# --------------------
# Array conversions
# --------------------
def to_points(points: np.ndarray) -> List[Point]:
    """Convert an (N, 2) array into a list of Points."""
    arr = np.asarray(points, dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError("Expected (N,2) array of points, got shape {}.".format(arr.shape))
    return [Point(float(x), float(y)) for x, y in arr]


def to_array(points: Iterable) -> np.ndarray:
    """Convert Points or LabeledPoints into an (N, 2) float64 array."""
    rows = [(p.x, p.y) for p in points]
    if not rows:
        return np.empty((0, 2), dtype=float)
    return np.asarray(rows, dtype=float)
