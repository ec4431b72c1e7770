# -*- coding: utf-8 -*-
# Foilmesh/geometry/topology/edges.py

"""
Project: Foilmesh
Date: 9/18/2026

Purpose:
--------
Classify an airfoil contour into the four anchors the C-type mesh template needs:
leading edge, trailing edge, and the two boundary-layer split points (upside on the
upper arc, lowerside on the lower arc) at a chordwise intercept f.

Main Tasks:
-----------
   1. Locate the trailing edge (max x) and rotate the contour so it comes first.
   2. Locate the leading edge (min x) and split the rotated contour into the upper arc
      (trailing -> leading) and the lower arc (leading -> end).
   3. On each arc, label the vertex lying exactly at x = f, or insert an interpolated one
      between the pair of vertices that brackets f nearest to it.
   4. Close the trailing edge: a blunt trailing edge gets a synthetic trailing point at
      (1, 0); otherwise the trailing vertex moves to the end of the list.
   5. Re-tag every point 1..N in final order.

Notes:
------
   - The contour is expected in a chord-normalized frame (LE at x=0, TE at x=1) and CCW,
     which is how ContourLoader delivers it. Upper-arc insertions land *before* the
     nose-side vertex of the bracketing pair, lower-arc insertions *after* it.
   - On a blunt trailing edge the two TE vertices share the maximum x; the one that starts
     the upper arc becomes the rotation origin.
"""

from typing import List, Optional, Sequence

import numpy as np

from ..errors import ClassificationError, ConfigError
from ..primitives import ANCHOR_ROLES, LabeledPoint, Point, Role
from ._validation import _assert_xy
from .loop import ensure_opened

__all__ = [
    "DEFAULT_INTERCEPT",
    "validate_intercept",
    "classify_edges",
    "find_role",
    "missing_anchors",
]

DEFAULT_INTERCEPT = 0.175


def validate_intercept(intercept) -> float:
    """Return `intercept` as float; raise ConfigError unless 0 < intercept <= 0.5."""
    try:
        f = float(intercept)
    except (TypeError, ValueError):
        raise ConfigError("Intercept must be numeric.", {"intercept": intercept})
    if not (0.0 < f <= 0.5):
        raise ConfigError("Intercept must lie in (0, 0.5].", {"intercept": f})
    return f


def find_role(points: Sequence[LabeledPoint], role: Role) -> Optional[LabeledPoint]:
    """Return the point holding `role`, or None."""
    for p in points:
        if p.label == role:
            return p
    return None


def missing_anchors(points: Sequence[LabeledPoint]) -> List[Role]:
    """Anchor roles not held by any point, in canonical order."""
    held = {p.label for p in points}
    return [r for r in ANCHOR_ROLES if r not in held]


# -----------------------
# Internals
# -----------------------
def _trailing_index(x: np.ndarray, tol: float) -> int:
    """
    First max-x vertex, advanced to the end of its cyclic run of tied vertices so that a
    blunt trailing edge (two vertices at max x) starts on the upper arc.
    """
    n = x.shape[0]
    x_max = float(np.max(x))
    tied = x >= x_max - tol
    te = int(np.argmax(tied))
    steps = 0
    while tied[(te + 1) % n] and steps < n - 1:
        te = (te + 1) % n
        steps += 1
    return te


def _upper_split(P: np.ndarray, le: int, f: float, tol: float):
    """
    Find the upside split on the upper arc (indices 1..le-1, x decreasing).

    Returns (index, None) for an exact vertex or (insert_at, Point) for an insertion.
    """
    for j in range(1, le):
        if abs(P[j, 0] - f) <= tol:
            return j, None
    best = None
    for j in range(1, le + 1):
        xa, xb = P[j - 1, 0], P[j, 0]
        if xa > f > xb:
            gap = f - xb
            if best is None or gap < best[0]:
                best = (gap, j)
    if best is None:
        return None, None
    j = best[1]
    u = (f - P[j, 0]) / (P[j - 1, 0] - P[j, 0])
    q = Point(float(P[j, 0]), float(P[j, 1])).lerp(Point(float(P[j - 1, 0]), float(P[j - 1, 1])), u)
    return j, Point(f, q.y)


def _lower_split(P: np.ndarray, le: int, f: float, tol: float):
    """
    Find the lowerside split on the lower arc (indices le+1..n-1, x increasing).

    Returns (index, None) for an exact vertex or (insert_at, Point) for an insertion.
    """
    n = P.shape[0]
    for j in range(le + 1, n):
        if abs(P[j, 0] - f) <= tol:
            return j, None
    best = None
    for j in range(le, n):
        k = (j + 1) % n
        xa, xb = P[j, 0], P[k, 0]
        if xa < f < xb:
            gap = f - xa
            if best is None or gap < best[0]:
                best = (gap, j)
    if best is None:
        return None, None
    j = best[1]
    k = (j + 1) % n
    u = (f - P[j, 0]) / (P[k, 0] - P[j, 0])
    q = Point(float(P[j, 0]), float(P[j, 1])).lerp(Point(float(P[k, 0]), float(P[k, 1])), u)
    return j + 1, Point(f, q.y)


# -----------------------
# Public API
# -----------------------
def classify_edges(points: np.ndarray,
                   intercept: float = DEFAULT_INTERCEPT,
                   *,
                   tol: float = 1e-12) -> List[LabeledPoint]:
    """
    Label leading/trailing edges and the upside/lowerside split points of a contour.

    Parameters
    ----------
    points : np.ndarray
        (N, 2) contour, opened (a duplicated closing row is dropped).
    intercept : float
        Chordwise split fraction f in (0, 0.5].
    tol : float
        Absolute tolerance for the exact-intercept and trailing-edge comparisons.

    Returns
    -------
    list[LabeledPoint]
        Re-tagged 1..N contour; exactly one point holds each of leading, trailing,
        upside and lowerside, and the trailing point is last.

    Raises
    ------
    ConfigError
        If the intercept lies outside (0, 0.5].
    ClassificationError
        If the contour is too small or degenerate, or an arc never reaches x = f.
    """
    f = validate_intercept(intercept)

    P = np.asarray(points, dtype=float)
    _assert_xy(P, check_finite=True)
    P = ensure_opened(P)
    n = P.shape[0]
    if n < 4:
        raise ClassificationError("Need at least 4 contour points to classify edges.", {"points": n})
    if float(np.max(P[:, 0]) - np.min(P[:, 0])) <= tol:
        raise ClassificationError("Degenerate chord; leading and trailing edges coincide.")

    te = _trailing_index(P[:, 0], tol)
    P = np.roll(P, -te, axis=0)
    le = int(np.argmin(P[:, 0]))

    if le < 2 or le > n - 2:
        raise ClassificationError("Contour has an empty upper or lower arc.",
                                  {"leading_index": le, "points": n})

    pts = [LabeledPoint(Point(float(x), float(y))) for x, y in P]
    pts[0] = pts[0].with_label(Role.TRAILING)
    pts[le] = pts[le].with_label(Role.LEADING)

    lo_at, lo_new = _lower_split(P, le, f, tol)
    up_at, up_new = _upper_split(P, le, f, tol)
    if lo_at is None:
        raise ClassificationError("Lower arc does not reach the intercept.", {"intercept": f})
    if up_at is None:
        raise ClassificationError("Upper arc does not reach the intercept.", {"intercept": f})

    # Lower arc first: its positions sit after every upper-arc position.
    if lo_new is None:
        pts[lo_at] = pts[lo_at].with_label(Role.LOWERSIDE)
    else:
        pts.insert(lo_at, LabeledPoint(lo_new, label=Role.LOWERSIDE))
    if up_new is None:
        pts[up_at] = pts[up_at].with_label(Role.UPSIDE)
    else:
        pts.insert(up_at, LabeledPoint(up_new, label=Role.UPSIDE))

    first, last = pts[0], pts[-1]
    blunt = abs(last.x - first.x) <= tol and abs(last.y - first.y) > tol
    if blunt:
        pts[0] = first.with_label(None)
        pts.append(LabeledPoint(Point(1.0, 0.0), label=Role.TRAILING))
    else:
        pts = pts[1:] + pts[:1]

    return [p.with_tag(i) for i, p in enumerate(pts, start=1)]
