# -*- coding: utf-8 -*-
# Foilmesh/geometry/ops/basic.py

"""
Project: Foilmesh
Date: 9/16/2026

Purpose
-------
Scalar queries and simple transforms on raw contours: consecutive-duplicate filtering,
leading/trailing edge lookup, chord, thickness, and the unit-chord normalization the edge
classifier and mesh template expect.

Main Tasks
----------
    1. Filter repeated consecutive vertices (zero-length spans break knot spacing).
    2. Locate LE (first min-x vertex) and TE (first max-x vertex); chord is their x gap.
    3. Map a contour to LE at the origin and unit chord.
    4. Report thickness as (bottom, top) y-extent.

Notes
-----
- Every function accepts open or closed (N, 2) arrays and never reorders vertices.
"""

from typing import NamedTuple
import numpy as np

from ..topology._validation import _assert_xy

__all__ = [
    "Thickness",
    "drop_consecutive_duplicates",
    "leading_edge",
    "trailing_edge",
    "chord_length",
    "normalize",
    "thickness",
]


class Thickness(NamedTuple):
    bottom: float
    top: float

    @property
    def total(self) -> float:
        return self.top - self.bottom


def _require_rows(points: np.ndarray, what: str) -> None:
    _assert_xy(points)
    if points.shape[0] == 0:
        raise ValueError("Cannot locate the {} of an empty contour.".format(what))


def drop_consecutive_duplicates(pts: np.ndarray, tol: float = 0.0) -> np.ndarray:
    """
    Drop vertices that repeat the last kept vertex.

    Parameters
    ----------
    pts : np.ndarray
        (N, 2) contour.
    tol : float
        Per-coordinate absolute tolerance; 0 compares exactly.

    Returns
    -------
    np.ndarray
        Surviving rows in their original order.
    """
    _assert_xy(pts)
    n = pts.shape[0]
    if n < 2:
        return pts
    kept = [0]
    last = pts[0]
    for i in range(1, n):
        if np.max(np.abs(pts[i] - last)) > tol:
            kept.append(i)
            last = pts[i]
    return pts[kept]


def leading_edge(points: np.ndarray) -> np.ndarray:
    """First vertex of minimum x. Raises ValueError on empty or malformed input."""
    _require_rows(points, "leading edge")
    return points[int(np.argmin(points[:, 0]))]


def trailing_edge(points: np.ndarray) -> np.ndarray:
    """First vertex of maximum x. Raises ValueError on empty or malformed input."""
    _require_rows(points, "trailing edge")
    return points[int(np.argmax(points[:, 0]))]


def chord_length(points: np.ndarray) -> float:
    """TE.x - LE.x."""
    return float(trailing_edge(points)[0] - leading_edge(points)[0])


def normalize(points: np.ndarray,
              translate_to_le: bool = True,
              scale_to_chord1: bool = True) -> np.ndarray:
    """
    Return a copy moved so the LE sits at the origin and/or scaled to unit chord.

    Raises
    ------
    ValueError
        If the chord is not positive or the array is not (N, 2).
    """
    _assert_xy(points)
    shifted = np.array(points, dtype=float)
    if translate_to_le:
        shifted = shifted - leading_edge(shifted)
    if not scale_to_chord1:
        return shifted
    chord = chord_length(shifted)
    if not chord > 0.0:
        raise ValueError("Chord must be positive to normalize, got {}.".format(chord))
    return shifted / chord


def thickness(points: np.ndarray) -> Thickness:
    """
    Vertical extent of the contour.

    Returns
    -------
    Thickness
        (bottom, top) y-values; `.total` is top - bottom. Empty input yields zeros.
    """
    _assert_xy(points)
    if points.shape[0] == 0:
        return Thickness(0.0, 0.0)
    return Thickness(float(np.min(points[:, 1])), float(np.max(points[:, 1])))
