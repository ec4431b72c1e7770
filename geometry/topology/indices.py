# -*- coding: utf-8 -*-
# Foilmesh/geometry/topology/indices.py

"""
Project: Foilmesh
Date: 9/15/2026

Purpose:
--------
Deterministic indexers for the leading and trailing edge of a contour.
   - Accept open or closed contours; a duplicated closing row is ignored.
   - Make tie-breaking explicit and stable under tiny numeric noise.

Conventions:
------------
   - Indices are 0-based over the OPENED contour.
   - "LE" = minimum x; "TE" = maximum x, measured in the current frame.
   - Ties resolve to the first occurrence unless `midline` is set, in which case the
     candidate closest to y = 0 wins first.
"""

from typing import Tuple
import numpy as np
from ._validation import _assert_xy, _is_exactly_closed


def _arg_extreme(x: np.ndarray, y: np.ndarray, *, mode: str, tol: float, midline: bool) -> int:
    if mode == "min":
        x0 = float(np.min(x))
        cand = np.where(x <= x0 + tol)[0]
    elif mode == "max":
        x0 = float(np.max(x))
        cand = np.where(x >= x0 - tol)[0]
    else:
        raise ValueError("mode must be 'min' or 'max'")

    if cand.size == 1 or not midline:
        return int(cand[0])

    y_abs = np.abs(y[cand])
    y_min = float(np.min(y_abs))
    return int(cand[np.where(y_abs <= y_min + tol)[0]][0])


def le_te_indices(points: np.ndarray, tol: float = 0.0, midline: bool = False) -> Tuple[int, int]:
    """
    Find (LE_idx, TE_idx) on a contour.

    Parameters
    ----------
    points : np.ndarray
        (N, 2) contour, open or closed.
    tol : float
        Absolute tolerance for the extremum tie test.
    midline : bool
        Prefer the tied candidate with minimal |y| before falling back to the first index.

    Returns
    -------
    (int, int)
        (LE_idx, TE_idx), 0-based over the opened contour.

    Raises
    ------
    ValueError
        If fewer than 3 unique vertices are given or the chord is degenerate
        (min(x) == max(x) within tol).
    """
    _assert_xy(points)
    P = points[:-1] if _is_exactly_closed(points) else points
    if P.shape[0] < 3:
        raise ValueError("Need at least 3 unique vertices to locate LE/TE.")

    x = P[:, 0]
    y = P[:, 1]
    if float(np.max(x)) - float(np.min(x)) <= tol:
        raise ValueError("Degenerate chord (min(x)≈max(x)); LE/TE undefined in this frame.")

    le = _arg_extreme(x, y, mode="min", tol=tol, midline=midline)
    te = _arg_extreme(x, y, mode="max", tol=tol, midline=midline)
    return le, te
