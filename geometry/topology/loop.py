# -*- coding: utf-8 -*-
# Foilmesh/geometry/topology/loop.py

"""
Project: Foilmesh
Date: 9/15/2026

Purpose:
--------
This module owns *connectivity-level* concerns of a contour:
   - Closed/opened conversions (first row duplicated at the end, or not),
   - Signed area and orientation (CW/CCW),
   - Canonical CCW ordering with stable, deterministic behavior.

Notes:
------------
   - Pure NumPy; no logging or file I/O.
   - `tol == 0` means exact equality of the endpoint rows; `tol > 0` compares each
     coordinate with an absolute tolerance (rtol fixed at 0).
   - For both definitions the conversions are idempotent and lossless:
     ensure_opened(ensure_closed(C)) == ensure_opened(C) and
     ensure_closed(ensure_opened(C)) == ensure_closed(C).
"""

import numpy as np
from ._validation import _assert_xy, _is_exactly_closed


# -----------------------
# Public API
# -----------------------
def is_closed(points: np.ndarray, tol: float = 0.0) -> bool:
    """
    Predicate: does the polyline close on itself (first == last within tol)?
    """
    _assert_xy(points)
    return _is_exactly_closed(points, tol)


def ensure_closed(points: np.ndarray, tol: float = 0.0) -> np.ndarray:
    """
    Ensure the polyline is closed. If last != first (within `tol`), append the first.

    Parameters
    ----------
    points : np.ndarray
        (N, 2) array representing an open or closed polyline.
    tol : float
        Absolute tolerance for endpoint equality; 0 means exact.

    Returns
    -------
    np.ndarray
        Closed polyline of shape (M, 2), where M is N or N+1.

    Notes
    -----
    - If already closed within tol, the original array reference is returned (no copy).
    - An empty array is returned unchanged.
    """
    _assert_xy(points)
    if points.shape[0] == 0 or _is_exactly_closed(points, tol):
        return points
    return np.vstack((points, points[0]))


def ensure_opened(points: np.ndarray, tol: float = 0.0) -> np.ndarray:
    """
    Drop the duplicated closing row if present (first == last within `tol`).

    Returns
    -------
    np.ndarray
        Opened polyline of shape (M, 2), where M is N or N-1. Already-open input is
        returned by reference.
    """
    _assert_xy(points)
    if _is_exactly_closed(points, tol):
        return points[:-1]
    return points


def signed_area(points_closed: np.ndarray) -> float:
    """
    Shoelace signed area for a polygonal loop.

    The input may be explicitly closed (first == last) or open; the formula implicitly
    connects last -> first, and a duplicated closing row contributes a zero-length edge.

    Returns
    -------
    float
        Signed area (units^2). Positive for CCW, negative for CW.

    Raises
    ------
    ValueError
        If input is not (N, 2) or N < 3.
    """
    _assert_xy(points_closed)
    if points_closed.shape[0] < 3:
        raise ValueError("Need at least 3 points to compute area.")
    x = points_closed[:, 0]
    y = points_closed[:, 1]
    area2 = np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))
    return 0.5 * float(area2)


def orientation(points_closed: np.ndarray) -> str:
    """
    Return "CCW" if the loop is counter-clockwise, else "CW" (zero area counts as CW).
    """
    a = signed_area(points_closed)
    return "CCW" if a > 0.0 else "CW"


def close_and_orient(points: np.ndarray,
                     desired: str = "CCW",
                     tol_close: float = 0.0) -> np.ndarray:
    """
    Close the loop and enforce the desired orientation ("CCW" or "CW").

    The only reordering performed is a full reversal of the unique vertices, after
    which the loop is re-closed. The first vertex keeps its position.

    Raises
    ------
    ValueError
        If `desired` is not one of {"CCW", "CW"} or the loop has fewer than 3 points.
    """
    if desired not in ("CCW", "CW"):
        raise ValueError("desired must be 'CCW' or 'CW'.")
    P = ensure_closed(points, tol=tol_close)
    if P.shape[0] < 3:
        raise ValueError("Need at least 3 points to form a loop.")
    if orientation(P) == desired:
        return P
    core = ensure_opened(P, tol=tol_close)
    flipped = np.vstack((core[:1], core[1:][::-1]))
    return ensure_closed(flipped, tol=tol_close)
