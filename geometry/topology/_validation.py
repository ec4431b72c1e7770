# -*- coding: utf-8 -*-
# Foilmesh/geometry/topology/_validation.py

"""
Project: Foilmesh
Date: 9/15/2026

Purpose:
--------
Shared validation helpers for the topology and curve modules: array structure checks,
finite-value checks and the endpoint-equality predicate behind closed/opened contours.
"""

from typing import Optional
import numpy as np


def _assert_xy(points: Optional[np.ndarray], check_finite: bool = False) -> None:
    """
    Validate that points array is (N, 2), optionally rejecting NaN/Inf.

    Raises
    ------
    ValueError
        If points array fails validation checks
    """
    if points is None:
        raise ValueError("No geometry provided (points is None).")

    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"Expected (N, 2) array for points, got shape {points.shape}.")

    if check_finite and not np.isfinite(points).all():
        bad_indices = np.argwhere(~np.isfinite(points))
        raise ValueError(f"Non-finite coordinates detected at indices: {bad_indices.tolist()}")


def _is_exactly_closed(points: np.ndarray, tol: float = 0.0) -> bool:
    """
    True if the polyline has at least two rows and first == last.

    With `tol <= 0` the rows must match exactly; otherwise each coordinate must agree
    within `tol`.
    """
    if points.shape[0] < 2:
        return False
    if tol <= 0.0:
        return bool(np.array_equal(points[0], points[-1]))
    return bool(np.allclose(points[0], points[-1], atol=tol, rtol=0.0))
