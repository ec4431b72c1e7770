# -*- coding: utf-8 -*-
# Foilmesh/geometry/curves/density.py

"""
Project: Foilmesh
Date: 9/17/2026

Purpose
-------
Bring a closed contour close to a requested point count: decimate when it is too dense,
spline-refine when it is too sparse.
"""

import numpy as np

from .simplify import streamline
from .spline import fit_spline, SplineKind

__all__ = ["adjust_density"]


def adjust_density(points_closed: np.ndarray, target: int, kind=SplineKind.CENTRIPETAL) -> np.ndarray:
    """
    Resample a closed contour toward `target` points.

    - target < N : area-based decimation down to `target - 1` unique points (the closing
      row brings the count to `target`).
    - target >= N : spline refinement with `(target - N) // (N - 1)` samples per segment,
      which never overshoots `target`.

    Raises
    ------
    ValueError
        If `target` is below 4.
    """
    target = int(target)
    if target < 4:
        raise ValueError("target must be >= 4, got {}.".format(target))
    n = points_closed.shape[0]
    if target < n:
        return streamline(points_closed, target=target - 1)
    if n < 2:
        return points_closed
    return fit_spline(points_closed, accuracy=(target - n) // (n - 1), kind=kind)
