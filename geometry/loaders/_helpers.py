# -*- coding: utf-8 -*-
# Foilmesh/geometry/loaders/_helpers.py

"""
Project: Foilmesh
Date: 9/19/2026

Purpose:
--------
Shared helpers for contour loaders: the (name, points) record every loader returns,
name normalization, and a consistent point-array quality check.
"""

import re
from typing import NamedTuple
import numpy as np

from ..errors import InputError

_WS = re.compile(r"\s+")


class RawContour(NamedTuple):
    """Name plus raw (N, 2) float64 coordinates, before dedup/closure."""
    name: str
    points: np.ndarray


def _clean_name(name: str) -> str:
    """Trim, upper-case and collapse whitespace runs: '  naca   0012 ' -> 'NACA 0012'."""
    return _WS.sub(" ", str(name).strip()).upper()


def _validate_point_array(points: np.ndarray, source: str, min_points: int = 1) -> None:
    """
    Validate that a loaded points array is (N, 2), finite, and large enough.

    Raises
    ------
    InputError
        If the array fails any check; `source` is reported in the error context.
    """
    if points.ndim != 2 or points.shape[1] != 2:
        raise InputError(f"Expected (N,2) array for points, got shape {points.shape}",
                         {"source": source})

    if points.shape[0] < min_points:
        raise InputError(f"Need at least {min_points} points, got {points.shape[0]}",
                         {"source": source})

    if not np.isfinite(points).all():
        bad_indices = np.argwhere(~np.isfinite(points))
        raise InputError("Non-finite values detected in coordinates.",
                         {"source": source, "indices": bad_indices.tolist()})
