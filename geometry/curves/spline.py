# -*- coding: utf-8 -*-
# Foilmesh/geometry/curves/spline.py

"""
Project: Foilmesh
Date: 9/16/2026

Purpose
-------
Interpolating Catmull-Rom spline through an ordered contour. The curve passes through
every input point and inserts `accuracy` evenly spaced parameter samples per segment.

Main Tasks
----------
    1. Build a non-uniform knot sequence t_{k+1} = t_k + |P_k P_{k+1}|^alpha.
    2. Evaluate each segment with the Barry-Goldman pyramid (repeated linear interpolation).
    3. Window every segment over the ring of unique vertices (modular indexing), so open
       input wraps around exactly like closed input; only closed input re-appends its first
       point.

Notes
-----
- alpha = 0 (uniform), 0.5 (centripetal, no cusps or self-intersections within a segment),
  1 (chordal).
- Degenerate input (fewer than 4 points, coincident neighbors with alpha > 0) is returned
  unchanged.
- The window before the first vertex uses its ring predecessor (the second-to-last row of a
  closed array), not the third-from-last row.
"""

import logging
from enum import Enum
from typing import Union

import numpy as np

from ..topology._validation import _assert_xy, _is_exactly_closed

logger = logging.getLogger(__name__)

__all__ = ["SplineKind", "fit_spline", "spline_segment"]


class SplineKind(Enum):
    UNIFORM = 0.0
    CENTRIPETAL = 0.5
    CHORDAL = 1.0


def _resolve_alpha(kind: Union[str, float, SplineKind]) -> float:
    if isinstance(kind, SplineKind):
        return kind.value
    if isinstance(kind, str):
        try:
            return SplineKind[kind.strip().upper()].value
        except KeyError:
            raise ValueError("Unknown spline kind '{}'. Expected one of {}."
                             .format(kind, [k.name.lower() for k in SplineKind]))
    alpha = float(kind)
    if not 0.0 <= alpha <= 1.0:
        raise ValueError("alpha must lie in [0, 1], got {}.".format(alpha))
    return alpha


def spline_segment(p0, p1, p2, p3, t: np.ndarray, knots) -> np.ndarray:
    """
    Evaluate one Catmull-Rom segment between p1 and p2 at parameters `t`.

    Parameters
    ----------
    p0, p1, p2, p3 : array-like, shape (2,)
        Control window.
    t : np.ndarray
        Parameters in [t1, t2].
    knots : tuple of 4 floats
        (t0, t1, t2, t3), strictly increasing.

    Returns
    -------
    np.ndarray
        (len(t), 2) curve samples.
    """
    t0, t1, t2, t3 = knots
    t = np.asarray(t, dtype=float)[:, None]
    p0, p1, p2, p3 = (np.asarray(p, dtype=float)[None, :] for p in (p0, p1, p2, p3))

    a1 = (t1 - t) / (t1 - t0) * p0 + (t - t0) / (t1 - t0) * p1
    a2 = (t2 - t) / (t2 - t1) * p1 + (t - t1) / (t2 - t1) * p2
    a3 = (t3 - t) / (t3 - t2) * p2 + (t - t2) / (t3 - t2) * p3

    b1 = (t2 - t) / (t2 - t0) * a1 + (t - t0) / (t2 - t0) * a2
    b2 = (t3 - t) / (t3 - t1) * a2 + (t - t1) / (t3 - t1) * a3

    return (t2 - t) / (t2 - t1) * b1 + (t - t1) / (t2 - t1) * b2


def fit_spline(points: np.ndarray,
               accuracy: int = 4,
               kind: Union[str, float, SplineKind] = SplineKind.CENTRIPETAL) -> np.ndarray:
    """
    Densify a contour with an interpolating Catmull-Rom spline.

    Parameters
    ----------
    points : np.ndarray
        (N, 2) ordered contour. If first == last it is treated as closed.
    accuracy : int
        Number of inserted samples per segment (>= 0).
    kind : str | float | SplineKind
        "uniform" / "centripetal" / "chordal", or an explicit alpha in [0, 1].

    Returns
    -------
    np.ndarray
        ((N-1) * (accuracy+1) + 1, 2); the last row is the last input row, so closed input
        stays closed.
        Degenerate input is returned unchanged.

    Raises
    ------
    ValueError
        If `points` is not (N, 2), `accuracy` is negative, or `kind` is unknown.
    """
    P = np.asarray(points, dtype=float)
    _assert_xy(P)
    accuracy = int(accuracy)
    if accuracy < 0:
        raise ValueError("accuracy must be >= 0, got {}.".format(accuracy))
    alpha = _resolve_alpha(kind)

    n = P.shape[0]
    if n < 4:
        return P

    closed = _is_exactly_closed(P)
    ring = P[:-1] if closed else P
    m = ring.shape[0]

    # Knot increments between ring neighbors, including the wrap from last to first.
    seg = np.linalg.norm(np.roll(ring, -1, axis=0) - ring, axis=1)
    if alpha > 0.0 and np.any(seg == 0.0):
        logger.warning("[fit_spline] Coincident consecutive points; returning input unchanged.")
        return P
    dt = seg ** alpha

    out = []
    for i in range(n - 1):
        i0, i1, i2, i3 = (i - 1) % m, i, (i + 1) % m, (i + 2) % m
        d01, d12, d23 = dt[i0], dt[i1], dt[i2]
        knots = (0.0, d01, d01 + d12, d01 + d12 + d23)
        t = np.linspace(knots[1], knots[2], accuracy + 1, endpoint=False)
        samples = spline_segment(ring[i0], ring[i1], ring[i2], ring[i3], t, knots)
        samples[0] = ring[i1]
        out.append(samples)

    out.append(P[-1:])
    return np.vstack(out)
