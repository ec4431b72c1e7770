# -*- coding: utf-8 -*-
# Foilmesh/geometry/curves/simplify.py

"""
Project: Foilmesh
Date: 9/17/2026

Purpose
-------
Area-based contour decimation (Visvalingam-Whyatt). Each interior vertex is scored by the
area of the triangle it spans with its current neighbors; the least significant vertex is
removed repeatedly until a target size or an area tolerance binds.

Main Tasks
----------
    1. Score interior vertices of the opened contour (endpoints are never removed).
    2. Remove the minimum-area vertex, rescoring only its two neighbors.
    3. Stop when the size reaches the target or the smallest area exceeds the tolerance.
    4. Reseal closed input so the result is closed again.

Notes
-----
- Scores live in a min-heap keyed by (area, original index) with lazy invalidation, so
  equal areas resolve to the vertex that comes first along the contour.
- Vertices with zero area (collinear with both neighbors) are never candidates.
"""

import heapq
from typing import Optional

import numpy as np

from ..topology._validation import _assert_xy, _is_exactly_closed

__all__ = ["triangle_area", "streamline"]

_MIN_POINTS = 3


def triangle_area(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> float:
    """Unsigned area of triangle (a, b, c)."""
    return 0.5 * abs(float((b[0] - a[0]) * (c[1] - a[1]) - (c[0] - a[0]) * (b[1] - a[1])))


def streamline(points: np.ndarray,
               *,
               target: Optional[int] = None,
               tolerance: Optional[float] = None) -> np.ndarray:
    """
    Reduce the number of contour points while preserving shape.

    Parameters
    ----------
    points : np.ndarray
        (N, 2) contour; closed input (first == last) is opened before decimation and
        resealed afterwards.
    target : int, optional
        Stop once the opened contour has at most this many points. Defaults to the
        floor of 3 points.
    tolerance : float, optional
        Never remove a vertex whose triangle area exceeds this value. Unbounded if None.

    Returns
    -------
    np.ndarray
        Decimated contour. Closed input yields at most `target + 1` rows.

    Raises
    ------
    ValueError
        If `target < 3` or `tolerance < 0`.
    """
    if target is not None and int(target) < _MIN_POINTS:
        raise ValueError("target must be >= {}, got {}.".format(_MIN_POINTS, target))
    if tolerance is not None and float(tolerance) < 0.0:
        raise ValueError("tolerance must be >= 0, got {}.".format(tolerance))

    P = np.asarray(points, dtype=float)
    _assert_xy(P)
    closed = _is_exactly_closed(P)
    Q = P[:-1] if closed else P
    m = Q.shape[0]

    floor = _MIN_POINTS if target is None else int(target)
    if m < 4 or m <= floor:
        return P

    prev = np.arange(-1, m - 1)
    nxt = np.arange(1, m + 1)
    alive = np.ones(m, dtype=bool)
    stamp = np.zeros(m, dtype=int)

    heap = []
    for i in range(1, m - 1):
        a = triangle_area(Q[i - 1], Q[i], Q[i + 1])
        if a > 0.0:
            heap.append((a, i, 0))
    heapq.heapify(heap)

    size = m
    while size > floor and heap:
        area, i, st = heap[0]
        if not alive[i] or st != stamp[i]:
            heapq.heappop(heap)
            continue
        if tolerance is not None and area > tolerance:
            break
        heapq.heappop(heap)

        alive[i] = False
        p, q = prev[i], nxt[i]
        nxt[p] = q
        prev[q] = p
        size -= 1

        for j in (p, q):
            if j == 0 or j == m - 1:
                continue
            stamp[j] += 1
            a = triangle_area(Q[prev[j]], Q[j], Q[nxt[j]])
            if a > 0.0:
                heapq.heappush(heap, (a, j, int(stamp[j])))

    out = Q[alive]
    if closed:
        out = np.vstack((out, out[:1]))
    return out
