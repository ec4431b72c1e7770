# -*- coding: utf-8 -*-
# Foilmesh/geometry/api.py

"""
Project: Foilmesh
Date: 9/21/2026

Purpose
-------
Thin, import-only façade for contour workflows. Exposes two helpers to (1) load and
normalize a contour from a file, NACA designation or library, optionally resampling it,
and (2) classify it into the labeled point list consumed by the mesh template.

Notes
-----
- Detailed behavior lives in `geo_loader`, `curves` and `topology.edges`.
"""

from typing import List, Optional, Union

import numpy as np

from .geo.geo_loader import ContourLoader
from .geo.library import ContourLibrary
from .primitives import LabeledPoint
from .topology.edges import DEFAULT_INTERCEPT, classify_edges

__all__ = [
    "load_contour",
    "prepare_contour",
]


def load_contour(
    source: str,
    *,
    library: Optional[ContourLibrary] = None,
    normalize: bool = True,
    points: Optional[int] = None,
) -> ContourLoader:
    """
    Load a contour and optionally normalize and resample it.

    Args
    ----
    source : str
        File path, NACA designation, or a name held by `library`.
    library : ContourLibrary, optional
        Looked up first when given and it contains `source`.
    normalize : bool, optional
        Translate LE to the origin and scale the chord to 1 (default: True).
    points : int, optional
        Target point count for density adjustment.

    Returns
    -------
    ContourLoader
        Loader holding the closed, CCW contour.
    """
    if library is not None and source in library:
        geo = ContourLoader.from_points(source, library.get(source))
    else:
        geo = ContourLoader(source)
        geo.load()
    if normalize:
        geo.normalize()
    if points is not None:
        geo.adjust_density(points)
    return geo


def prepare_contour(
    contour: Union[ContourLoader, np.ndarray],
    intercept: float = DEFAULT_INTERCEPT,
) -> List[LabeledPoint]:
    """
    Classify a contour into re-tagged labeled points.

    Raises
    ------
    ConfigError
        If the intercept is outside (0, 0.5].
    ClassificationError
        If an anchor cannot be located.
    """
    pts = contour.get_opened_points() if isinstance(contour, ContourLoader) else contour
    return classify_edges(pts, intercept)
