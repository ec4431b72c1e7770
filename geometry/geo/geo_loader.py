# -*- coding: utf-8 -*-
# Foilmesh/geometry/geo/geo_loader.py

"""
Project: Foilmesh
Date: 9/20/2026

Purpose:
--------
Load a single airfoil contour from a `.dat`/`.json` file or a NACA designation,
sanitize it, and expose the queries the meshing pipeline needs (closed/opened views,
LE/TE, chord, thickness, normalization, density adjustment).

Pipeline:
---------
load() → RawContour → float64 (N,2) → drop consecutive duplicates → ensure CLOSED → enforce CCW
"""

import os
import logging
from typing import Optional
import numpy as np

from ..errors import InputError
from ..loaders._helpers import RawContour, _clean_name
from ..loaders.naca_loader import generate_naca
from ..topology.loop import ensure_closed, ensure_opened, close_and_orient
from ..topology.indices import le_te_indices
from ..curves.density import adjust_density
from ..ops import (
    Thickness,
    drop_consecutive_duplicates,
    leading_edge as _le,
    trailing_edge as _te,
    chord_length as _chord_len,
    normalize as _normalize,
    thickness as _thickness,
)
from .dispatcher import get_loader_function, is_naca_designation

logger = logging.getLogger(__name__)

__all__ = ["ContourLoader", "sanitize_points"]


def sanitize_points(points, source: str = "") -> np.ndarray:
    """
    Canonicalize raw coordinates: float64 (N,2), finite, consecutive duplicates removed,
    explicitly closed and counter-clockwise.

    Raises
    ------
    InputError
        If the array is malformed, non-finite, or empty after deduplication.
    """
    pts = np.asarray(points, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise InputError(f"Geometry must be 2D (Nx2). Got shape: {pts.shape}", {"source": source})
    if not np.isfinite(pts).all():
        bad = np.argwhere(~np.isfinite(pts))
        raise InputError("Non-finite values in geometry.", {"source": source, "indices": bad.tolist()})

    pts = drop_consecutive_duplicates(pts)
    if pts.shape[0] == 0:
        raise InputError("Empty geometry.", {"source": source})

    pts = ensure_closed(pts)
    if pts.shape[0] >= 4:
        pts = close_and_orient(pts, desired="CCW")
    return pts


class ContourLoader:
    """
    Unified loader for one airfoil contour.

    Parameters
    ----------
    source : str
        Path to a `.dat`/`.txt`/`.json` file, or a NACA designation such as "naca0012".
    naca_density : int
        Stations per side when `source` is a NACA designation.

    Attributes
    ----------
    name : str
        Contour name (from the file header / JSON record, or the designation).
    points : Optional[np.ndarray]
        Geometry as an (N, 2) float64 array. After load(): CLOSED and CCW.
    """

    def __init__(self, source: str, naca_density: int = 100):
        self.source = source
        self.naca_density = int(naca_density)
        self.filetype = os.path.splitext(source)[-1].lower()
        self.name = os.path.splitext(os.path.basename(source))[0]
        self.points: Optional[np.ndarray] = None

    @classmethod
    def from_points(cls, name: str, points) -> "ContourLoader":
        """Wrap in-memory coordinates (sanitized immediately)."""
        loader = cls(name)
        loader.name = _clean_name(name)
        loader.points = sanitize_points(points, source=name)
        return loader

    # --------------------
    # Core API
    # --------------------
    def load(self) -> None:
        """
        Load geometry into self.points as an (N, 2) float64 array.

        Steps
        -----
        1) Generate NACA contours, or validate the file exists and dispatch by extension.
        2) Sanitize: finite, deduplicated, closed, CCW.
        """
        if not os.path.exists(self.source) and is_naca_designation(self.source):
            raw = generate_naca(self.source, density=self.naca_density)
        else:
            if not os.path.exists(self.source):
                raise InputError(f"[ContourLoader] File not found: {self.source}")
            loader = get_loader_function(self.filetype)
            raw: RawContour = loader(self.source)

        self.name = raw.name or self.name
        self.points = sanitize_points(raw.points, source=self.source)
        logger.info(
            "[ContourLoader] Loaded '%s' from %s with %d points (closed+CCW).",
            self.name, self.source, self.points.shape[0]
        )

    def _require(self) -> np.ndarray:
        if self.points is None:
            raise InputError("[ContourLoader] No geometry loaded. Call `.load()` first.")
        return self.points

    def get_closed_points(self) -> np.ndarray:
        """Closed (M, 2) view; `load()` already guarantees explicit closure."""
        return self._require()

    def get_opened_points(self) -> np.ndarray:
        """Opened (M-1, 2) view without the duplicated closing row."""
        return ensure_opened(self._require())

    # --------------------
    # Helpful utilities
    # --------------------
    def leading_edge(self) -> np.ndarray:
        """Leading edge (LE) point = minimum x."""
        return _le(self._require())

    def trailing_edge(self) -> np.ndarray:
        """Trailing edge (TE) point = maximum x."""
        return _te(self._require())

    def chord_length(self) -> float:
        return _chord_len(self._require())

    def thickness(self) -> Thickness:
        return _thickness(self._require())

    def normalize(self, translate_to_le: bool = True, scale_to_chord1: bool = True) -> None:
        """
        Normalize geometry in-place (LE→(0,0), chord→1) using ops.normalize.
        """
        self.points = _normalize(
            self._require(),
            translate_to_le=translate_to_le,
            scale_to_chord1=scale_to_chord1
        )
        le, te = le_te_indices(self.points, midline=True)
        logger.info(
            "[ContourLoader] Normalization applied: translate_to_le=%s, scale_to_chord1=%s "
            "(LE index %d, TE index %d)",
            translate_to_le, scale_to_chord1, le, te
        )

    def adjust_density(self, target: int) -> None:
        """Resample in-place toward `target` points (decimate or spline-refine)."""
        before = self._require().shape[0]
        self.points = adjust_density(self.points, target)
        logger.info("[ContourLoader] Density adjusted for '%s': %d → %d points.",
                    self.name, before, self.points.shape[0])
