# -*- coding: utf-8 -*-
# Foilmesh/geometry/geo/library.py

"""
Project: Foilmesh
Date: 9/21/2026

Purpose:
--------
In-memory contour library. The caller creates and owns it and passes it to whatever needs
contour lookup; nothing in the package keeps a process-wide instance.

Main Tasks:
-----------
    1. Read a JSON library (list of {"name", "coordinates"} objects) and import directories
       of `.dat` files.
    2. Look contours up by case-insensitive name.
    3. Write the library back as a flat JSON point list per contour.

Notes:
------
- Stored contours are sanitized (deduplicated, closed, CCW) on insertion.
"""

import glob
import json
import logging
import os
from typing import Dict, Iterator, List, Optional

import numpy as np

from ..errors import InputError
from ..loaders._helpers import _clean_name
from ..loaders.dat_loader import load_dat
from ..loaders.json_loader import contour_to_record, parse_json
from .geo_loader import sanitize_points

logger = logging.getLogger(__name__)

__all__ = ["ContourLibrary"]


class ContourLibrary:
    """
    Name → closed contour mapping.

    Parameters
    ----------
    contours : dict, optional
        Initial {name: (N,2) points} entries.
    """

    def __init__(self, contours: Optional[Dict[str, np.ndarray]] = None):
        self._contours: Dict[str, np.ndarray] = {}
        for name, pts in (contours or {}).items():
            self.add(name, pts)

    # --------------------
    # Construction
    # --------------------
    @classmethod
    def from_file(cls, path: str) -> "ContourLibrary":
        lib = cls()
        lib.load(path)
        return lib

    def load(self, path: str) -> int:
        """
        Merge contours from a JSON library file. Returns the number of contours read.

        Raises
        ------
        InputError
            If the file cannot be read or any record is malformed (nothing is merged).
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            raise InputError("[ContourLibrary] Failed to read library: {}".format(e),
                             {"path": path}) from e
        raws = parse_json(text)
        staged = [(r.name, sanitize_points(r.points, source=r.name)) for r in raws]
        for name, pts in staged:
            self._contours[name] = pts
        logger.info("[ContourLibrary] Loaded %d contours from %s.", len(staged), path)
        return len(staged)

    def import_directory(self, directory: str, pattern: str = "*.dat") -> int:
        """
        Add every `.dat` file in `directory`. Unreadable files are skipped with a warning.
        Returns the number of contours added.
        """
        added = 0
        for path in sorted(glob.glob(os.path.join(directory, pattern))):
            try:
                raw = load_dat(path)
            except InputError as e:
                logger.warning("[ContourLibrary] Skipping %s: %s", path, e)
                continue
            self.add(raw.name, raw.points)
            added += 1
        logger.info("[ContourLibrary] Imported %d contours from %s.", added, directory)
        return added

    def add(self, name: str, points) -> None:
        """Insert or replace a contour under `name` (normalized to upper case)."""
        key = _clean_name(name)
        if not key:
            raise InputError("Contour name must not be empty.")
        self._contours[key] = sanitize_points(points, source=key)

    # --------------------
    # Lookup
    # --------------------
    def get(self, name: str) -> np.ndarray:
        """
        Return a copy of the closed contour stored under `name`.

        Raises
        ------
        InputError
            If no contour has that name.
        """
        key = _clean_name(name)
        if key not in self._contours:
            raise InputError("Unknown contour.", {"name": name})
        return self._contours[key].copy()

    def names(self) -> List[str]:
        return sorted(self._contours)

    def __contains__(self, name) -> bool:
        return _clean_name(name) in self._contours

    def __len__(self) -> int:
        return len(self._contours)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    # --------------------
    # Output
    # --------------------
    def write(self, path: str) -> str:
        """Write all contours as a JSON list of {"name", "coordinates"} records."""
        records = [contour_to_record(name, self._contours[name]) for name in self.names()]
        parent = os.path.dirname(os.path.abspath(path))
        os.makedirs(parent, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(records, f, indent=2)
        logger.info("[ContourLibrary] Wrote %d contours to %s.", len(records), path)
        return path
