# -*- coding: utf-8 -*-
# Foilmesh/geometry/loaders/dat_loader.py

"""
Project: Foilmesh
Date: 9/19/2026

Purpose:
--------
Read an airfoil from `.dat`-style text: the first meaningful line is the contour name and
every following line holds one (x, y) pair.

Main Features:
--------------
   1) Handles blank lines and mixed whitespace.
   2) Supports inline/full-line comments starting with '#' or '//'.
   3) Accepts comma- or whitespace-separated columns.
   4) Skips lines that do not parse as two numbers (e.g. point-count headers).

Notes:
------
   - Returns raw points; ContourLoader dedupes, closes and normalizes them.
   - A file whose first line is already numeric is named after the file stem.
"""

import os
from typing import List, Optional, Tuple

import numpy as np

from ..errors import InputError
from ._helpers import RawContour, _clean_name, _validate_point_array


def _strip_comment(line: str) -> str:
    line = line.split("#", 1)[0]
    line = line.split("//", 1)[0]
    return line.strip()


def _parse_pair(line: str) -> Optional[Tuple[float, float]]:
    parts = line.replace(",", " ").split()
    if len(parts) < 2:
        return None
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        return None


def parse_dat(text: str, default_name: str = "") -> RawContour:
    """
    Parse `.dat` text into a RawContour.

    Parameters
    ----------
    text : str
        File contents.
    default_name : str
        Name used when the first meaningful line is numeric.

    Raises
    ------
    InputError
        If no coordinate pair is found.
    """
    name = None
    data: List[Tuple[float, float]] = []
    for raw in text.splitlines():
        line = _strip_comment(raw)
        if not line:
            continue
        if name is None and not data:
            pair = _parse_pair(line)
            if pair is None:
                name = _clean_name(line)
                continue
            name = _clean_name(default_name)
            data.append(pair)
            continue
        pair = _parse_pair(line)
        if pair is not None:
            data.append(pair)

    if not data:
        raise InputError("No numeric coordinate pairs found.", {"name": name or default_name})
    pts = np.asarray(data, dtype=np.float64)
    _validate_point_array(pts, source=name or default_name)
    return RawContour(name or _clean_name(default_name), pts)


def load_dat(filename: str) -> RawContour:
    """
    Load a `.dat` airfoil file.

    Raises
    ------
    InputError
        If the file cannot be read or holds no coordinates.
    """
    stem = os.path.splitext(os.path.basename(filename))[0]
    try:
        with open(filename, "r", encoding="utf-8", errors="ignore") as f:
            text = f.read()
    except OSError as e:
        raise InputError("[dat_loader] Failed to read airfoil file: {}".format(e),
                         {"path": filename}) from e
    return parse_dat(text, default_name=stem)
