# -*- coding: utf-8 -*-
# Foilmesh/geometry/loaders/json_loader.py

"""
Project: Foilmesh
Date: 9/19/2026

Purpose:
--------
Read contours from JSON. A single contour is an object
{"name": str, "coordinates": [{"x": num, "y": num}, ...]}; a library file is a list of
such objects.

Notes:
------
   - Field errors name the offending record index and key in the error context.
   - Returns raw points; closure and dedup happen in ContourLoader / ContourLibrary.
"""

import json
from typing import Any, List

import numpy as np

from ..errors import InputError
from ._helpers import RawContour, _clean_name, _validate_point_array


def contour_from_record(record: Any, index: int = 0) -> RawContour:
    """
    Convert one decoded JSON object into a RawContour.

    Raises
    ------
    InputError
        On a missing 'name' / 'coordinates' / 'x' / 'y' field, a non-numeric value,
        or an empty coordinate list.
    """
    if not isinstance(record, dict):
        raise InputError("Contour record must be an object.", {"record": index})
    if "name" not in record:
        raise InputError("Contour record is missing 'name'.", {"record": index})
    coords = record.get("coordinates")
    if not isinstance(coords, list):
        raise InputError("Contour record is missing a 'coordinates' list.",
                         {"record": index, "name": record["name"]})

    rows = []
    for k, c in enumerate(coords):
        if not isinstance(c, dict) or "x" not in c or "y" not in c:
            raise InputError("Coordinate must be an object with 'x' and 'y'.",
                             {"record": index, "coordinate": k})
        x, y = c["x"], c["y"]
        if isinstance(x, bool) or isinstance(y, bool) \
                or not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
            raise InputError("Coordinate values must be numeric.",
                             {"record": index, "coordinate": k, "x": x, "y": y})
        rows.append((float(x), float(y)))

    name = _clean_name(record["name"])
    if not rows:
        raise InputError("Contour has no coordinates.", {"record": index, "name": name})
    pts = np.asarray(rows, dtype=np.float64)
    _validate_point_array(pts, source=name)
    return RawContour(name, pts)


def contour_to_record(name: str, points: np.ndarray) -> dict:
    """Inverse of `contour_from_record` for writing libraries."""
    return {
        "name": name,
        "coordinates": [{"x": float(x), "y": float(y)} for x, y in np.asarray(points)],
    }


def parse_json(text: str) -> List[RawContour]:
    """
    Decode JSON text holding one contour object or a list of them.

    Raises
    ------
    InputError
        If the text is not valid JSON or a record is malformed.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InputError("Invalid JSON: {}".format(e.msg), {"line": e.lineno, "column": e.colno}) from e
    if isinstance(data, dict):
        return [contour_from_record(data)]
    if isinstance(data, list):
        return [contour_from_record(r, i) for i, r in enumerate(data)]
    raise InputError("JSON root must be an object or a list of objects.")


def load_json(filename: str) -> RawContour:
    """
    Load a single-contour JSON file (the first record if the file holds a list).

    Raises
    ------
    InputError
        If the file cannot be read, is not JSON, or holds no contour.
    """
    try:
        with open(filename, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise InputError("[json_loader] Failed to read contour file: {}".format(e),
                         {"path": filename}) from e
    contours = parse_json(text)
    if not contours:
        raise InputError("No contour found in JSON file.", {"path": filename})
    return contours[0]
