# -*- coding: utf-8 -*-
# Foilmesh/geometry/geo/dispatcher.py

"""
Project: Foilmesh
Date: 9/20/2026

Purpose:
--------
Route a contour source to its loader, keeping format detection out of ContourLoader.

Main Tasks:
-----------------------
    1. Map file extensions to loader functions from the loaders subpackage.
    2. Recognize NACA 4-digit designations that name a generated contour instead of a file.
    3. Raise consistently for unsupported formats.
"""

from typing import Callable
from ..errors import InputError
from ..loaders.dat_loader import load_dat
from ..loaders.json_loader import load_json
from ..loaders.naca_loader import _DESIGNATION


SUPPORTED_EXTENSIONS = (".dat", ".txt", ".json")


def is_naca_designation(source: str) -> bool:
    """True for strings such as 'naca0012' or 'NACA 2412'."""
    return _DESIGNATION.match(str(source)) is not None and "naca" in str(source).lower()


def get_loader_function(file_extension: str) -> Callable:
    """
    Route file extension to appropriate loader function.

    Parameters
    ----------
    file_extension : str
        File extension including dot (e.g., '.dat', '.json')

    Returns
    -------
    Callable
        Loader returning a RawContour for a path.

    Raises
    ------
    InputError
        If file extension is not supported
    """
    extension_map = {
        ".dat": load_dat,
        ".txt": load_dat,
        ".json": load_json,
    }

    loader = extension_map.get(file_extension.lower())
    if loader is None:
        raise InputError(f"Unsupported file type: {file_extension}",
                         {"supported": list(SUPPORTED_EXTENSIONS)})

    return loader
