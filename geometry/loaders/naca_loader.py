# -*- coding: utf-8 -*-
# Foilmesh/geometry/loaders/naca_loader.py

"""
Project: Foilmesh
Date: 9/20/2026

Purpose:
--------
Generate NACA 4-digit airfoils analytically so meshes can be built without a coordinate
file.

Main Tasks:
-----------
   1) Parse designations such as "naca0012", "NACA 2412" or "4415".
   2) Sample the camber line with cosine spacing and offset it by the thickness ordinate
      perpendicular to the camber slope.
   3) Close the contour at a sharp trailing edge (1, 0), ordered upper TE → LE → lower TE.
"""

import re

import numpy as np

from ..errors import InputError
from ._helpers import RawContour

_DESIGNATION = re.compile(r"^\s*(?:naca)?\s*(\d)(\d)(\d{2})\s*$", re.IGNORECASE)

# Thickness polynomial with the classic open-TE last coefficient.
_COEFFS = (0.2969, -0.1260, -0.3516, 0.2843, -0.1036)


def parse_designation(designation: str):
    """
    Return (camber, position, thickness) as fractions of chord.

    Raises
    ------
    InputError
        If the designation is not a 4-digit NACA code.
    """
    match = _DESIGNATION.match(str(designation))
    if match is None:
        raise InputError("Not a NACA 4-digit designation.", {"designation": designation})
    m, p, t = match.groups()
    return 0.01 * int(m), 0.1 * int(p), 0.01 * int(t)


def _camber(x: np.ndarray, m: float, p: float):
    """Camber ordinate and slope."""
    if m == 0.0 or p == 0.0:
        return np.zeros_like(x), np.zeros_like(x)
    fore = x < p
    yc = np.where(fore,
                  m * (2.0 * p * x - x ** 2) / p ** 2,
                  m * (1.0 - 2.0 * p + 2.0 * p * x - x ** 2) / (1.0 - p) ** 2)
    dyc = np.where(fore,
                   2.0 * m * (p - x) / p ** 2,
                   2.0 * m * (p - x) / (1.0 - p) ** 2)
    return yc, dyc


def _half_thickness(x: np.ndarray, t: float) -> np.ndarray:
    a0, a1, a2, a3, a4 = _COEFFS
    return 5.0 * t * (a0 * np.sqrt(x) + a1 * x + a2 * x ** 2 + a3 * x ** 3 + a4 * x ** 4)


def generate_naca(designation: str, density: int = 100) -> RawContour:
    """
    Build a closed NACA 4-digit contour.

    Parameters
    ----------
    designation : str
        e.g. "naca0012".
    density : int
        Number of cosine-spaced stations per side (>= 3), both edges included.

    Returns
    -------
    RawContour
        Name "NACA mptt" and a closed (2*density - 1, 2) array starting and ending at (1, 0).
    """
    m, p, t = parse_designation(designation)
    density = int(density)
    if density < 3:
        raise InputError("NACA density must be >= 3.", {"density": density})

    beta = np.pi * np.arange(density) / (density - 1)
    x = 0.5 * (1.0 - np.cos(beta))
    yc, dyc = _camber(x, m, p)
    yt = _half_thickness(x, t)
    theta = np.arctan(dyc)

    upper = np.column_stack((x - yt * np.sin(theta), yc + yt * np.cos(theta)))
    lower = np.column_stack((x + yt * np.sin(theta), yc - yt * np.cos(theta)))

    # Replace the open trailing edge with a sharp one; LE shared by both sides.
    te = np.array([[1.0, 0.0]])
    upper = np.vstack((upper[:-1], te))
    lower = np.vstack((lower[1:-1], te))
    pts = np.vstack((upper[::-1], lower))

    name = "NACA {}{}{:02d}".format(int(round(m * 100)), int(round(p * 10)), int(round(t * 100)))
    return RawContour(name, pts)
