# -*- coding: utf-8 -*-
# Foilmesh/main.py

"""
End-to-end driver:
  1) Load & normalize a NACA 0012 contour, resample it
  2) Dry run: write the C-type template as a .geo script
  3) Build the structured mesh through gmsh and check its physical groups
"""

import logging
import os

from geometry.api import load_contour
from mesh.api import build_mesh, write_geo_script


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("Foilmesh")

    os.makedirs("out", exist_ok=True)

    # ------------------------------------------------------------------
    # 1) Load & normalize geometry
    # ------------------------------------------------------------------
    geo = load_contour("naca0012", points=161)
    log.info("Contour %s: %d points, chord %.4f, max thickness %.4f",
             geo.name, len(geo.get_closed_points()), geo.chord_length(), geo.thickness().total)

    # ------------------------------------------------------------------
    # 2) Mesh settings
    # ------------------------------------------------------------------
    params = {
        "contour": {"intercept": 0.175},
        "boundary": {"type": "c-type", "radius": 10.0, "accuracy": 1.0},
        "transfinite": {
            "contour": {"accuracy": 0.01, "distribution": "bump", "stretch": 0.2},
            "inlet": {"accuracy": 0.02, "distribution": "progression", "stretch": 1.0},
            "wake": {"accuracy": 0.01, "distribution": "progression", "stretch": 1.05},
            "walls": {"accuracy": 0.02, "distribution": "progression", "stretch": 1.1},
        },
        "output": {"format": "msh", "dimension": 2, "directory": "out", "timeout_s": 120},
    }

    # ------------------------------------------------------------------
    # 3) Dry run (.geo) and gmsh build
    # ------------------------------------------------------------------
    geo_path = write_geo_script(geo, os.path.join("out", "naca0012.geo"), label="naca0012", params=params)
    log.info("Template script: %s", geo_path)

    msh_path = build_mesh(geo, label="naca0012", params=params, validate_groups=True)
    log.info("Mesh: %s", msh_path)
