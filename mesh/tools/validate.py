# -*- coding: utf-8 -*-
# Foilmesh/mesh/tools/validate.py

"""
Project: Foilmesh
Date: 9/27/2026

Purpose:
-------
Post-write validation of a generated mesh file.

Main Tasks:
----------
   - check_physical_groups: read the mesh with meshio and verify that the named physical
     groups ("farfield", "wall" by default) exist with the expected dimension.

Notes:
------
   - meshio is imported lazily so geometry-only use of the package does not load it.
   - meshio exposes gmsh physical groups as field_data: name -> (id, dim).
"""

import logging
import os
from typing import Dict, List, Optional, Sequence

from geometry.errors import InputError
from ..core.errors import KernelError

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_GROUPS", "check_physical_groups"]

DEFAULT_GROUPS = ("farfield", "wall")


def _group_dims(field_data) -> Dict[str, Optional[int]]:
    groups = {}
    for name, meta in field_data.items():
        dim = None
        if meta is not None and len(meta) >= 2:
            dim = int(meta[1])
        groups[str(name)] = dim
    return groups


def check_physical_groups(
    msh_path: str,
    required: Sequence[str] = DEFAULT_GROUPS,
    *,
    kind_expectations: Optional[Dict[str, int]] = None,
) -> Dict[str, Optional[int]]:
    """
    Verify that `required` physical group names exist in the mesh file.

    Parameters
    ----------
    msh_path : str
        Path to the written mesh.
    required : sequence of str
        Group names to look for.
    kind_expectations : dict, optional
        name -> expected dimension. Defaults to 1 (curve groups) for every required name.

    Returns
    -------
    dict
        Group name -> dimension as reported by the file.

    Raises
    ------
    InputError
        If the file is missing or unreadable.
    KernelError
        If a group is missing or has the wrong dimension.
    """
    import meshio

    if not os.path.isfile(msh_path):
        raise InputError("Mesh file not found.", {"path": msh_path})
    try:
        m = meshio.read(msh_path)
    except Exception as e:
        raise InputError("Cannot read mesh file: {}".format(e), {"path": msh_path}) from e

    groups = _group_dims(getattr(m, "field_data", None) or {})
    missing: List[str] = [name for name in required if name not in groups]
    if missing:
        raise KernelError("Missing expected physical groups.",
                          {"path": msh_path, "missing": missing, "available": sorted(groups)})

    if kind_expectations is None:
        kind_expectations = {name: 1 for name in required}

    mismatches = []
    for name, expected_dim in kind_expectations.items():
        got = groups.get(name)
        if got is not None and got != int(expected_dim):
            mismatches.append("{}: expected dim {}, got {}".format(name, expected_dim, got))
    if mismatches:
        raise KernelError("Physical group dimension mismatch.", {"path": msh_path, "groups": mismatches})

    logger.info("[check_physical_groups] %s: %s", msh_path, ", ".join(sorted(groups)))
    return groups
