# -*- coding: utf-8 -*-
# Foilmesh/mesh/api.py

"""
Project: Foilmesh
Date: 9/27/2026

Purpose
-------
High-level API for building C-type structured meshes around an airfoil contour. Ties
together the configuration layer, contour preparation (resampling, classification), the
topology template and a mesh kernel, and exposes `build_mesh` plus a kernel-free
`write_geo_script` dry run.

Main Tasks
----------
    1. Merge and validate the request configuration.
    2. Resample the contour when a point target is set, then classify it.
    3. Construct the topology builder (anchor checks happen here, before the kernel).
    4. Under a kernel session: emit the template, synchronize, generate, write.
    5. Optionally validate the physical groups of the written .msh.
"""

import logging
import os
from typing import Any, Mapping, Optional, Union

import numpy as np

from geometry.api import load_contour, prepare_contour
from geometry.geo.geo_loader import ContourLoader
from .config import boundary_from_config, build_config, transfinite_from_config
from .core.base import MeshKernel
from .core.formats import MeshFormat, output_filename, parse_format
from .core.kernels import RecordingKernel
from .core.session import kernel_session
from .core.topology import topology_builder
from .tools.validate import DEFAULT_GROUPS, check_physical_groups

logger = logging.getLogger(__name__)

__all__ = ["build_mesh", "write_geo_script", "plan_topology"]


def _as_loader(contour: Union[ContourLoader, np.ndarray, str], label: Optional[str],
               cfg: Mapping[str, Mapping[str, Any]]) -> ContourLoader:
    if isinstance(contour, ContourLoader):
        return contour
    if isinstance(contour, str):
        return load_contour(contour, normalize=bool(cfg["contour"]["normalize"]))
    geo = ContourLoader.from_points(label or "contour", contour)
    if cfg["contour"]["normalize"]:
        geo.normalize()
    return geo


def plan_topology(contour: Union[ContourLoader, np.ndarray, str],
                  cfg: Mapping[str, Mapping[str, Any]],
                  label: Optional[str] = None):
    """
    Prepare everything that precedes kernel work.

    Returns
    -------
    (ContourLoader, CTypeTopologyBuilder)
    """
    geo = _as_loader(contour, label, cfg)
    target = cfg["contour"]["points"]
    if target is not None:
        geo.adjust_density(int(target))
    labeled = prepare_contour(geo, cfg["contour"]["intercept"])
    builder = topology_builder(cfg["boundary"]["type"], labeled,
                               boundary_from_config(cfg),
                               transfinite_from_config(cfg))
    return geo, builder


def build_mesh(
    contour: Union[ContourLoader, np.ndarray, str],
    *,
    label: Optional[str] = None,
    params: Optional[Mapping[str, Any]] = None,
    kernel: Optional[MeshKernel] = None,
    validate_groups: bool = False,
) -> str:
    """
    Build and write a structured C-type mesh.

    Parameters
    ----------
    contour : ContourLoader | np.ndarray | str
        Loaded contour, raw (N, 2) points, or a source (file path / NACA designation).
    label : str, optional
        Model and output file stem; defaults to the contour name.
    params : mapping, optional
        Overrides for the sectioned defaults (see `mesh.config`).
    kernel : MeshKernel, optional
        Kernel to drive; defaults to GmshKernel.
    validate_groups : bool
        For .msh output, read the file back and check the "farfield"/"wall" groups.

    Returns
    -------
    str
        Path of the written mesh file.

    Raises
    ------
    ConfigError, InputError, ClassificationError
        Before any kernel command.
    KernelError
        From the session (busy, timeout, or a failing stage).
    """
    cfg = build_config(params)
    out = cfg["output"]

    geo, builder = plan_topology(contour, cfg, label)
    name = label or geo.name or "contour"
    fmt = parse_format(out["format"])
    os.makedirs(out["directory"], exist_ok=True)
    path = os.path.join(out["directory"], output_filename(name, fmt))

    if kernel is None:
        from .core.kernels.gmsh_kernel import GmshKernel
        kernel = GmshKernel(verbose=bool(out["verbose"]))
    logger.info("[build_mesh] %s: %d contour points, %s -> %s",
                name, len(builder.contour), cfg["boundary"]["type"], path)

    with kernel_session(kernel, name, timeout_s=out["timeout_s"]) as session:
        session.stage("build", builder.emit, kernel)
        session.stage("synchronize", kernel.synchronize)
        session.stage("generate", kernel.generate, int(out["dimension"]))
        session.stage("write", kernel.write, path)

    if validate_groups and fmt is MeshFormat.MSH:
        check_physical_groups(path, DEFAULT_GROUPS)

    logger.info("[build_mesh] Mesh written to %s", path)
    return path


def write_geo_script(
    contour: Union[ContourLoader, np.ndarray, str],
    path: str,
    *,
    label: Optional[str] = None,
    params: Optional[Mapping[str, Any]] = None,
) -> str:
    """
    Dry run: emit the template into a RecordingKernel and save it as a gmsh .geo script.

    Returns
    -------
    str
        `path`.
    """
    cfg = build_config(params)
    geo, builder = plan_topology(contour, cfg, label)
    kernel = RecordingKernel()
    with kernel_session(kernel, label or geo.name or "contour") as session:
        session.stage("build", builder.emit, kernel)
        session.stage("synchronize", kernel.synchronize)
        session.stage("write", kernel.write, path)
    return path
