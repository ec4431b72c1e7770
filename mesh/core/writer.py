# -*- coding: utf-8 -*-
# Foilmesh/mesh/core/writer.py

"""
Project: Foilmesh
Date: 9/24/2026

Purpose:
--------
Render a recorded kernel command stream as a gmsh `.geo` script and write it to disk.
The script reproduces the model when opened in gmsh, which makes dry runs inspectable
without the gmsh Python module.

Main Tasks:
-----------
    1. Map each command to its `.geo` statement (Point, Line, Circle, BSpline, Curve Loop,
       Plane Surface, Transfinite, Recombine, Physical, options, Mesh).
    2. Format floats with full precision.
    3. Write the script, creating parent directories as needed.
"""

import io
import os
from typing import Iterable, Optional


def _fmt(x) -> str:
    """Compact float formatting with enough precision for round-tripping."""
    return "{:.16g}".format(float(x))


def _ids(tags) -> str:
    return ", ".join(str(int(t)) for t in tags)


def render_geo_script(commands: Iterable, header: Optional[str] = None) -> str:
    """
    Build `.geo` text from (name, args) commands.

    Parameters
    ----------
    commands : Iterable[Command]
        Recorded kernel calls in program order.
    header : str, optional
        Comment placed at the top of the script.

    Returns
    -------
    str
        Script text.
    """
    buf = io.StringIO()
    W = buf.write

    if header:
        for line in str(header).splitlines():
            W("// " + line + "\n")
        W("\n")

    for name, a in commands:
        if name == "add_model":
            W("// model: {}\n".format(a["name"]))
        elif name == "set_option":
            v = a["value"]
            if isinstance(v, str):
                W('{} = "{}";\n'.format(a["name"], v))
            else:
                W("{} = {};\n".format(a["name"], _fmt(v)))
        elif name == "add_point":
            W("Point({}) = {{{}, {}, {}, {}}};\n".format(
                a["tag"], _fmt(a["x"]), _fmt(a["y"]), _fmt(a["z"]), _fmt(a["mesh_size"])))
        elif name == "add_line":
            W("Line({}) = {{{}, {}}};\n".format(a["tag"], a["start"], a["end"]))
        elif name == "add_circle_arc":
            W("Circle({}) = {{{}, {}, {}}};\n".format(a["tag"], a["start"], a["center"], a["end"]))
        elif name == "add_bspline":
            W("BSpline({}) = {{{}}};\n".format(a["tag"], _ids(a["point_tags"])))
        elif name == "add_curve_loop":
            W("Curve Loop({}) = {{{}}};\n".format(a["tag"], _ids(a["curve_tags"])))
        elif name == "add_plane_surface":
            W("Plane Surface({}) = {{{}}};\n".format(a["tag"], a["loop_tag"]))
        elif name == "set_transfinite_curve":
            W("Transfinite Curve {{{}}} = {} Using {} {};\n".format(
                a["tag"], a["points"], a["kind"], _fmt(a["coef"])))
        elif name == "set_transfinite_surface":
            corners = a.get("corner_tags") or ()
            if corners:
                W("Transfinite Surface {{{}}} = {{{}}} {};\n".format(a["tag"], _ids(corners), a["arrangement"]))
            else:
                W("Transfinite Surface {{{}}} {};\n".format(a["tag"], a["arrangement"]))
        elif name == "set_recombine":
            W("Recombine Surface {{{}}};\n".format(a["tag"]))
        elif name == "add_physical_group":
            kind = {0: "Point", 1: "Curve", 2: "Surface", 3: "Volume"}[a["dim"]]
            W('Physical {}("{}", {}) = {{{}}};\n'.format(kind, a["name"], a["tag"], _ids(a["tags"])))
        elif name == "generate":
            W("Mesh {};\n".format(a["dim"]))
        # initialize / synchronize / write / finalize have no script counterpart

    return buf.getvalue()


def write_geo_file(geo_text: str, path: str) -> str:
    """
    Write a `.geo` string to disk, creating parent directories if needed.

    Returns
    -------
    str
        The path that was written.
    """
    dirname = os.path.dirname(path)
    if dirname and not os.path.exists(dirname):
        os.makedirs(dirname)
    with open(path, "w", encoding="utf-8") as f:
        f.write(geo_text)
    return path
