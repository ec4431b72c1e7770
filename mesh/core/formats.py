# -*- coding: utf-8 -*-
# Foilmesh/mesh/core/formats.py

"""
Project: Foilmesh
Date: 9/22/2026

Purpose
-------
Enumerations for mesh requests: topology type and output file format, with parsers that
turn user strings into members and raise ConfigError otherwise.
"""

from enum import Enum

from geometry.errors import ConfigError

__all__ = ["MeshFormat", "MeshType", "parse_format", "parse_mesh_type", "output_filename"]


class MeshFormat(str, Enum):
    """Output formats the kernel writes, selected by file extension."""
    MSH = "msh"
    CGNS = "cgns"
    STL = "stl"
    VTK = "vtk"
    SU2 = "su2"


class MeshType(str, Enum):
    C = "c-type"
    H = "h-type"
    O = "o-type"


def _parse(enum_cls, value, what: str):
    if isinstance(value, enum_cls):
        return value
    token = str(value).strip().lower()
    for member in enum_cls:
        if token in (member.value, member.name.lower()):
            return member
    raise ConfigError("Unsupported {}.".format(what),
                      {"value": value, "allowed": [m.value for m in enum_cls]})


def parse_format(value) -> MeshFormat:
    """'msh', '.MSH', MeshFormat.MSH → MeshFormat.MSH."""
    if isinstance(value, MeshFormat):
        return value
    return _parse(MeshFormat, str(value).strip().lstrip("."), "mesh format")


def parse_mesh_type(value) -> MeshType:
    """'c', 'C-type', MeshType.C → MeshType.C."""
    return _parse(MeshType, value, "mesh type")


def output_filename(label: str, fmt) -> str:
    """'<label>.<extension>' for the given format."""
    return "{}.{}".format(label, parse_format(fmt).value)
