# -*- coding: utf-8 -*-
# Foilmesh/tests/test_api.py

import os

import pytest

from geometry.errors import ConfigError, SchemaError
from geometry.geo.geo_loader import ContourLoader
from mesh.api import build_mesh, write_geo_script
from mesh.core.formats import MeshFormat, output_filename, parse_format
from mesh.core.kernels import RecordingKernel


def test_build_mesh_command_sequence(tmp_path):
    kernel = RecordingKernel()
    path = build_mesh("naca0012", label="n12", kernel=kernel,
                      params={"output": {"directory": str(tmp_path), "format": "su2"}})
    assert path == os.path.join(str(tmp_path), "n12.su2")
    names = [c.name for c in kernel.commands]
    assert names[:2] == ["initialize", "add_model"]
    assert names[-4:] == ["synchronize", "generate", "write", "finalize"]
    assert kernel.written == [path]
    assert kernel.calls("generate")[0].args["dim"] == 2


def test_build_mesh_resamples_contour(naca0012, tmp_path):
    kernel = RecordingKernel()
    build_mesh(naca0012, label="coarse", kernel=kernel,
               params={"points": 60, "directory": str(tmp_path)})
    # 60 rows closed -> 59 open + 2 split points, plus seven corners.
    assert len(kernel.points) <= 59 + 2 + 7


def test_build_mesh_uses_loader_name(naca0012, tmp_path):
    geo = ContourLoader.from_points("wing section", naca0012)
    path = build_mesh(geo, kernel=RecordingKernel(), params={"directory": str(tmp_path)})
    assert os.path.basename(path) == "WING SECTION.msh"


def test_config_errors_precede_kernel(tmp_path):
    kernel = RecordingKernel()
    with pytest.raises(ConfigError):
        build_mesh("naca0012", kernel=kernel, params={"type": "o-type", "directory": str(tmp_path)})
    with pytest.raises(SchemaError):
        build_mesh("naca0012", kernel=kernel, params={"intercept": 0.9})
    assert kernel.commands == []


def test_write_geo_script(tmp_path):
    path = write_geo_script("naca0012", str(tmp_path / "out" / "c.geo"), label="c",
                            params={"radius": 5.0})
    text = open(path, encoding="utf-8").read()
    assert text.startswith("// C-type structured template")
    assert text.count("Plane Surface(") == 5
    assert text.count("Curve Loop(") == 5
    assert text.count("Transfinite Curve") == 15
    assert text.count("Transfinite Surface") == 5
    assert text.count("Recombine Surface") == 5
    assert 'Physical Curve("farfield", 1) = {4, 5, 6, 7, 8, 9, 10};' in text
    assert 'Physical Curve("wall", 2) = {1, 2, 3};' in text
    assert "Circle(10) = " in text
    assert "Mesh.SaveAll = 1;" in text
    assert "Mesh " not in text.replace("Mesh.", "")


def test_formats():
    assert parse_format(".MSH") is MeshFormat.MSH
    assert output_filename("wing", "cgns") == "wing.cgns"
    with pytest.raises(ConfigError):
        parse_format("obj")
