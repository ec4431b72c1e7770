# -*- coding: utf-8 -*-
# Foilmesh/tests/test_library.py

import json

import numpy as np
import pytest

from geometry.api import load_contour
from geometry.errors import InputError
from geometry.geo.library import ContourLibrary
from geometry.loaders.naca_loader import generate_naca


@pytest.fixture
def library():
    lib = ContourLibrary()
    lib.add("naca 0012", generate_naca("naca0012", density=30).points)
    lib.add("NACA 2412", generate_naca("naca2412", density=30).points)
    return lib


def test_lookup_is_case_insensitive(library):
    assert len(library) == 2
    assert "Naca   0012" in library
    assert library.names() == ["NACA 0012", "NACA 2412"]
    assert list(library) == library.names()


def test_get_returns_copy(library):
    a = library.get("naca 0012")
    a[:] = 0.0
    assert not np.allclose(library.get("naca 0012"), 0.0)


def test_unknown_name(library):
    with pytest.raises(InputError):
        library.get("clark y")
    with pytest.raises(InputError):
        library.add("   ", np.zeros((4, 2)))


def test_write_and_reload(library, tmp_path):
    path = library.write(str(tmp_path / "lib" / "foils.json"))
    records = json.loads(open(path, encoding="utf-8").read())
    assert [r["name"] for r in records] == ["NACA 0012", "NACA 2412"]

    again = ContourLibrary.from_file(path)
    assert again.names() == library.names()
    assert np.allclose(again.get("NACA 2412"), library.get("NACA 2412"))


def test_failed_load_merges_nothing(library, tmp_path):
    path = tmp_path / "bad.json"
    good = {"name": "x", "coordinates": [{"x": 1, "y": 0}, {"x": 0, "y": 0.1}, {"x": 0, "y": -0.1}]}
    path.write_text(json.dumps([good, {"name": "y"}]), encoding="utf-8")
    with pytest.raises(InputError):
        library.load(str(path))
    assert "X" not in library


def test_import_directory_skips_bad_files(tmp_path):
    (tmp_path / "a.dat").write_text("FOIL A\n1 0\n0 0.1\n0 -0.1\n", encoding="utf-8")
    (tmp_path / "b.dat").write_text("no numbers here\n", encoding="utf-8")
    lib = ContourLibrary()
    assert lib.import_directory(str(tmp_path)) == 1
    assert lib.names() == ["FOIL A"]


def test_load_contour_prefers_library(library):
    geo = load_contour("naca 2412", library=library, normalize=False)
    assert geo.name == "NACA 2412"
    assert np.array_equal(geo.get_closed_points(), library.get("NACA 2412"))
