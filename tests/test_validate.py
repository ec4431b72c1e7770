# -*- coding: utf-8 -*-
# Foilmesh/tests/test_validate.py

from types import SimpleNamespace

import numpy as np
import pytest

from geometry.errors import InputError
from mesh.core.errors import KernelError
from mesh.tools.validate import check_physical_groups

meshio = pytest.importorskip("meshio")


@pytest.fixture
def msh_file(tmp_path):
    path = tmp_path / "domain.msh"
    path.write_text("$MeshFormat\n4.1 0 8\n$EndMeshFormat\n", encoding="utf-8")
    return str(path)


def _fake_read(field_data):
    return lambda path: SimpleNamespace(field_data=field_data)


def test_groups_present(monkeypatch, msh_file):
    monkeypatch.setattr(meshio, "read", _fake_read({
        "farfield": np.array([1, 1]),
        "wall": np.array([2, 1]),
    }))
    assert check_physical_groups(msh_file) == {"farfield": 1, "wall": 1}


def test_missing_group(monkeypatch, msh_file):
    monkeypatch.setattr(meshio, "read", _fake_read({"farfield": np.array([1, 1])}))
    with pytest.raises(KernelError) as info:
        check_physical_groups(msh_file)
    assert info.value.context["missing"] == ["wall"]


def test_dimension_mismatch(monkeypatch, msh_file):
    monkeypatch.setattr(meshio, "read", _fake_read({
        "farfield": np.array([1, 1]),
        "wall": np.array([2, 2]),
    }))
    with pytest.raises(KernelError):
        check_physical_groups(msh_file)


def test_missing_file(tmp_path):
    with pytest.raises(InputError):
        check_physical_groups(str(tmp_path / "nope.msh"))


def test_unreadable_file(monkeypatch, msh_file):
    def broken(path):
        raise ValueError("bad header")

    monkeypatch.setattr(meshio, "read", broken)
    with pytest.raises(InputError):
        check_physical_groups(msh_file)
