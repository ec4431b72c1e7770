# -*- coding: utf-8 -*-
# Foilmesh/mesh/config.py

"""
Project: Foilmesh
Date: 9/26/2026

Purpose
-------
Assemble a mesh-request configuration from sectioned defaults and user overrides, with
key normalization and per-key validation that raises SchemaError naming the bad key.

Main Tasks
----------
    1. Keep curated defaults in named sections (contour, boundary, transfinite, output).
    2. Accept nested ({"boundary": {"radius": 2}}) or flat aliased ({"radius": 2}) params,
       normalize keys to lower case and reject unknown keys.
    3. Validate enums and numeric ranges after merging.
    4. Convert the result into Boundary and TransfiniteSpec objects for the builder.

Notes
-----
- The intercept domain is (0, 0.5]; violations raise SchemaError (a ConfigError).
- `load_config` reads the same structure from a JSON file.
"""

import copy
import json
import math
from typing import Any, Dict, Mapping, Optional

from geometry.errors import ConfigError, SchemaError
from .core.formats import parse_format, parse_mesh_type
from .core.topology import Boundary
from .core.transfinite import CurveRole, Distribution, TransfiniteSpec

__all__ = [
    "build_config",
    "load_config",
    "normalize_params",
    "validate",
    "boundary_from_config",
    "transfinite_from_config",
    "ALIASES",
    "RANGES",
]


# -----------------------------
_DEFAULTS_SECTIONS = [
    ("contour", {
        "intercept": 0.175,
        "points": None,
        "normalize": True,
    }),
    ("boundary", {
        "type": "c-type",
        "radius": 1.0,
        "plane": 0.0,
        "accuracy": 1.0,
    }),
    ("transfinite", {
        "contour": {"accuracy": 0.1, "distribution": "bump", "stretch": 1.0},
        "inlet": {"accuracy": 0.1, "distribution": "progression", "stretch": 1.0},
        "wake": {"accuracy": 0.1, "distribution": "progression", "stretch": 1.0},
        "walls": {"accuracy": 0.1, "distribution": "progression", "stretch": 1.0},
    }),
    ("output", {
        "format": "msh",
        "dimension": 2,
        "directory": ".",
        "timeout_s": None,
        "verbose": False,
    }),
]

# Flat user keys → (section, key).
ALIASES = {
    "intercept": ("contour", "intercept"),
    "points": ("contour", "points"),
    "normalize": ("contour", "normalize"),
    "type": ("boundary", "type"),
    "mesh_type": ("boundary", "type"),
    "radius": ("boundary", "radius"),
    "plane": ("boundary", "plane"),
    "accuracy": ("boundary", "accuracy"),
    "format": ("output", "format"),
    "dimension": ("output", "dimension"),
    "dim": ("output", "dimension"),
    "directory": ("output", "directory"),
    "timeout_s": ("output", "timeout_s"),
    "timeout": ("output", "timeout_s"),
    "verbose": ("output", "verbose"),
}

# (section, key) -> (min, max, min_inclusive, max_inclusive)
RANGES = {
    ("contour", "intercept"): (0.0, 0.5, False, True),
    ("contour", "points"): (4, 10 ** 7, True, True),
    ("boundary", "radius"): (0.0, float("inf"), False, True),
    ("boundary", "plane"): (float("-inf"), float("inf"), False, False),
    ("boundary", "accuracy"): (0.0, float("inf"), False, True),
    ("output", "dimension"): (1, 3, True, True),
    ("output", "timeout_s"): (0.0, float("inf"), False, True),
}


def _defaults() -> Dict[str, Dict[str, Any]]:
    return {name: copy.deepcopy(block) for name, block in _DEFAULTS_SECTIONS}


# ---------- Normalization ----------
def normalize_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """
    Turn nested or flat user params into {section: {key: value}} with lower-case keys.

    Raises
    ------
    SchemaError
        On unknown sections or keys.
    """
    out: Dict[str, Dict[str, Any]] = {}
    if not params:
        return out
    sections = dict(_DEFAULTS_SECTIONS)
    for raw_key, value in params.items():
        key = str(raw_key).strip().lower()
        if key in sections and isinstance(value, Mapping):
            block = out.setdefault(key, {})
            for sub_key, sub_val in value.items():
                sk = str(sub_key).strip().lower()
                if sk not in sections[key]:
                    raise SchemaError("Unknown configuration key.", {"key": "{}.{}".format(key, sk)})
                if key == "transfinite":
                    sub_val = _normalize_spec(sk, sub_val)
                block[sk] = sub_val
        elif key in ALIASES:
            section, name = ALIASES[key]
            out.setdefault(section, {})[name] = value
        else:
            raise SchemaError("Unknown configuration key.", {"key": raw_key})
    return out


def _normalize_spec(role: str, value: Any) -> Dict[str, Any]:
    if not isinstance(value, Mapping):
        raise SchemaError("Transfinite entries must be mappings.", {"key": "transfinite." + role, "value": value})
    spec = {}
    for k, v in value.items():
        kk = str(k).strip().lower()
        if kk not in ("accuracy", "distribution", "stretch"):
            raise SchemaError("Unknown transfinite key.", {"key": "transfinite.{}.{}".format(role, kk)})
        spec[kk] = v
    return spec


# ---------- Validation ----------
def _check_range(section: str, key: str, val: Any) -> None:
    if (section, key) not in RANGES or val is None:
        return
    lo, hi, lo_inc, hi_inc = RANGES[(section, key)]
    try:
        fval = float(val)
    except (TypeError, ValueError):
        raise SchemaError("Non-numeric value.", {"key": "{}.{}".format(section, key), "value": val})
    if not math.isfinite(fval):
        raise SchemaError("Non-finite value.", {"key": "{}.{}".format(section, key), "value": val})
    if (section, key) == ("contour", "points") and (isinstance(val, bool) or fval != int(fval)):
        raise SchemaError("Point target must be an integer.", {"key": "contour.points", "value": val})
    ok_lo = fval >= lo if lo_inc else fval > lo
    ok_hi = fval <= hi if hi_inc else fval < hi
    if not (ok_lo and ok_hi):
        raise SchemaError("Out-of-range value.", {"key": "{}.{}".format(section, key), "value": fval,
                                                  "min": lo, "max": hi})


def validate(cfg: Mapping[str, Mapping[str, Any]]) -> None:
    """
    Validate a merged configuration.

    Raises
    ------
    SchemaError
        On any bad enum, non-numeric ranged value, or out-of-range value.
    """
    for section, block in cfg.items():
        for key, val in block.items():
            _check_range(section, key, val)

    try:
        parse_mesh_type(cfg["boundary"]["type"])
        parse_format(cfg["output"]["format"])
    except SchemaError:
        raise
    except ConfigError as e:
        raise SchemaError(str(e), getattr(e, "context", None)) from e

    allowed = {d.value for d in Distribution}
    for role, spec in cfg["transfinite"].items():
        dist = str(spec.get("distribution", "progression")).lower()
        if dist not in allowed:
            raise SchemaError("Unknown transfinite distribution.",
                              {"key": "transfinite.{}.distribution".format(role), "value": dist,
                               "allowed": sorted(allowed)})
        for k in ("accuracy", "stretch"):
            try:
                fval = float(spec.get(k, 0.0))
            except (TypeError, ValueError):
                raise SchemaError("Non-numeric value.", {"key": "transfinite.{}.{}".format(role, k)})
            if k == "accuracy" and fval < 0:
                raise SchemaError("Out-of-range value.",
                                  {"key": "transfinite.{}.accuracy".format(role), "value": fval, "min": 0.0})


# ---------- Public API ----------
def build_config(params: Optional[Mapping[str, Any]] = None) -> Dict[str, Dict[str, Any]]:
    """
    Merge normalized user params over the sectioned defaults and validate the result.

    Returns
    -------
    dict
        {section: {key: value}}; transfinite entries are merged per role.
    """
    cfg = _defaults()
    for section, block in normalize_params(params).items():
        if section == "transfinite":
            for role, spec in block.items():
                cfg["transfinite"][role].update(spec)
        else:
            cfg[section].update(block)
    validate(cfg)
    return cfg


def load_config(path: str) -> Dict[str, Dict[str, Any]]:
    """
    Read params from a JSON file and pass them through `build_config`.

    Raises
    ------
    SchemaError
        If the file is unreadable, not JSON, not an object, or fails validation.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            params = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SchemaError("Cannot read configuration: {}".format(e), {"path": path}) from e
    if not isinstance(params, dict):
        raise SchemaError("Configuration root must be an object.", {"path": path})
    return build_config(params)


def boundary_from_config(cfg: Mapping[str, Mapping[str, Any]]) -> Boundary:
    b = cfg["boundary"]
    return Boundary(radius=float(b["radius"]), plane=float(b["plane"]), accuracy=float(b["accuracy"]))


def transfinite_from_config(cfg: Mapping[str, Mapping[str, Any]]) -> Dict[CurveRole, TransfiniteSpec]:
    return {CurveRole(role): TransfiniteSpec.from_dict(role, spec)
            for role, spec in cfg["transfinite"].items()}
