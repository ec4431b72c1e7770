# -*- coding: utf-8 -*-
# Foilmesh/mesh/core/transfinite.py

"""
Project: Foilmesh
Date: 9/23/2026

Purpose
-------
Transfinite (structured) node placement along curves. A TransfiniteSpec says how many
nodes a curve receives and how they cluster; derived variants flip direction, scale the
stretch for the outer block sector, or switch to a damped bump.

Main Tasks
----------
    1. Define CurveRole, Sector and Distribution enumerations.
    2. Provide TransfiniteSpec with point count, reversed/stretched/bump derivations and
       the (count, kernel type, coefficient) triple the kernel consumes.

Notes
-----
- The sign of `stretch` encodes direction; the kernel receives it unchanged.
- `points = int(1 / accuracy)` for positive accuracy, never below 1.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Tuple

from geometry.errors import ConfigError

__all__ = [
    "CurveRole",
    "Sector",
    "Distribution",
    "TransfiniteSpec",
    "OUTER_SECTOR_FACTOR",
    "BUMP_DAMPING",
    "default_specs",
]

OUTER_SECTOR_FACTOR = 20.0
BUMP_DAMPING = 4.75


class CurveRole(str, Enum):
    CONTOUR = "contour"
    INLET = "inlet"
    WAKE = "wake"
    WALLS = "walls"


class Sector(str, Enum):
    INNER = "inner"
    OUTER = "outer"


class Distribution(str, Enum):
    UNIFORM = "uniform"
    PROGRESSION = "progression"
    BUMP = "bump"
    BETA = "beta"

    @property
    def kernel_name(self) -> str:
        return {
            Distribution.UNIFORM: "Progression",
            Distribution.PROGRESSION: "Progression",
            Distribution.BUMP: "Bump",
            Distribution.BETA: "Beta",
        }[self]


@dataclass(frozen=True)
class TransfiniteSpec:
    """
    Node distribution along one class of curves.

    Parameters
    ----------
    role : CurveRole
        Which curves this distribution governs.
    accuracy : float
        Target node spacing as a fraction of the curve; `points = int(1/accuracy)`.
    distribution : Distribution
        Clustering law.
    stretch : float
        Law coefficient; its sign sets the direction.
    """
    role: CurveRole
    accuracy: float = 0.1
    distribution: Distribution = Distribution.PROGRESSION
    stretch: float = 1.0

    def __post_init__(self):
        if self.accuracy < 0:
            raise ConfigError("Transfinite accuracy must be >= 0.",
                              {"role": self.role.value, "accuracy": self.accuracy})

    @property
    def points(self) -> int:
        if self.accuracy > 0:
            return max(1, int(1.0 / self.accuracy))
        return 1

    def reversed(self) -> "TransfiniteSpec":
        return replace(self, stretch=-self.stretch)

    def stretched(self, sector: Sector, reversed: bool = False) -> "TransfiniteSpec":
        """Inner sector keeps the stretch; outer sector scales it by OUTER_SECTOR_FACTOR."""
        factor = OUTER_SECTOR_FACTOR if Sector(sector) is Sector.OUTER else 1.0
        sign = -1.0 if reversed else 1.0
        return replace(self, stretch=sign * factor * self.stretch)

    def bump(self, reversed: bool = False) -> "TransfiniteSpec":
        """Bump clustering with the stretch damped by BUMP_DAMPING."""
        sign = -1.0 if reversed else 1.0
        return replace(self, distribution=Distribution.BUMP,
                       stretch=sign * self.stretch / BUMP_DAMPING)

    def kernel_args(self) -> Tuple[int, str, float]:
        """(node count, kernel mesh type, coefficient)."""
        if self.distribution is Distribution.UNIFORM:
            return self.points, self.distribution.kernel_name, 1.0
        return self.points, self.distribution.kernel_name, float(self.stretch)

    @classmethod
    def from_dict(cls, role, params: Dict[str, Any]) -> "TransfiniteSpec":
        """Build from {"accuracy", "distribution", "stretch"} (all optional)."""
        try:
            dist = Distribution(str(params.get("distribution", "progression")).lower())
        except ValueError:
            raise ConfigError("Unknown transfinite distribution.",
                              {"role": str(role), "distribution": params.get("distribution")})
        return cls(
            role=CurveRole(role),
            accuracy=float(params.get("accuracy", 0.1)),
            distribution=dist,
            stretch=float(params.get("stretch", 1.0)),
        )


def default_specs() -> Dict[CurveRole, TransfiniteSpec]:
    """contour: bump; inlet/wake/walls: progression. All at accuracy 0.1, stretch 1."""
    return {
        CurveRole.CONTOUR: TransfiniteSpec(CurveRole.CONTOUR, 0.1, Distribution.BUMP, 1.0),
        CurveRole.INLET: TransfiniteSpec(CurveRole.INLET, 0.1, Distribution.PROGRESSION, 1.0),
        CurveRole.WAKE: TransfiniteSpec(CurveRole.WAKE, 0.1, Distribution.PROGRESSION, 1.0),
        CurveRole.WALLS: TransfiniteSpec(CurveRole.WALLS, 0.1, Distribution.PROGRESSION, 1.0),
    }
