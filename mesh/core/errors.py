# -*- coding: utf-8 -*-
# Foilmesh/mesh/core/errors.py

"""
Project: Foilmesh
Date: 9/22/2026

Purpose
-------
Kernel-session exceptions. They derive from geometry.errors.FoilError so callers can catch
every package failure with one handler, and carry the failing stage in their context.
"""

from geometry.errors import FoilError

__all__ = ["KernelError", "KernelBusyError", "KernelTimeoutError"]


class KernelError(FoilError):
    """
    The meshing kernel rejected a command or a session was driven out of order
    (e.g. meshing before synchronize, a loop over an unknown curve).
    """


class KernelBusyError(KernelError):
    """Another mesh request holds the kernel and the acquire timeout elapsed."""


class KernelTimeoutError(KernelError):
    """The session deadline passed between two pipeline stages."""
