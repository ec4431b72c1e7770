# -*- coding: utf-8 -*-
# Foilmesh/mesh/tools/__init__.py

"""
Project: Foilmesh
Date: 9/27/2026

Tools Subpackage:
-----------------
Checks run against mesh files after the kernel has written them.

Modules:
--------
- validate: physical-group presence and dimension checks via meshio.
"""

__all__ = ["validate"]
