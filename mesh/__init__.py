# -*- coding: utf-8 -*-
# Foilmesh/mesh/__init__.py

"""
Project: Foilmesh
Date: 9/22/2026 (Updated: 9/27/2026)

Modules:
--------
- core:   kernel interface, gmsh/recording kernels, session, C-type topology template.
- tools:  post-write mesh validation.
- config: sectioned defaults and validation for mesh requests.
- api:    high-level mesh building pipeline.
"""

__all__ = ["core", "tools", "config", "api"]
