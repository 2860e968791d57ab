# -*- coding: utf-8 -*-
# yfoil/geometry/__init__.py

"""
Project: yfoil
Date: 10/18/2026

Modules:
--------
- record:     Geometry record (reference point, x/c and y/c arrays), read-only after construction.

- errors:     Typed exceptions: ReadError, ParseError, WriteError and the InvalidGeometryError
              family (one subclass per validation rule, fixed messages).

- loaders:    Format-specific readers (.json native, .dat coordinate tables).

- geo:        geo_loader (read → parse → validate), geo_writer (JSON export), dispatcher.

- validation: Ordered plausibility rules for normalised aerofoil outlines:
                * non-empty arrays, matching lengths, 100..250 panels,
                * max x/c near 1, min x/c near 0, |y/c| <= 1, y/c either side of zero,
                * first and last points at the trailing edge.

- api:        Minimal public facade used by the CLI.
                * load_geometry(filename) → validated Geometry
                * render_geometry(geometry, save_path="aerofoil_geometry.png", show=False)

            Usage:
                from geometry.api import load_geometry, render_geometry
"""

__version__ = "0.1.0"

__all__ = ["record", "errors", "loaders", "geo", "validation", "api"]
