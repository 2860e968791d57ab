# -*- coding: utf-8 -*-
# yfoil/geometry/geo/__init__.py

"""
Project: yfoil
Date: 10/18/2026

Geo Subpackage:
---------------
File-level geometry handling: loading (read → parse → validate) and writing.

Modules:
--------
- geo_loader: GeometryLoader and read_geometry_from_file; returns validated Geometry records.

- geo_writer: write_geometry; serialises a record to the native JSON format.

- dispatcher: Extension → loader routing (.json native, .dat coordinate tables).
"""

__all__ = ["geo_loader", "geo_writer", "dispatcher"]
