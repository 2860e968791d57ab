# -*- coding: utf-8 -*-
# yfoil/geometry/loaders/__init__.py

"""
Project: yfoil
Date: 10/18/2026

Loaders Subpackage:
-------------------
File format-specific readers for aerofoil geometry. Each loader returns the decoded document
({"reference", "x_c", "y_c"}) and leaves record construction and validation to GeometryLoader.

Modules:
--------
- json_loader: Reader for the native JSON format; separates read failures from decode failures.

- dat_loader:  Parser for Selig-style `.dat` coordinate files (headers, comments, commas/whitespace).

Assumptions & Notes:
--------------------
- Coordinates are expected to be normalised by chord already; no rescaling is applied
- `.dat` files carry no reference point; the quarter chord (0.25, 0.0) is used
"""

__all__ = ["json_loader", "dat_loader"]
