# -*- coding: utf-8 -*-
# yfoil/geometry/api.py

"""
Project: yfoil
Date: 10/18/2026

Purpose
-------
Thin, import-only façade for yfoil geometry workflows: (1) load and validate an aerofoil
geometry file, (2) render it, (3) export it back to JSON.

Notes
-----
- Detailed behaviour lives in `geo_loader`, `validation` and `post.plot_geo`.
"""

from typing import Optional

from .geo.geo_loader import read_geometry_from_file
from .geo.geo_writer import write_geometry
from .record import Geometry

__all__ = [
    "load_geometry",
    "render_geometry",
    "export_geometry",
]


def load_geometry(filename: str) -> Geometry:
    """
    Read, parse and validate an aerofoil geometry file.

    Raises
    ------
    ReadError, ParseError, InvalidGeometryError
        See `geometry.errors`.
    """
    return read_geometry_from_file(filename)


def render_geometry(
    geometry: Geometry,
    *,
    save_path: Optional[str] = "aerofoil_geometry.png",
    show: bool = False,
) -> Optional[str]:
    """
    Plot the geometry's x/c, y/c points and save the figure.

    Returns
    -------
    Optional[str]
        Path of the written image, or None if `save_path` is None.
    """
    from post.plot_geo import plot_aerofoil
    return plot_aerofoil(
        geometry.x_c,
        geometry.y_c,
        name=geometry.name,
        reference=geometry.reference,
        show=show,
        save_path=save_path,
    )


def export_geometry(geometry: Geometry, path: str) -> str:
    """Write `geometry` as native JSON; returns the path."""
    return write_geometry(geometry, path)
