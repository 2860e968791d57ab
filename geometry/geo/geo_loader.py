# -*- coding: utf-8 -*-
# yfoil/geometry/geo/geo_loader.py

"""
Project: yfoil
Date: 10/18/2026

Purpose:
--------
Loader that reads an aerofoil geometry file (.json natively, .dat coordinate tables),
builds the `Geometry` record, validates it, and exposes plotting for the loaded record.

Pipeline:
---------
read (ReadError) → decode (ParseError) → Geometry.from_dict (ParseError) → validate_geometry
(InvalidGeometryError, passed through unchanged) → Geometry
"""

import os
import logging
from typing import Optional

from ..record import Geometry
from ..validation import validate_geometry
from .dispatcher import get_loader_function

logger = logging.getLogger(__name__)


class GeometryLoader:
    """
    Unified loader for aerofoil geometry files.

    Parameters
    ----------
    filename : str
        Path to the geometry file.

    Attributes
    ----------
    filename : str
        Input filename provided by the user.
    name : str
        Basename (without extension).
    filetype : str
        Lowercased extension (e.g., ".json").
    geometry : Optional[Geometry]
        Validated record after load().
    """

    def __init__(self, filename: str):
        self.filename = str(filename)
        self.name = os.path.splitext(os.path.basename(self.filename))[0] or "aerofoil"
        self.filetype = os.path.splitext(self.filename)[-1].lower()
        self.geometry: Optional[Geometry] = None

    # --------------------
    # Core API
    # --------------------
    def load(self) -> Geometry:
        """
        Read, parse and validate the file; store and return the record.

        Raises
        ------
        ReadError
            The file cannot be opened or read.
        ParseError
            The contents are not a geometry document.
        InvalidGeometryError
            The first plausibility rule the geometry violates.
        """
        loader = get_loader_function(self.filename)
        doc = loader(self.filename)
        geometry = Geometry.from_dict(doc, name=self.name, source=self.filename)

        validate_geometry(geometry)

        self.geometry = geometry
        logger.info(
            "[GeometryLoader] Loaded '%s' (%s) with %d points (%d panels).",
            self.name, self.filetype or "json", geometry.n_points, geometry.n_panels
        )
        return geometry

    def plot(self, show: bool = False, save_path: Optional[str] = None, ax=None) -> None:
        """
        Plot the loaded geometry (lazy import to avoid hard matplotlib dependency).
        """
        if self.geometry is None:
            raise ValueError("[GeometryLoader] No geometry loaded. Call `.load()` first.")
        from post.plot_geo import plot_aerofoil
        plot_aerofoil(
            self.geometry.x_c,
            self.geometry.y_c,
            name=self.name,
            reference=self.geometry.reference,
            show=show,
            save_path=save_path,
            ax=ax,
        )
        if save_path:
            logger.info("[GeometryLoader] Plot saved to: %s", save_path)


def read_geometry_from_file(filename: str) -> Geometry:
    """Load and validate `filename`, returning the Geometry record."""
    return GeometryLoader(filename).load()
