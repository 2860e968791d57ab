# -*- coding: utf-8 -*-
# yfoil/geometry/geo/geo_writer.py

"""
Project: yfoil
Date: 10/18/2026

Purpose:
--------
Serialise a `Geometry` record back to the native JSON format. Floats are written with
Python's shortest round-tripping repr, so a written file loads back bit-identical.
"""

import json
import os
import tempfile
from pathlib import Path

from ..errors import WriteError
from ..record import Geometry


def write_geometry(geometry: Geometry, path: str, indent: int = 2) -> str:
    """
    Atomic UTF-8 write of {"reference", "x_c", "y_c"}.

    Parameters
    ----------
    geometry : Geometry
        Record to serialise (not validated here).
    path : str
        Destination file; parent folders are created.
    indent : int
        JSON indentation (default: 2).

    Returns
    -------
    str
        The written path.

    Raises
    ------
    WriteError
        If the destination cannot be written or the record holds non-finite values.
    """
    p = Path(path)
    try:
        text = json.dumps(geometry.to_dict(), indent=indent, allow_nan=False)
    except ValueError as e:
        raise WriteError("Geometry holds values that JSON cannot represent: {}".format(e), {"path": str(p)}) from e

    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        tf = tempfile.NamedTemporaryFile("w", encoding="utf-8", dir=str(p.parent), delete=False)
        tmp_name = tf.name
        try:
            try:
                tf.write(text)
                tf.write("\n")
            finally:
                tf.close()
            os.replace(tmp_name, str(p))
        except OSError:
            # Leave no partial temp file behind
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
    except OSError as e:
        raise WriteError("Unable to write geometry file: {}".format(e.strerror or e), {"path": str(p)}) from e
    return str(p)
