# -*- coding: utf-8 -*-
# yfoil/geometry/geo/dispatcher.py

"""
Project: yfoil
Date: 10/18/2026

Purpose:
--------
Route a geometry file to its reader by extension. JSON is the native format, so anything
that is not a recognised coordinate-table extension is decoded as JSON.
"""

import os
from typing import Callable

from ..loaders.dat_loader import load_dat
from ..loaders.json_loader import load_json

_EXTENSION_MAP = {
    ".json": load_json,
    ".dat": load_dat,
}


def get_loader_function(filename: str) -> Callable:
    """
    Route a filename to the appropriate loader function.

    Parameters
    ----------
    filename : str
        Path (or bare extension including dot, e.g. '.dat').

    Returns
    -------
    Callable
        Loader taking the filename and returning the decoded document.
    """
    ext = os.path.splitext(filename)[-1].lower() or filename.lower()
    return _EXTENSION_MAP.get(ext, load_json)
