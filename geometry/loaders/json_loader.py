# -*- coding: utf-8 -*-
# yfoil/geometry/loaders/json_loader.py

"""
Project: yfoil
Date: 10/18/2026

Purpose:
--------
Read aerofoil geometry from a JSON document of the form

    {"reference": [x, y], "x_c": [...], "y_c": [...]}

and return the decoded mapping. I/O failures and decoding failures are reported as two
distinct error tiers so callers can tell a missing file from a malformed one.

Notes:
------
   - This module does *no* validation of lengths/bounds, only reading and decoding.
   - `NaN`, `Infinity` and `-Infinity` literals are rejected (not valid JSON numbers).
"""

import json
from typing import Any

from ..errors import ParseError, ReadError


def _reject_constant(token: str) -> Any:
    raise ValueError("non-finite literal '{}' is not a valid number".format(token))


def read_text(filename: str) -> str:
    """
    Read the whole file as UTF-8 text.

    Raises
    ------
    ReadError
        If the file cannot be opened or read.
    ParseError
        If the bytes are not valid UTF-8.
    """
    try:
        with open(filename, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise ReadError("Unable to read geometry file: {}".format(e.strerror or e), {"path": filename}) from e

    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError("Geometry file is not valid UTF-8: {}".format(e), {"path": filename}) from e


def load_json(filename: str) -> Any:
    """
    Load and decode a JSON geometry document.

    Parameters
    ----------
    filename : str
        Path to the JSON file.

    Returns
    -------
    Any
        Decoded document (expected to be a dict; checked by `Geometry.from_dict`).

    Raises
    ------
    ReadError
        If the file cannot be read.
    ParseError
        If the contents are not valid JSON.
    """
    text = read_text(filename)
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise ParseError("Malformed JSON in geometry file: {}".format(e), {"path": filename}) from e
