# -*- coding: utf-8 -*-
# yfoil/geometry/loaders/dat_loader.py

"""
Project: yfoil
Date: 10/18/2026

Purpose:
--------
Read Selig-style `.dat` coordinate files and return them in the same document shape as the
JSON loader, so both formats feed `Geometry.from_dict` identically.

Main Features:
--------------
   1) Handles a name/header line, blank lines, and mixed whitespace.
   2) Supports inline/full-line comments starting with '#' or '//' .
   3) Accepts comma- or whitespace-separated columns.
   4) Fills `reference` with the quarter-chord point, since `.dat` files carry none.

Notes:
------
   - Point order is preserved as written (Selig files run TE → upper → LE → lower → TE).
   - Lines whose first token is not numeric are treated as headers and skipped.
"""

from typing import Dict, List, Sequence, Tuple

import numpy as np

from ..errors import ParseError
from .json_loader import read_text

DEFAULT_REFERENCE: Tuple[float, float] = (0.25, 0.0)


def _clean_lines(text: str) -> List[str]:
    cleaned: List[str] = []
    for line in text.splitlines():
        # Strip both comment styles
        line = line.split("#", 1)[0]
        line = line.split("//", 1)[0]
        line = line.strip()
        if not line:
            continue
        # Numeric rows start with a digit, sign, or dot
        if line[0] in "0123456789-+.":
            cleaned.append(line)
    return cleaned


def load_dat(filename: str, reference: Sequence[float] = DEFAULT_REFERENCE) -> Dict[str, list]:
    """
    Load a 2D aerofoil from a `.dat`-like file.

    Parameters
    ----------
    filename : str
        Path to the `.dat` file.
    reference : Sequence[float], optional
        Reference point to attach to the geometry (default: quarter chord).

    Returns
    -------
    Dict[str, list]
        {"reference": [x, y], "x_c": [...], "y_c": [...]}

    Raises
    ------
    ReadError
        If the file cannot be read.
    ParseError
        If no coordinate rows are found or a row is not numeric.
    """
    text = read_text(filename)
    cleaned = _clean_lines(text)
    if not cleaned:
        raise ParseError("No numeric coordinate rows found in .dat file.", {"path": filename})

    data = []
    for lineno, line in enumerate(cleaned, start=1):
        parts = line.replace(",", " ").split()
        if len(parts) < 2:
            raise ParseError(
                "Expected two columns (x, y) in coordinate row {}: {!r}".format(lineno, line),
                {"path": filename},
            )
        try:
            data.append((float(parts[0]), float(parts[1])))
        except ValueError as e:
            raise ParseError(
                "Non-numeric value in coordinate row {}: {}".format(lineno, e),
                {"path": filename},
            ) from e

    pts = np.asarray(data, dtype=np.float64)
    if not np.isfinite(pts).all():
        bad = np.argwhere(~np.isfinite(pts))
        raise ParseError(
            "Non-finite values in .dat file at indices {}".format(bad.tolist()),
            {"path": filename},
        )

    return {
        "reference": [float(reference[0]), float(reference[1])],
        "x_c": pts[:, 0].tolist(),
        "y_c": pts[:, 1].tolist(),
    }
