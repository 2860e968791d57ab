# -*- coding: utf-8 -*-
# yfoil/geometry/record.py

"""
Project: yfoil
Date: 10/18/2026

Purpose
-------
The aerofoil geometry record: a normalised reference point plus index-paired x/c and y/c
surface coordinates. Records are built once per file read and are read-only afterwards.

Main Tasks
----------
    1. `Geometry` dataclass with read-only float64 coordinate arrays.
    2. `Geometry.from_dict` → type-check a parsed mapping (ParseError on mismatch).
    3. `Geometry.to_dict` → plain JSON-ready lists (exact float round trip).

Notes
-----
- Plausibility (lengths, bounds, ordering) is NOT checked here; see `geometry.validation`.
"""

import logging
import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from .errors import ParseError

logger = logging.getLogger(__name__)

FIELDS = ("reference", "x_c", "y_c")


def _readonly(values) -> np.ndarray:
    arr = np.array(values, dtype=np.float64).reshape(-1)
    arr.setflags(write=False)
    return arr


def _number_list(value: Any, field: str, source: Optional[str]) -> List[float]:
    """
    Return `value` as a list of floats, or raise ParseError if it is not a list of numbers.
    Booleans are rejected even though they subclass int; values must be finite doubles.
    """
    if not isinstance(value, (list, tuple)):
        raise ParseError(
            "Field '{}' must be an array of numbers, got {}".format(field, type(value).__name__),
            {"field": field, "path": source},
        )
    out: List[float] = []
    for i, v in enumerate(value):
        if isinstance(v, bool) or not isinstance(v, numbers.Real):
            raise ParseError(
                "Field '{}' must contain only numbers; entry {} is {}".format(field, i, type(v).__name__),
                {"field": field, "index": i, "path": source},
            )
        try:
            f = float(v)
        except OverflowError as e:
            raise ParseError(
                "Field '{}' entry {} is too large for a double".format(field, i),
                {"field": field, "index": i, "path": source},
            ) from e
        if not math.isfinite(f):
            raise ParseError(
                "Field '{}' entry {} is not finite ({})".format(field, i, f),
                {"field": field, "index": i, "path": source},
            )
        out.append(f)
    return out


@dataclass(frozen=True, eq=False)
class Geometry:
    """
    Aerofoil surface geometry.

    Attributes
    ----------
    reference : Tuple[float, float]
        Reference point (x/c, y/c).
    x_c : np.ndarray
        (N,) read-only float64 chordwise coordinates.
    y_c : np.ndarray
        (M,) read-only float64 normal coordinates, index-paired with `x_c`.
    name : str
        Label used for logging and plot titles (not serialised).
    """

    reference: Tuple[float, float]
    x_c: np.ndarray
    y_c: np.ndarray
    name: str = "aerofoil"

    def __post_init__(self):
        ref = tuple(float(v) for v in self.reference)
        object.__setattr__(self, "reference", ref)
        object.__setattr__(self, "x_c", _readonly(self.x_c))
        object.__setattr__(self, "y_c", _readonly(self.y_c))

    @property
    def n_points(self) -> int:
        return int(self.x_c.shape[0])

    @property
    def n_panels(self) -> int:
        return self.n_points - 1

    @classmethod
    def from_dict(cls,
                  data: Mapping[str, Any],
                  *,
                  name: str = "aerofoil",
                  source: Optional[str] = None) -> "Geometry":
        """
        Build a record from a parsed document.

        Parameters
        ----------
        data : Mapping[str, Any]
            Parsed document with keys `reference`, `x_c`, `y_c`.
        name : str
            Label for the record.
        source : Optional[str]
            Originating path, only used in error context.

        Raises
        ------
        ParseError
            Top level is not an object, a field is missing, or a field has the wrong type.
        """
        if not isinstance(data, Mapping):
            raise ParseError(
                "Expected an object with fields {}, got {}".format(", ".join(FIELDS), type(data).__name__),
                {"path": source},
            )

        missing = [k for k in FIELDS if k not in data]
        if missing:
            raise ParseError(
                "Missing required field(s): {}".format(", ".join(missing)),
                {"path": source},
            )

        extra = sorted(k for k in data.keys() if k not in FIELDS)
        if extra:
            logger.warning("[Geometry] Ignoring unknown field(s) in %s: %s", source or name, ", ".join(extra))

        reference = _number_list(data["reference"], "reference", source)
        if len(reference) != 2:
            raise ParseError(
                "Field 'reference' must hold exactly 2 numbers (x/c, y/c), got {}".format(len(reference)),
                {"field": "reference", "path": source},
            )

        x_c = _number_list(data["x_c"], "x_c", source)
        y_c = _number_list(data["y_c"], "y_c", source)
        return cls(reference=(reference[0], reference[1]), x_c=x_c, y_c=y_c, name=name)

    def to_dict(self) -> Dict[str, List[float]]:
        """Plain-list form matching the JSON input schema."""
        return {
            "reference": [self.reference[0], self.reference[1]],
            "x_c": self.x_c.tolist(),
            "y_c": self.y_c.tolist(),
        }
