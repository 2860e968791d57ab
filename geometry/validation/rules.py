# -*- coding: utf-8 -*-
# yfoil/geometry/validation/rules.py

"""
Project: yfoil
Date: 10/18/2026

Purpose:
--------
Plausibility rules for normalised aerofoil outlines. Each rule inspects a read-only
`Geometry` (plus precomputed extrema) and returns the error it would raise, or None.

Inputs/Contracts:
-----------------
- `g` : Geometry (immutable)
    `x_c`, `y_c` 1D float64 arrays.
- `cache` : dict from `precompute_extrema(g)`
    Keys: `max_x`, `min_x`, `max_y`, `min_y`. Only built once the count rules have passed.

Notes:
------
   - Rules never raise themselves; the orchestrator raises the first non-None result so the
     evaluation order lives in one place (see `registry.RULES_ORDER`).
"""

from typing import Dict, Optional

from ..errors import (
    BeginAndEndAtTrailingEdgeError,
    DimensionMismatchError,
    EmptyGeometryError,
    InvalidGeometryError,
    LeadingEdgeBoundsError,
    NoZeroCrossingError,
    ThicknessBoundsError,
    TooFewPanelsError,
    TooManyPanelsError,
    TrailingEdgeBoundsError,
)
from ..record import Geometry

# Point-count floor is exclusive: N <= MIN_PANELS fails (N - 1 panels must be >= MIN_PANELS)
MIN_PANELS = 100
MAX_PANELS = 250
TE_X_BOUNDS = (0.95, 1.05)
LE_X_BOUNDS = (-0.05, 0.05)
Y_ABS_MAX = 1.0
TE_ENDPOINT_X_MIN = 0.95

Finding = Optional[InvalidGeometryError]


def precompute_extrema(g: Geometry) -> Dict[str, float]:
    """One pass each for max/min of x_c and y_c."""
    return {
        "max_x": float(g.x_c.max()),
        "max_y": float(g.y_c.max()),
        "min_x": float(g.x_c.min()),
        "min_y": float(g.y_c.min()),
    }


def non_empty(g: Geometry, cache: Optional[Dict[str, float]]) -> Finding:
    n_x, n_y = g.x_c.shape[0], g.y_c.shape[0]
    # One-sided emptiness is left to dimension_match
    if n_x == 0 and n_y == 0:
        return EmptyGeometryError(n_x, n_y)
    return None


def dimension_match(g: Geometry, cache: Optional[Dict[str, float]]) -> Finding:
    n_x, n_y = g.x_c.shape[0], g.y_c.shape[0]
    if n_x != n_y:
        return DimensionMismatchError(n_x, n_y)
    return None


def panel_count_floor(g: Geometry, cache: Optional[Dict[str, float]]) -> Finding:
    if g.x_c.shape[0] <= MIN_PANELS:
        return TooFewPanelsError(MIN_PANELS)
    return None


def panel_count_ceiling(g: Geometry, cache: Optional[Dict[str, float]]) -> Finding:
    if g.x_c.shape[0] > MAX_PANELS + 1:
        return TooManyPanelsError(MAX_PANELS)
    return None


def trailing_edge_x(g: Geometry, cache: Optional[Dict[str, float]]) -> Finding:
    lo, hi = TE_X_BOUNDS
    # Written as range membership so a NaN extremum fails
    if not lo <= cache["max_x"] <= hi:
        return TrailingEdgeBoundsError()
    return None


def leading_edge_x(g: Geometry, cache: Optional[Dict[str, float]]) -> Finding:
    lo, hi = LE_X_BOUNDS
    if not lo <= cache["min_x"] <= hi:
        return LeadingEdgeBoundsError()
    return None


def y_magnitude(g: Geometry, cache: Optional[Dict[str, float]]) -> Finding:
    if not (-Y_ABS_MAX <= cache["min_y"] and cache["max_y"] <= Y_ABS_MAX):
        return ThicknessBoundsError()
    return None


def y_straddles_zero(g: Geometry, cache: Optional[Dict[str, float]]) -> Finding:
    if not cache["min_y"] <= 0.0 <= cache["max_y"]:
        return NoZeroCrossingError()
    return None


def endpoints_at_te(g: Geometry, cache: Optional[Dict[str, float]]) -> Finding:
    # Surface trace must start and end near the trailing edge
    if not (g.x_c[0] >= TE_ENDPOINT_X_MIN and g.x_c[-1] >= TE_ENDPOINT_X_MIN):
        return BeginAndEndAtTrailingEdgeError()
    return None
