# -*- coding: utf-8 -*-
# yfoil/geometry/validation/__init__.py

"""
Project: yfoil
Date: 10/18/2026

Purpose:
--------
Public API for validating an aerofoil geometry record against the ordered plausibility rules.

Main Tasks
----------
   - Walk `RULES_ORDER`, evaluating each rule against the record and a shared extrema cache.
   - Raise the first failing rule's InvalidGeometryError; later rules are not evaluated.
   - Log the extrema at DEBUG level (diagnostic only).
"""

import logging
from typing import Dict, Optional

from ..record import Geometry
from .registry import REGISTRY, RULES_ORDER
from .rules import precompute_extrema

logger = logging.getLogger(__name__)

__all__ = ["validate_geometry", "REGISTRY", "RULES_ORDER"]


def validate_geometry(geometry: Geometry) -> None:
    """
    Check that `geometry` is a plausible, normalised aerofoil outline.

    Parameters
    ----------
    geometry : Geometry
        Record to check; it is read, never modified.

    Raises
    ------
    InvalidGeometryError
        The subclass matching the first rule (in RULES_ORDER) that fails.
    """
    cache: Optional[Dict[str, float]] = None
    for rid in RULES_ORDER:
        spec = REGISTRY[rid]
        if spec.uses_extrema and cache is None:
            cache = precompute_extrema(geometry)
            logger.debug(
                "[validation] %s: x/c in [%g, %g], y/c in [%g, %g]",
                geometry.name, cache["min_x"], cache["max_x"], cache["min_y"], cache["max_y"],
            )
        err = spec.fn(geometry, cache)
        if err is not None:
            logger.debug("[validation] %s failed rule '%s'", geometry.name, rid)
            raise err

    logger.debug("[validation] %s passed %d rules", geometry.name, len(RULES_ORDER))
