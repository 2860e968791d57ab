# -*- coding: utf-8 -*-
# yfoil/geometry/validation/registry.py

"""
Project: yfoil
Date: 10/18/2026

Purpose:
--------
Central registry of geometry validation rules. Each rule is defined once here with its
metadata, providing a single source of truth for execution order.

Main Tasks:
-----------
   - Bind rule functions from `rules.py` into `RuleSpec` objects.
   - Populate `REGISTRY` (id → spec) and `RULES_ORDER` (deterministic ordering).

Notes:
------
   - Duplicates are disallowed: adding a rule with an existing id raises ValueError.
   - `uses_extrema` marks rules that read the min/max cache; the cache is only built once
     the count-based rules have passed, so it is never computed on empty arrays.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List

from . import rules as _r


@dataclass(frozen=True)
class RuleSpec:
    id: str
    fn: Callable  # signature: fn(geometry, cache_dict) -> Optional[InvalidGeometryError]
    uses_extrema: bool = False


REGISTRY: Dict[str, RuleSpec] = {}


def _add(spec: RuleSpec) -> None:
    if spec.id in REGISTRY:
        raise ValueError(f"Duplicate rule id in registry: {spec.id}")
    REGISTRY[spec.id] = spec


# Count/shape rules
_add(RuleSpec("non_empty",           _r.non_empty))
_add(RuleSpec("dimension_match",     _r.dimension_match))
_add(RuleSpec("panel_count_floor",   _r.panel_count_floor))
_add(RuleSpec("panel_count_ceiling", _r.panel_count_ceiling))

# Bounds rules (need extrema)
_add(RuleSpec("trailing_edge_x",     _r.trailing_edge_x,  uses_extrema=True))
_add(RuleSpec("leading_edge_x",      _r.leading_edge_x,   uses_extrema=True))
_add(RuleSpec("y_magnitude",         _r.y_magnitude,      uses_extrema=True))
_add(RuleSpec("y_straddles_zero",    _r.y_straddles_zero, uses_extrema=True))

# Ordering rule
_add(RuleSpec("endpoints_at_te",     _r.endpoints_at_te))


# ---- Deterministic execution order ----
# Emptiness first; counts; x bounds; y bounds; endpoint ordering last.
RULES_ORDER: List[str] = [
    "non_empty",
    "dimension_match",
    "panel_count_floor",
    "panel_count_ceiling",
    "trailing_edge_x",
    "leading_edge_x",
    "y_magnitude",
    "y_straddles_zero",
    "endpoints_at_te",
]
