# -*- coding: utf-8 -*-
# yfoil/geometry/errors.py

"""
Project: yfoil
Date: 10/18/2026

Purpose
-------
Typed exceptions for loading and validating aerofoil geometry. Three tiers are exposed to
callers: the file could not be read, its contents could not be parsed into a geometry record,
or the parsed geometry is not a plausible normalised aerofoil.

Main Tasks
----------
    1. Define GeometryError(message, context) with a compact context suffix in __str__.
    2. Provide the ReadError / ParseError tiers for I/O and decoding failures.
    3. Provide InvalidGeometryError and one subclass per validation rule, each with a fixed
       user-facing message and only the payload needed to render it.

Notes
-----
- InvalidGeometryError subclasses render their message verbatim (no context suffix), so the
  text a caller sees is exactly the rule that fired.
- Each variant carries a class-level `rule` id matching the validation registry.
"""

__all__ = [
    "GeometryError",
    "ReadError",
    "ParseError",
    "WriteError",
    "InvalidGeometryError",
    "EmptyGeometryError",
    "DimensionMismatchError",
    "TooFewPanelsError",
    "TooManyPanelsError",
    "TrailingEdgeBoundsError",
    "LeadingEdgeBoundsError",
    "ThicknessBoundsError",
    "NoZeroCrossingError",
    "BeginAndEndAtTrailingEdgeError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class GeometryError(Exception):
    """
    Base class for every error raised while loading a geometry file.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields appended in the string form (e.g., {"path": "aerofoil.json"}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self):
        base = super().__str__()
        return base + _format_context(self.context)


class ReadError(GeometryError):
    """
    The geometry file could not be opened or read:
      - missing path, path is a directory
      - insufficient permissions, other OS-level failures
    """


class ParseError(GeometryError):
    """
    The file was read but its contents do not describe a geometry record:
      - malformed JSON / non-UTF-8 bytes / non-finite literals
      - missing `reference`, `x_c` or `y_c`
      - wrong container types or non-numeric entries
    """


class WriteError(GeometryError):
    """
    A geometry record could not be written back to disk (export/round-trip helpers only).
    """


class InvalidGeometryError(GeometryError):
    """
    The geometry parsed cleanly but failed a plausibility rule.

    Subclasses define `rule` and `message`; the message may reference attributes set in
    the subclass constructor via str.format.
    """
    rule = "invalid_geometry"
    message = "Invalid aerofoil geometry."

    def __init__(self):
        super().__init__(self.message.format(**vars(self)))

    def __str__(self):
        return self.args[0]


class EmptyGeometryError(InvalidGeometryError):
    rule = "non_empty"
    message = (
        "Aerofoil geometry contains no points (x_c has {n_x} values, y_c has {n_y}); "
        "at least one surface point is needed in each coordinate array."
    )

    def __init__(self, n_x, n_y):
        self.n_x = n_x
        self.n_y = n_y
        super().__init__()


class DimensionMismatchError(InvalidGeometryError):
    rule = "dimension_match"
    message = (
        "Dimensions of x_c ({n_x}) and y_c ({n_y}) do not match; "
        "each surface point needs both an x/c and a y/c coordinate."
    )

    def __init__(self, n_x, n_y):
        self.n_x = n_x
        self.n_y = n_y
        super().__init__()


class TooFewPanelsError(InvalidGeometryError):
    rule = "panel_count_floor"
    message = (
        "Too few panels: the aerofoil must be described by at least {min_panels} panels "
        "(more than {min_panels} points) for the surface to be adequately resolved."
    )

    def __init__(self, min_panels):
        self.min_panels = min_panels
        super().__init__()


class TooManyPanelsError(InvalidGeometryError):
    rule = "panel_count_ceiling"
    message = (
        "Too many panels: the aerofoil may be described by at most {max_panels} panels "
        "({max_points} points); resample the surface more coarsely."
    )

    def __init__(self, max_panels):
        self.max_panels = max_panels
        self.max_points = max_panels + 1
        super().__init__()


class TrailingEdgeBoundsError(InvalidGeometryError):
    rule = "trailing_edge_x"
    message = (
        "Maximum x/c must lie between 0.95 and 1.05; "
        "coordinates should be normalised by chord so the trailing edge sits at x/c = 1."
    )


class LeadingEdgeBoundsError(InvalidGeometryError):
    rule = "leading_edge_x"
    message = (
        "Minimum x/c must lie between -0.05 and 0.05; "
        "coordinates should be normalised so the leading edge sits at x/c = 0."
    )


class ThicknessBoundsError(InvalidGeometryError):
    rule = "y_magnitude"
    message = (
        "y/c values must lie between -1.0 and 1.0; "
        "coordinates should be normalised by chord, not by thickness."
    )


class NoZeroCrossingError(InvalidGeometryError):
    rule = "y_straddles_zero"
    message = (
        "y/c values must lie on both sides of zero; "
        "the surface should trace both the upper and lower sides of the aerofoil about the chord line."
    )


class BeginAndEndAtTrailingEdgeError(InvalidGeometryError):
    rule = "endpoints_at_te"
    message = (
        "First and last points must lie at the trailing edge (x/c >= 0.95); "
        "points should be ordered from TE, around the LE and back to the TE."
    )
