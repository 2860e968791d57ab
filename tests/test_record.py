"""Tests for geometry.record and geometry.errors."""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from geometry.errors import (
    BeginAndEndAtTrailingEdgeError,
    DimensionMismatchError,
    GeometryError,
    InvalidGeometryError,
    ParseError,
    ReadError,
    TooFewPanelsError,
    TooManyPanelsError,
)
from geometry.record import Geometry


class TestGeometry:
    def test_is_frozen(self, make_geometry):
        g = make_geometry()
        with pytest.raises(dataclasses.FrozenInstanceError):
            g.reference = (0.0, 0.0)  # type: ignore[misc]

    def test_arrays_are_read_only(self, make_geometry):
        g = make_geometry()
        with pytest.raises(ValueError):
            g.x_c[0] = 0.5
        with pytest.raises(ValueError):
            g.y_c[0] = 0.5

    def test_source_arrays_are_copied(self, outline):
        x, y = outline(161)
        g = Geometry(reference=(0.25, 0.0), x_c=x, y_c=y)
        x[0] = 0.0
        assert g.x_c[0] == 1.0

    def test_counts(self, make_geometry):
        g = make_geometry(201)
        assert g.n_points == 201
        assert g.n_panels == 200

    def test_arrays_are_float64(self):
        g = Geometry(reference=(0, 0), x_c=[1, 0, 1], y_c=[0, 1, -1])
        assert g.x_c.dtype == np.float64
        assert g.reference == (0.0, 0.0)

    def test_to_dict(self):
        g = Geometry(reference=(0.25, 0.0), x_c=[1.0, 0.0], y_c=[0.0, 0.0])
        assert g.to_dict() == {"reference": [0.25, 0.0], "x_c": [1.0, 0.0], "y_c": [0.0, 0.0]}

    def test_from_dict_names_record(self):
        g = Geometry.from_dict({"reference": [0.25, 0.0], "x_c": [1.0], "y_c": [0.0]}, name="clarky")
        assert g.name == "clarky"

    def test_from_dict_rejects_nested_lists(self):
        with pytest.raises(ParseError):
            Geometry.from_dict({"reference": [0.25, 0.0], "x_c": [[1.0, 0.0]], "y_c": [0.0]})


class TestErrors:
    def test_tiers(self):
        for cls in (ReadError, ParseError, InvalidGeometryError):
            assert issubclass(cls, GeometryError)
        assert not issubclass(ParseError, ReadError)
        assert not issubclass(InvalidGeometryError, ParseError)

    def test_context_suffix(self):
        err = ReadError("Unable to read geometry file", {"path": "aerofoil.json"})
        assert str(err) == "Unable to read geometry file | path='aerofoil.json'"

    def test_long_context_truncated(self):
        err = ParseError("bad", {"value": "x" * 500})
        assert str(err).endswith("...")
        assert len(str(err)) < 200

    def test_no_context(self):
        assert str(ParseError("bad")) == "bad"

    def test_invalid_geometry_messages_have_no_suffix(self):
        err = DimensionMismatchError(161, 160)
        assert str(err) == (
            "Dimensions of x_c (161) and y_c (160) do not match; "
            "each surface point needs both an x/c and a y/c coordinate."
        )

    def test_panel_payloads(self):
        assert "100 panels" in str(TooFewPanelsError(100))
        err = TooManyPanelsError(250)
        assert "250 panels" in str(err) and "251 points" in str(err)

    def test_trailing_edge_ordering_message(self):
        assert str(BeginAndEndAtTrailingEdgeError()) == (
            "First and last points must lie at the trailing edge (x/c >= 0.95); "
            "points should be ordered from TE, around the LE and back to the TE."
        )
