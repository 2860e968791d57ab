"""Shared fixtures: NACA 0012 outlines and JSON geometry files."""

from __future__ import annotations

import json

import numpy as np
import pytest

from geometry.record import Geometry


def naca0012(n_points: int, thickness: float = 0.12):
    """Cosine-spaced NACA 00xx outline ordered TE → upper → LE → lower → TE."""
    beta = np.linspace(0.0, 2.0 * np.pi, n_points)
    x = 0.5 * (1.0 + np.cos(beta))
    yt = 5.0 * thickness * (
        0.2969 * np.sqrt(x) - 0.1260 * x - 0.3516 * x**2 + 0.2843 * x**3 - 0.1015 * x**4
    )
    y = np.where(beta <= np.pi, yt, -yt)
    return x, y


@pytest.fixture
def outline():
    """Factory returning mutable (x, y) arrays for an n-point outline."""
    def _make(n_points: int = 161):
        x, y = naca0012(n_points)
        return x.copy(), y.copy()
    return _make


@pytest.fixture
def make_geometry(outline):
    """Factory building a Geometry, optionally from overridden coordinates."""
    def _make(n_points: int = 161, x=None, y=None, reference=(0.25, 0.0)):
        x0, y0 = outline(n_points)
        return Geometry(
            reference=reference,
            x_c=x0 if x is None else x,
            y_c=y0 if y is None else y,
        )
    return _make


@pytest.fixture
def write_json(tmp_path):
    """Write a document (dict or raw text) to tmp_path/<name> and return the path."""
    def _write(doc, name: str = "aerofoil.json") -> str:
        path = tmp_path / name
        if isinstance(doc, (str, bytes)):
            mode = "wb" if isinstance(doc, bytes) else "w"
            with open(path, mode) as f:
                f.write(doc)
        else:
            path.write_text(json.dumps(doc))
        return str(path)
    return _write


@pytest.fixture
def valid_doc(outline):
    x, y = outline(161)
    return {"reference": [0.25, 0.0], "x_c": x.tolist(), "y_c": y.tolist()}
