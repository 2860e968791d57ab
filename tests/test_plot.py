"""Tests for post.plot_geo and the plotting helpers that wrap it."""

from __future__ import annotations

import pytest

from geometry.api import render_geometry
from geometry.geo.geo_loader import GeometryLoader
from post.plot_geo import _get_pyplot, plot_aerofoil


@pytest.fixture(autouse=True)
def headless(monkeypatch):
    monkeypatch.delenv("DISPLAY", raising=False)


class TestPlotAerofoil:
    def test_writes_image(self, tmp_path, outline):
        x, y = outline(161)
        out = tmp_path / "aerofoil_geometry.png"
        assert plot_aerofoil(x, y, save_path=str(out)) == str(out)
        assert out.exists() and out.stat().st_size > 0

    def test_no_save(self, outline):
        x, y = outline(161)
        assert plot_aerofoil(x, y, save_path=None) is None

    def test_existing_axes(self, tmp_path, outline):
        plt = _get_pyplot()
        x, y = outline(161)
        fig, ax = plt.subplots()
        plot_aerofoil(x, y, reference=(0.25, 0.0), save_path=None, ax=ax)
        assert ax.get_xlabel() == "x/c"
        assert "161 points" in ax.get_title()
        plt.close(fig)

    def test_shape_mismatch(self, outline):
        x, y = outline(161)
        with pytest.raises(ValueError):
            plot_aerofoil(x, y[:-1], save_path=None)


class TestGeometryPlotting:
    def test_render_geometry(self, tmp_path, make_geometry):
        out = tmp_path / "plot.png"
        assert render_geometry(make_geometry(), save_path=str(out)) == str(out)
        assert out.exists()

    def test_loader_plot(self, tmp_path, write_json, valid_doc):
        loader = GeometryLoader(write_json(valid_doc))
        loader.load()
        out = tmp_path / "loader.png"
        loader.plot(save_path=str(out))
        assert out.exists()

    def test_loader_plot_requires_load(self, tmp_path):
        with pytest.raises(ValueError):
            GeometryLoader(str(tmp_path / "aerofoil.json")).plot()
