# -*- coding: utf-8 -*-
# yfoil/post/plot_geo.py

"""
Project: yfoil
Date: 10/18/2026

Purpose:
--------
Plot a validated aerofoil outline (x/c vs y/c) with matplotlib and persist it as an image.
Surface points are drawn as markers joined by a light line; the reference point, if given,
is marked separately.
"""

import os
import logging
from typing import Optional, Sequence

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "aerofoil_geometry.png"


def _get_pyplot():
    """
    Import matplotlib.pyplot with a headless-safe backend if needed.

    Raises
    ------
    RuntimeError
        If matplotlib cannot be imported.
    """
    try:
        import matplotlib
        # Choose Agg when DISPLAY is not set to avoid GUI backend errors in headless/CI.
        if not os.environ.get("DISPLAY"):
            matplotlib.use("Agg")  # must be set before importing pyplot
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError("matplotlib is required for plotting: {}".format(e)) from e


def plot_aerofoil(x_c: Sequence[float],
                  y_c: Sequence[float],
                  *,
                  name: str = "aerofoil",
                  reference: Optional[Sequence[float]] = None,
                  show: bool = False,
                  save_path: Optional[str] = DEFAULT_OUTPUT,
                  ax=None) -> Optional[str]:
    """
    Scatter-plot an aerofoil surface.

    Parameters
    ----------
    x_c, y_c : Sequence[float]
        Index-paired normalised coordinates.
    name : str
        Title label for the figure.
    reference : Optional[Sequence[float]]
        (x/c, y/c) reference point to mark, if any.
    show : bool
        If True and we created the figure, display it.
    save_path : Optional[str]
        If given, save the figure to this path (default: "aerofoil_geometry.png").
    ax : Optional[matplotlib.axes.Axes]
        Existing Axes to draw on; if None, a figure is created.

    Returns
    -------
    Optional[str]
        The saved path, or None if nothing was written.
    """
    x = np.asarray(x_c, dtype=float)
    y = np.asarray(y_c, dtype=float)
    if x.ndim != 1 or x.shape != y.shape:
        raise ValueError("Expected equal-length 1D x_c and y_c, got shapes {} and {}.".format(x.shape, y.shape))

    plt = _get_pyplot()
    created_fig = False
    if ax is None:
        plt.figure(figsize=(8, 3))
        ax = plt.gca()
        created_fig = True

    ax.plot(x, y, color=(0.6, 0.6, 0.6), lw=0.8)
    ax.scatter(x, y, s=6, color="k", label="surface")
    if reference is not None:
        ax.plot(reference[0], reference[1], "r+", ms=10, mew=1.5, label="reference")
        ax.legend()
    ax.set_aspect("equal", adjustable="box")
    ax.set_title("Aerofoil: {} ({} points)".format(name, x.shape[0]))
    ax.set_xlabel("x/c")
    ax.set_ylabel("y/c")
    ax.grid(True)

    if save_path:
        try:
            ax.figure.savefig(save_path, dpi=300)
        except OSError:
            if created_fig:
                plt.close(ax.figure)
            raise
        logger.info("[plot_geo] Saved %s", save_path)
    if show and created_fig:
        plt.show()
    elif created_fig:
        plt.close(ax.figure)
    return save_path or None
