# -*- coding: utf-8 -*-
# yfoil/post/__init__.py

"""
Project: yfoil
Date: 10/18/2026

Modules:
--------
- plot_geo:    Aerofoil outline plotting (x/c vs y/c scatter + reference marker).
               Wraps matplotlib; headless-safe backend, saves to aerofoil_geometry.png by default.
"""

__all__ = ["plot_geo"]
