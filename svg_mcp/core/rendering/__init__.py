"""
Rendering Engine
================

SVG parsing and rasterization (CairoSVG) and raster encoding (Pillow).
"""
