"""
SVG MCP Server
==============

A Model Context Protocol (MCP) server for converting SVG markup into raster
images (PNG, JPEG).

This package provides:
- Conversion pipeline: SVG parsing and rasterization with CairoSVG
- Image encoding with Pillow
- Output packaging as emitted files or inline base64 data
- Tool dispatch with schema discovery for MCP clients
"""

__version__ = "0.1.0"
__author__ = "SVG MCP Team"
