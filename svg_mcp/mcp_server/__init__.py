"""
MCP Server Implementation
========================

Model Context Protocol server implementation providing tools for SVG to image conversion.

Tools provided:
- svg_to_png: Convert SVG text to a PNG image
- svg_to_jpeg: Convert SVG text to a JPEG image
"""
