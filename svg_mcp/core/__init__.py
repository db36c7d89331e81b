"""
Core Business Logic
===================

Conversion pipeline: SVG rendering, image encoding, output packaging and the
conversion service tying them together.
"""
