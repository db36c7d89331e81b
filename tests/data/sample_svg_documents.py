"""
Sample SVG Documents
===================

Collection of sample SVG documents for testing sizing, stretching,
encoding and failure scenarios.
"""

# 100x100 square filled red
SIMPLE_SQUARE_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <rect x="0" y="0" width="100" height="100" fill="#ff0000"/>
</svg>"""

# 100x100 with only the left half filled, for telling stretch from letterbox
LEFT_HALF_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <rect x="0" y="0" width="50" height="100" fill="#ff0000"/>
</svg>"""

# 200x100, wider than tall
WIDE_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100">
  <rect x="10" y="10" width="180" height="80" fill="#0000ff"/>
</svg>"""

# 200x100 viewport over a square viewBox: the default xMidYMid meet centres
# the circle with uniform scale, leaving 50px empty on each side
LETTERBOX_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100" viewBox="0 0 100 100">
  <circle cx="50" cy="50" r="50" fill="#ff0000"/>
</svg>"""

# 100x50 viewport over a square viewBox with slice: only viewBox rows 25..75
# are visible, so the red band at the top is clipped away
SLICE_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="100" height="50" viewBox="0 0 100 100"
     preserveAspectRatio="xMidYMid slice">
  <rect x="0" y="0" width="100" height="25" fill="#ff0000"/>
  <rect x="0" y="25" width="100" height="50" fill="#0000ff"/>
</svg>"""

# Size declared only through the viewBox
VIEWBOX_ONLY_SVG = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 64 32">
  <circle cx="16" cy="16" r="12" fill="#00ff00"/>
</svg>"""

# Fractional intrinsic size: rounds to 11x20
FRACTIONAL_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="10.6" height="20.4">
  <rect width="10" height="20" fill="#333333"/>
</svg>"""

# Physical units: 1in and 72pt are both 96px
PHYSICAL_UNITS_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="1in" height="72pt" viewBox="0 0 10 10">
  <rect width="10" height="10" fill="#123456"/>
</svg>"""

# Percentage sizes resolve against the viewBox
PERCENT_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="50%" height="100%" viewBox="0 0 80 40">
  <rect width="80" height="40" fill="#654321"/>
</svg>"""

# No size information at all: 100x100 default viewport
UNSIZED_SVG = """<svg xmlns="http://www.w3.org/2000/svg">
  <rect width="50" height="50" fill="#999999"/>
</svg>"""

# Empty viewport
ZERO_SIZE_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="0" height="10"></svg>"""

# Nothing drawn: every pixel stays transparent
TRANSPARENT_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10"></svg>"""

# Busy content so JPEG quality visibly changes the output size
GRADIENT_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="200" height="200">
  <defs>
    <linearGradient id="sky" x1="0" y1="0" x2="1" y2="1">
      <stop offset="0%" stop-color="#ff7f50"/>
      <stop offset="50%" stop-color="#6a5acd"/>
      <stop offset="100%" stop-color="#20b2aa"/>
    </linearGradient>
  </defs>
  <rect width="200" height="200" fill="url(#sky)"/>
  <circle cx="60" cy="60" r="40" fill="#ffd700" stroke="#000000" stroke-width="3"/>
  <circle cx="140" cy="120" r="50" fill="#ff1493" fill-opacity="0.6"/>
  <path d="M10 190 Q 100 100 190 190" stroke="#ffffff" stroke-width="4" fill="none"/>
</svg>"""

# Unterminated tag
MALFORMED_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10"><rect"""

# Well-formed XML that is not SVG
NOT_SVG = """<html><body>not an image</body></html>"""
