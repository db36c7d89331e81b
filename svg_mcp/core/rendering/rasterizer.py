"""
SVG Rasterizer
==============

CairoSVG-based parsing and rasterization of SVG markup.
Resolves output dimensions from the document's declared viewport and renders
the scene, stretched to the requested size, into an RGBA pixel buffer.
"""

from typing import Any, Optional, Tuple
from dataclasses import dataclass
import math
import re
import sys

import cairocffi as cairo
from cairosvg.parser import Tree
from cairosvg.surface import PNGSurface
from PIL import Image

from svg_mcp.config.logging import get_logger
from svg_mcp.config.settings import Settings, get_settings
from svg_mcp.core.errors import (
    AllocationFailure,
    InvalidDimensions,
    ParseFailure,
    RenderFailure,
)

logger = get_logger(__name__)

# Largest surface edge cairo accepts
MAX_SURFACE_DIMENSION = 32767

# Extent used for an axis the document does not declare at all
DEFAULT_VIEWPORT_SIZE = 100.0

# cairo statuses raised when a surface cannot be allocated
ALLOCATION_STATUSES = (cairo.STATUS_NO_MEMORY, cairo.STATUS_INVALID_SIZE)

_LENGTH_RE = re.compile(
    r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*(px|pt|pc|mm|cm|in|em|ex|%)?\s*$"
)
_VIEWBOX_SEPARATOR_RE = re.compile(r"[\s,]+")


@dataclass
class RasterImage:
    """RGBA pixel buffer of exactly width x height pixels."""

    width: int
    height: int
    image: Image.Image

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height


def units_per_pixel(dpi: float) -> dict:
    """Pixel size of each absolute CSS unit at the given resolution."""
    return {
        None: 1.0,
        "px": 1.0,
        "in": dpi,
        "cm": dpi / 2.54,
        "mm": dpi / 25.4,
        "pt": dpi / 72.0,
        "pc": dpi / 6.0,
        "em": 16.0,
        "ex": 8.0,
    }


def parse_length(value: Optional[str], dpi: float = 96.0) -> Optional[Tuple[float, bool]]:
    """
    Parse an SVG length attribute.

    Returns:
        (number, is_percentage) with absolute units converted to pixels,
        or None when the attribute is missing or unparsable.
    """
    if value is None:
        return None
    match = _LENGTH_RE.match(str(value))
    if not match:
        return None
    number = float(match.group(1))
    unit = match.group(2)
    if unit == "%":
        return number, True
    return number * units_per_pixel(dpi)[unit], False


def parse_viewbox(value: Optional[str]) -> Optional[Tuple[float, float, float, float]]:
    """Parse a viewBox attribute into (min_x, min_y, width, height)."""
    if not value:
        return None
    parts = [part for part in _VIEWBOX_SEPARATOR_RE.split(value.strip()) if part]
    if len(parts) != 4:
        return None
    try:
        min_x, min_y, width, height = (float(part) for part in parts)
    except ValueError:
        return None
    return min_x, min_y, width, height


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def image_from_surface(surface: cairo.ImageSurface) -> Image.Image:
    """Copy a cairo ARGB32 image surface into a straight-alpha RGBA image."""
    surface.flush()
    # ARGB32 is stored as native-endian 32-bit words with premultiplied alpha
    rawmode = "BGRa" if sys.byteorder == "little" else "aRGB"
    image = Image.frombuffer(
        "RGBa",
        (surface.get_width(), surface.get_height()),
        bytes(surface.get_data()),
        "raw",
        rawmode,
        surface.get_stride(),
        1,
    )
    return image.convert("RGBA")


class StretchedSurface(PNGSurface):
    """
    In-memory cairo surface that draws a document at an arbitrary pixel size.

    The root element is laid out at its intrinsic size with its own viewBox
    and preserveAspectRatio; that viewport is then scaled independently on
    each axis onto the width x height surface.
    """

    def __init__(
        self, tree: Tree, dpi: float, width: int, height: int, intrinsic: Tuple[float, float]
    ):
        self.root_tree = tree
        self.viewport_size = intrinsic
        super().__init__(tree, None, dpi, output_width=width, output_height=height)

    def set_context_size(self, width, height, viewbox, tree):
        if tree is not self.root_tree:
            return super().set_context_size(width, height, viewbox, tree)

        intrinsic_width, intrinsic_height = self.viewport_size
        self.context.scale(width / intrinsic_width, height / intrinsic_height)
        if parse_viewbox(tree.get("viewBox")) is None:
            viewbox = (0, 0, intrinsic_width, intrinsic_height)
        return super().set_context_size(intrinsic_width, intrinsic_height, viewbox, tree)


class SvgRasterizer:
    """Parses SVG markup and renders it into RGBA raster images."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.logger: Any = logger.bind(component="rasterizer")  # structlog.BoundLoggerBase

    def parse(self, svg_content: str) -> Tree:
        """
        Parse SVG markup into a CairoSVG render tree.

        External resources are not fetched.

        Raises:
            ParseFailure: If the markup is not well-formed or its root is not <svg>
        """
        try:
            tree = Tree(bytestring=svg_content.encode("utf-8"), unsafe=False)
        except Exception as e:
            self.logger.debug("SVG parsing failed", error=str(e))
            raise ParseFailure(f"SVG parsing failed: {e}") from e

        if tree.tag != "svg":
            raise ParseFailure(f"SVG parsing failed: root element is <{tree.tag}>, expected <svg>")
        return tree

    def intrinsic_size(self, tree: Tree) -> Tuple[float, float]:
        """
        Size the document declares for itself, in pixels.

        Each axis comes from the width/height attribute; a missing or
        percentage value falls back to the viewBox extent, then to 100px.

        Raises:
            InvalidDimensions: If an axis is zero or negative
        """
        viewbox = parse_viewbox(tree.get("viewBox"))
        width = self._viewport_axis(tree.get("width"), viewbox[2] if viewbox else None)
        height = self._viewport_axis(tree.get("height"), viewbox[3] if viewbox else None)

        if width <= 0 or height <= 0:
            raise InvalidDimensions(
                f"SVG declares an empty viewport ({width:g}x{height:g})"
            )
        return width, height

    def _viewport_axis(self, attribute: Optional[str], viewbox_extent: Optional[float]) -> float:
        length = parse_length(attribute, self.settings.dpi)
        if length is not None:
            number, is_percentage = length
            if not is_percentage:
                return number
            if viewbox_extent is not None:
                return viewbox_extent * number / 100.0
            return DEFAULT_VIEWPORT_SIZE * number / 100.0
        if viewbox_extent is not None:
            return viewbox_extent
        return DEFAULT_VIEWPORT_SIZE

    def resolve_dimensions(
        self,
        intrinsic: Tuple[float, float],
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> Tuple[int, int]:
        """
        Resolve the output raster size.

        Each axis is independent: an unspecified axis takes the intrinsic
        extent rounded to whole pixels, whatever the other axis is.

        Raises:
            InvalidDimensions: If an axis is not a positive, representable pixel count
            AllocationFailure: If the raster exceeds the configured pixel budget
        """
        final_width = self._check_axis("width", width, intrinsic[0])
        final_height = self._check_axis("height", height, intrinsic[1])

        pixels = final_width * final_height
        if pixels > self.settings.max_pixels:
            raise AllocationFailure(
                f"Raster of {final_width}x{final_height} pixels exceeds the limit of "
                f"{self.settings.max_pixels} pixels"
            )
        return final_width, final_height

    def _check_axis(self, name: str, requested: Optional[int], intrinsic: float) -> int:
        if requested is None:
            value = round_half_up(intrinsic)
            source = "intrinsic"
        elif isinstance(requested, bool) or not isinstance(requested, int):
            raise InvalidDimensions(f"{name} must be an integer, got {requested!r}")
        else:
            value = requested
            source = "requested"

        if value <= 0:
            raise InvalidDimensions(f"{source} {name} must be a positive pixel count, got {value}")
        if value > MAX_SURFACE_DIMENSION:
            raise InvalidDimensions(
                f"{source} {name} {value} exceeds the maximum of {MAX_SURFACE_DIMENSION} pixels"
            )
        return value

    def rasterize(
        self, tree: Tree, width: int, height: int, intrinsic: Optional[Tuple[float, float]] = None
    ) -> RasterImage:
        """
        Render a parsed document into a transparent RGBA buffer of width x height.

        The document keeps its own viewport mapping (viewBox and
        preserveAspectRatio); the result is then scaled by
        (width / intrinsic_width, height / intrinsic_height), so it is
        stretched to the target size, never letterboxed.

        Raises:
            AllocationFailure: If the buffer cannot be allocated
            RenderFailure: If the renderer fails
        """
        intrinsic = intrinsic or self.intrinsic_size(tree)

        try:
            surface = StretchedSurface(tree, self.settings.dpi, width, height, intrinsic)
            image = image_from_surface(surface.cairo)
            surface.finish()
        except MemoryError as e:
            raise AllocationFailure(
                f"Failed to allocate a {width}x{height} raster buffer"
            ) from e
        except cairo.CairoError as e:
            if e.status in ALLOCATION_STATUSES:
                raise AllocationFailure(
                    f"Failed to allocate a {width}x{height} raster buffer: {e}"
                ) from e
            self.logger.error("SVG rendering failed", width=width, height=height, error=str(e))
            raise RenderFailure(f"SVG rendering failed: {e}") from e
        except Exception as e:
            self.logger.error("SVG rendering failed", width=width, height=height, error=str(e))
            raise RenderFailure(f"SVG rendering failed: {e}") from e

        self.logger.debug(
            "SVG rasterized",
            width=image.width,
            height=image.height,
            scale_x=width / intrinsic[0],
            scale_y=height / intrinsic[1],
        )
        return RasterImage(width=image.width, height=image.height, image=image)

    def render(
        self, svg_content: str, width: Optional[int] = None, height: Optional[int] = None
    ) -> RasterImage:
        """Parse, size and rasterize SVG markup in one step."""
        tree = self.parse(svg_content)
        intrinsic = self.intrinsic_size(tree)
        final_width, final_height = self.resolve_dimensions(intrinsic, width, height)
        return self.rasterize(tree, final_width, final_height, intrinsic)
