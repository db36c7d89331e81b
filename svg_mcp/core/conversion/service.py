"""
Conversion Service
==================

Orchestrates SVG parsing and rasterization, image encoding and output
packaging for every supported output format.
"""

from typing import Any, Optional
import time

from svg_mcp.config.logging import get_logger
from svg_mcp.config.settings import Settings, get_settings
from svg_mcp.core.errors import ConversionError, InvalidParameter
from svg_mcp.core.output.packager import OutputPackager
from svg_mcp.core.rendering.encoder import encode
from svg_mcp.core.rendering.rasterizer import SvgRasterizer
from svg_mcp.models.schemas import ConversionResult, ImageFormat

logger = get_logger(__name__)


class SvgConverter:
    """Converts SVG markup into PNG or JPEG images."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rasterizer: Optional[SvgRasterizer] = None,
        packager: Optional[OutputPackager] = None,
    ):
        self.settings = settings or get_settings()
        self.rasterizer = rasterizer or SvgRasterizer(self.settings)
        self.packager = packager or OutputPackager(self.settings)
        self.logger: Any = logger.bind(component="converter")  # structlog.BoundLoggerBase

    def convert(
        self,
        svg_content: str,
        width: Optional[int] = None,
        height: Optional[int] = None,
        image_format: ImageFormat = ImageFormat.PNG,
        quality: Optional[int] = None,
        return_base64: bool = False,
    ) -> ConversionResult:
        """
        Convert SVG markup to a raster image.

        Args:
            svg_content: SVG markup
            width: Output width in pixels; intrinsic width when None
            height: Output height in pixels; intrinsic height when None
            image_format: Target format
            quality: JPEG quality 0-100; settings default when None, ignored for PNG
            return_base64: Return inline base64 data instead of a file path

        Returns:
            ConversionResult for the requested format

        Raises:
            ConversionError: Subclass describing the failure
        """
        if not isinstance(svg_content, str) or not svg_content:
            raise InvalidParameter("svg_content must be a non-empty string")

        try:
            image_format = ImageFormat(image_format)
        except ValueError as e:
            raise InvalidParameter(f"Unsupported output format: {image_format!r}") from e
        if image_format is ImageFormat.JPEG and quality is None:
            quality = self.settings.default_jpeg_quality

        start_time = time.perf_counter()
        try:
            raster = self.rasterizer.render(svg_content, width, height)
            data = encode(raster, image_format, quality)
            result = self.packager.package(data, image_format, return_base64)
        except ConversionError as e:
            self.logger.warning(
                "Conversion failed",
                format=image_format.value,
                error_kind=e.kind,
                error=str(e),
            )
            raise

        self.logger.info(
            "Conversion completed",
            format=image_format.value,
            width=raster.width,
            height=raster.height,
            byte_size=len(data),
            output="base64" if return_base64 else "file",
            processing_time=round(time.perf_counter() - start_time, 4),
        )
        return result

    def convert_svg_to_png(
        self,
        svg_content: str,
        width: Optional[int] = None,
        height: Optional[int] = None,
        return_base64: bool = False,
    ) -> ConversionResult:
        """Convert SVG markup to a PNG image."""
        return self.convert(
            svg_content, width, height, ImageFormat.PNG, return_base64=return_base64
        )

    def convert_svg_to_jpeg(
        self,
        svg_content: str,
        width: Optional[int] = None,
        height: Optional[int] = None,
        quality: Optional[int] = None,
        return_base64: bool = False,
    ) -> ConversionResult:
        """Convert SVG markup to a JPEG image."""
        return self.convert(
            svg_content, width, height, ImageFormat.JPEG, quality=quality, return_base64=return_base64
        )
