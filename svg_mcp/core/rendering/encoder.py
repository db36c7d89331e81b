"""
Image Encoder
=============

Pillow-based serialization of RGBA raster buffers into PNG and JPEG byte streams.
"""

from typing import Optional
import io

from svg_mcp.config.logging import get_logger
from svg_mcp.core.errors import EncodingFailure, InvalidParameter
from svg_mcp.core.rendering.rasterizer import RasterImage
from svg_mcp.models.schemas import ImageFormat, DEFAULT_JPEG_QUALITY

logger = get_logger(__name__)

MIN_JPEG_QUALITY = 0
MAX_JPEG_QUALITY = 100


def validate_quality(quality: int) -> int:
    """Reject JPEG qualities outside 0-100 instead of clamping them."""
    if isinstance(quality, bool) or not isinstance(quality, int):
        raise InvalidParameter(f"JPEG quality must be an integer, got {quality!r}")
    if not MIN_JPEG_QUALITY <= quality <= MAX_JPEG_QUALITY:
        raise InvalidParameter(
            f"JPEG quality must be between {MIN_JPEG_QUALITY} and {MAX_JPEG_QUALITY}, got {quality}"
        )
    return quality


def encode_png(raster: RasterImage) -> bytes:
    """Encode the RGBA buffer losslessly as PNG."""
    output = io.BytesIO()
    try:
        raster.image.save(output, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodingFailure(f"PNG encoding failed: {e}") from e
    return output.getvalue()


def encode_jpeg(raster: RasterImage, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    """
    Encode the buffer as JPEG.

    The alpha channel is dropped as-is, without compositing against a
    background: transparent regions keep their stored colour (black where
    nothing was drawn).

    Raises:
        InvalidParameter: If quality is outside 0-100
        EncodingFailure: If Pillow fails to encode
    """
    validate_quality(quality)
    rgb_image = raster.image.convert("RGB")

    output = io.BytesIO()
    try:
        rgb_image.save(output, format="JPEG", quality=quality)
    except (OSError, ValueError) as e:
        raise EncodingFailure(f"JPEG encoding failed: {e}") from e
    return output.getvalue()


def encode(raster: RasterImage, image_format: ImageFormat, quality: Optional[int] = None) -> bytes:
    """Encode a raster in the requested format."""
    if image_format is ImageFormat.JPEG:
        data = encode_jpeg(raster, DEFAULT_JPEG_QUALITY if quality is None else quality)
    else:
        data = encode_png(raster)

    logger.debug(
        "Raster encoded",
        format=image_format.value,
        width=raster.width,
        height=raster.height,
        byte_size=len(data),
    )
    return data
