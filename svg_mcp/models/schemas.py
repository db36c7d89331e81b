"""
Pydantic Models and Schemas
===========================

Core data models for tool requests, conversion results and output formats.
Request models double as the source of the JSON schemas advertised to MCP clients.
"""

from typing import Optional, Dict, Any
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.types import StrictStr, StrictInt, StrictBool


# Largest value of an unsigned 32-bit integer, the boundary range for pixel sizes
U32_MAX = 2**32 - 1
# Largest value of an unsigned 8-bit integer, the boundary range for JPEG quality
U8_MAX = 2**8 - 1

DEFAULT_JPEG_QUALITY = 85


# Enums
class ImageFormat(str, Enum):
    """Raster output formats."""
    PNG = "png"
    JPEG = "jpeg"

    @property
    def mime_type(self) -> str:
        """Canonical MIME type of the format."""
        return _MIME_TYPES[self]

    @property
    def extension(self) -> str:
        """File extension used for emitted files, including the dot."""
        return _EXTENSIONS[self]

    @property
    def label(self) -> str:
        """Upper-case name used in messages."""
        return self.name


_MIME_TYPES = {ImageFormat.PNG: "image/png", ImageFormat.JPEG: "image/jpeg"}
_EXTENSIONS = {ImageFormat.PNG: ".png", ImageFormat.JPEG: ".jpg"}


# Tool Request Models
class SvgToPngRequest(BaseModel):
    """Arguments of the svg_to_png tool."""

    model_config = ConfigDict(extra="ignore", title="SvgToPngRequest")

    svg_content: StrictStr = Field(..., min_length=1, description="SVG markup to convert")
    width: Optional[StrictInt] = Field(
        None, ge=0, le=U32_MAX, description="Output width in pixels (default: SVG intrinsic width)"
    )
    height: Optional[StrictInt] = Field(
        None, ge=0, le=U32_MAX, description="Output height in pixels (default: SVG intrinsic height)"
    )
    return_base64: Optional[StrictBool] = Field(
        None, description="Whether to return base64 data instead of file path (default: false)"
    )


class SvgToJpegRequest(SvgToPngRequest):
    """Arguments of the svg_to_jpeg tool."""

    model_config = ConfigDict(extra="ignore", title="SvgToJpegRequest")

    quality: Optional[StrictInt] = Field(
        None, ge=0, le=U8_MAX, description="JPEG quality 0-100 (default: 85)"
    )


# Conversion Results
class ConversionResult(BaseModel):
    """Result of one conversion: an emitted file path or inline base64 data."""

    model_config = ConfigDict(frozen=True)

    file_path: Optional[str] = Field(None, description="Path of the emitted image file")
    base64_data: Optional[str] = Field(None, description="Base64 encoded image data")
    mime_type: str = Field(..., description="MIME type of the image")

    @model_validator(mode="after")
    def check_single_payload(self) -> "ConversionResult":
        """Exactly one of file_path and base64_data must be set."""
        if (self.file_path is None) == (self.base64_data is None):
            raise ValueError("exactly one of file_path and base64_data must be set")
        return self

    def to_payload(self) -> Dict[str, Any]:
        """Serialized form, leaving out the unset field."""
        return self.model_dump(exclude_none=True)
