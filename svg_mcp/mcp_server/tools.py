"""
MCP Server Tools
================

Tool implementations for the MCP (Model Context Protocol) server.
Provides SVG to PNG and SVG to JPEG conversion tools and their static descriptors.
"""

from typing import Any, Dict, Mapping, Tuple, Type
from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import MappingProxyType
import copy

from pydantic import BaseModel

from svg_mcp.core.conversion.service import SvgConverter
from svg_mcp.models.schemas import (
    ConversionResult,
    ImageFormat,
    SvgToJpegRequest,
    SvgToPngRequest,
)


@dataclass(frozen=True)
class ToolDescriptor:
    """Name, description and argument schema of a tool."""

    name: str
    description: str
    schema: Mapping[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "schema": copy.deepcopy(dict(self.schema)),
        }


class ConversionTool(ABC):
    """Base class for tools backed by the conversion service."""

    name: str = ""
    description: str = ""
    request_model: Type[BaseModel] = SvgToPngRequest
    image_format: ImageFormat = ImageFormat.PNG

    def __init__(self, converter: SvgConverter):
        self.converter = converter

    @classmethod
    def descriptor(cls) -> ToolDescriptor:
        """Build the static descriptor of the tool."""
        return ToolDescriptor(
            name=cls.name,
            description=cls.description,
            schema=MappingProxyType(cls.request_model.model_json_schema()),
        )

    @abstractmethod
    def execute(self, request: Any) -> ConversionResult:
        """
        Execute the conversion for a validated request.

        Args:
            request: Instance of the tool's request model

        Returns:
            ConversionResult of the conversion

        Raises:
            ConversionError: If the conversion fails
        """


class SvgToPngTool(ConversionTool):
    """Tool for converting SVG text to PNG images."""

    name = "svg_to_png"
    description = "Convert SVG text to PNG image"
    request_model = SvgToPngRequest
    image_format = ImageFormat.PNG

    def execute(self, request: SvgToPngRequest) -> ConversionResult:
        return self.converter.convert_svg_to_png(
            request.svg_content,
            width=request.width,
            height=request.height,
            return_base64=bool(request.return_base64),
        )


class SvgToJpegTool(ConversionTool):
    """Tool for converting SVG text to JPEG images."""

    name = "svg_to_jpeg"
    description = "Convert SVG text to JPEG image"
    request_model = SvgToJpegRequest
    image_format = ImageFormat.JPEG

    def execute(self, request: SvgToJpegRequest) -> ConversionResult:
        return self.converter.convert_svg_to_jpeg(
            request.svg_content,
            width=request.width,
            height=request.height,
            quality=request.quality,
            return_base64=bool(request.return_base64),
        )


TOOL_CLASSES: Tuple[Type[ConversionTool], ...] = (SvgToPngTool, SvgToJpegTool)

# Built once at import, never mutated
TOOL_DESCRIPTORS: Tuple[ToolDescriptor, ...] = tuple(cls.descriptor() for cls in TOOL_CLASSES)
