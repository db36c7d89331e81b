"""
Conversion Errors
=================

Exception taxonomy of the conversion pipeline. Every failure raised by the
conversion service is a ConversionError subclass with a stable ``kind``.
"""


class ConversionError(Exception):
    """Base class for conversion pipeline failures."""

    kind = "conversion_error"


class ParseFailure(ConversionError):
    """SVG markup could not be parsed."""

    kind = "parse_failure"


class InvalidDimensions(ConversionError):
    """Requested or declared raster size is not a usable pixel count."""

    kind = "invalid_dimensions"


class AllocationFailure(ConversionError):
    """Raster buffer for the requested size could not be allocated."""

    kind = "allocation_failure"


class InvalidParameter(ConversionError):
    """A conversion parameter is outside its valid range."""

    kind = "invalid_parameter"


class RenderFailure(ConversionError):
    """The renderer failed on a parsed document."""

    kind = "render_failure"


class EncodingFailure(ConversionError):
    """The image encoder failed."""

    kind = "encoding_failure"


class IoFailure(ConversionError):
    """Output file could not be created or written."""

    kind = "io_failure"
