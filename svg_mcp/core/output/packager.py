"""
Output Packager
===============

Packages encoded image bytes as a ConversionResult: either inline base64 data
or a newly emitted file whose ownership passes to the caller.
"""

from typing import Any, Optional, Union
from pathlib import Path
import base64
import os
import tempfile

from svg_mcp.config.logging import get_logger
from svg_mcp.config.settings import Settings, get_settings
from svg_mcp.core.errors import IoFailure
from svg_mcp.models.schemas import ConversionResult, ImageFormat

logger = get_logger(__name__)


def create_persistent_file(
    data: bytes,
    suffix: str,
    prefix: str = "svg_mcp_",
    directory: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Write data to a new, uniquely named file and release it to the caller.

    The file is never deleted by this package: no handle or finalizer keeps a
    claim on it once this function returns.

    Raises:
        IoFailure: If the file cannot be created or fully written
    """
    try:
        fd, name = tempfile.mkstemp(suffix=suffix, prefix=prefix, dir=directory)
    except OSError as e:
        raise IoFailure(f"Failed to create output file: {e}") from e

    path = Path(name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
    except OSError as e:
        path.unlink(missing_ok=True)
        raise IoFailure(f"Failed to write output file {path}: {e}") from e

    return path


class OutputPackager:
    """Delivers encoded images as emitted files or base64 payloads."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.logger: Any = logger.bind(component="output_packager")  # structlog.BoundLoggerBase

    def package(self, data: bytes, image_format: ImageFormat, return_base64: bool = False) -> ConversionResult:
        """
        Package encoded image bytes.

        Args:
            data: Encoded image bytes
            image_format: Format of the bytes, fixing MIME type and file extension
            return_base64: Inline base64 data instead of an emitted file

        Returns:
            ConversionResult with exactly one of file_path and base64_data set

        Raises:
            IoFailure: If the output file cannot be written
        """
        if return_base64:
            return ConversionResult(
                base64_data=base64.b64encode(data).decode("ascii"),
                mime_type=image_format.mime_type,
            )

        path = create_persistent_file(
            data,
            suffix=image_format.extension,
            prefix=self.settings.output_prefix,
            directory=self.settings.output_dir,
        )
        self.logger.info("Image file emitted", file_path=str(path), byte_size=len(data))
        return ConversionResult(file_path=str(path), mime_type=image_format.mime_type)
