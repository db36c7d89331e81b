"""
Unit Tests for Output Packager
==============================

Unit tests for base64 and emitted-file delivery of encoded images.
"""

import base64
import gc
import os
from pathlib import Path

import pytest

from svg_mcp.core.errors import IoFailure
from svg_mcp.core.output.packager import OutputPackager, create_persistent_file
from svg_mcp.models.schemas import ConversionResult, ImageFormat

PAYLOAD = b"\x89PNG\r\n\x1a\n" + bytes(range(256)) * 4


class TestBase64Packaging:
    """Test inline base64 delivery."""

    def test_base64_result(self, packager, output_dir):
        result = packager.package(PAYLOAD, ImageFormat.PNG, return_base64=True)

        assert result.file_path is None
        assert result.mime_type == "image/png"
        assert base64.b64decode(result.base64_data, validate=True) == PAYLOAD
        assert list(output_dir.iterdir()) == []

    def test_base64_has_no_line_wrapping(self, packager):
        result = packager.package(PAYLOAD * 10, ImageFormat.JPEG, return_base64=True)
        assert "\n" not in result.base64_data
        assert result.mime_type == "image/jpeg"

    def test_payload_serialization_omits_unset_field(self, packager):
        payload = packager.package(PAYLOAD, ImageFormat.PNG, return_base64=True).to_payload()
        assert set(payload) == {"base64_data", "mime_type"}


class TestFilePackaging:
    """Test emitted-file delivery."""

    @pytest.mark.parametrize(
        "image_format, suffix, mime_type",
        [(ImageFormat.PNG, ".png", "image/png"), (ImageFormat.JPEG, ".jpg", "image/jpeg")],
    )
    def test_file_result(self, packager, output_dir, image_format, suffix, mime_type):
        result = packager.package(PAYLOAD, image_format)

        assert result.base64_data is None
        assert result.mime_type == mime_type
        path = Path(result.file_path)
        assert path.parent == output_dir
        assert path.suffix == suffix
        assert path.name.startswith("svg_mcp_")
        assert path.read_bytes() == PAYLOAD

    def test_file_names_are_unique(self, packager):
        first = packager.package(PAYLOAD, ImageFormat.PNG)
        second = packager.package(PAYLOAD, ImageFormat.PNG)
        assert first.file_path != second.file_path

    def test_file_outlives_packager(self, test_settings):
        packager = OutputPackager(test_settings)
        path = Path(packager.package(PAYLOAD, ImageFormat.PNG).file_path)

        del packager
        gc.collect()

        assert path.is_file()
        assert path.read_bytes() == PAYLOAD

    def test_custom_prefix(self, test_settings):
        packager = OutputPackager(test_settings.model_copy(update={"output_prefix": "render-"}))
        result = packager.package(PAYLOAD, ImageFormat.PNG)
        assert Path(result.file_path).name.startswith("render-")

    def test_missing_directory_is_io_failure(self, test_settings, tmp_path):
        settings = test_settings.model_copy(update={"output_dir": tmp_path / "missing"})
        with pytest.raises(IoFailure, match="Failed to create output file"):
            OutputPackager(settings).package(PAYLOAD, ImageFormat.PNG)

    def test_write_failure_removes_partial_file(self, output_dir, monkeypatch):
        class FailingHandle:
            def __init__(self, fd):
                self.fd = fd

            def __enter__(self):
                return self

            def __exit__(self, *exc_info):
                os.close(self.fd)
                return False

            def write(self, data):
                raise OSError(28, "No space left on device")

        monkeypatch.setattr(os, "fdopen", lambda fd, mode: FailingHandle(fd))

        with pytest.raises(IoFailure, match="No space left on device"):
            create_persistent_file(PAYLOAD, ".png", directory=output_dir)
        assert list(output_dir.iterdir()) == []


class TestConversionResult:
    """Test the single-payload invariant of results."""

    def test_both_fields_rejected(self):
        with pytest.raises(ValueError):
            ConversionResult(file_path="/tmp/x.png", base64_data="AA==", mime_type="image/png")

    def test_neither_field_rejected(self):
        with pytest.raises(ValueError):
            ConversionResult(mime_type="image/png")
