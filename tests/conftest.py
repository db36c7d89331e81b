"""
Test Configuration
==================

Pytest configuration with fixtures for all test types.
Provides testing settings, an isolated output directory and wired-up services.
"""

from pathlib import Path

import pytest
from pydantic_settings import SettingsConfigDict

from svg_mcp.config.settings import Settings
from svg_mcp.core.conversion.service import SvgConverter
from svg_mcp.core.output.packager import OutputPackager
from svg_mcp.core.rendering.rasterizer import SvgRasterizer
from svg_mcp.mcp_server.handlers import ToolDispatcher


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    environment: str = "testing"
    debug: bool = True
    log_level: str = "DEBUG"

    model_config = SettingsConfigDict(env_file=".env.test", env_prefix="SVG_MCP_TEST_")


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Directory receiving emitted image files."""
    directory = tmp_path / "output"
    directory.mkdir()
    return directory


@pytest.fixture
def test_settings(output_dir: Path) -> TestSettings:
    """Test settings fixture writing files into the per-test output directory."""
    return TestSettings(output_dir=output_dir)


@pytest.fixture
def rasterizer(test_settings: TestSettings) -> SvgRasterizer:
    return SvgRasterizer(test_settings)


@pytest.fixture
def packager(test_settings: TestSettings) -> OutputPackager:
    return OutputPackager(test_settings)


@pytest.fixture
def converter(test_settings: TestSettings) -> SvgConverter:
    return SvgConverter(test_settings)


@pytest.fixture
def dispatcher(converter: SvgConverter, test_settings: TestSettings) -> ToolDispatcher:
    return ToolDispatcher(converter=converter, settings=test_settings)
