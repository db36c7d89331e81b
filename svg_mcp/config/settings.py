"""
Application Settings
===================

Main application settings and environment configuration using Pydantic Settings.
Supports development, testing, and production environments.
"""

from typing import Optional
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_INSTRUCTIONS = (
    "This server provides SVG to image conversion tools. "
    "You can convert SVG text content to PNG or JPEG images."
)


class Settings(BaseSettings):
    """Main application settings with environment variable support."""

    # Application Configuration
    app_name: str = Field(default="SVG MCP Server", description="Application name")
    environment: str = Field(
        default="development", description="Environment: development, testing, production"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # MCP Server Configuration
    server_name: str = Field(default="svg-mcp", description="MCP server name")
    instructions: str = Field(
        default=DEFAULT_INSTRUCTIONS, description="Instructions advertised to MCP clients"
    )

    # Output Configuration
    output_dir: Optional[Path] = Field(
        default=None, description="Directory for emitted image files (system temp dir if unset)"
    )
    output_prefix: str = Field(default="svg_mcp_", description="File name prefix for emitted images")

    # Rendering Configuration
    default_jpeg_quality: int = Field(
        default=85, ge=0, le=100, description="JPEG quality used when the caller gives none"
    )
    max_pixels: int = Field(
        default=100_000_000, gt=0, description="Largest raster (width x height) a call may allocate"
    )
    dpi: float = Field(default=96.0, gt=0, description="Resolution used to resolve physical units")

    # Monitoring Configuration
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "production"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("output_dir")
    @classmethod
    def create_output_dir(cls, v: Optional[Path]) -> Optional[Path]:
        """Ensure the output directory exists."""
        if v is not None:
            v.mkdir(parents=True, exist_ok=True)
        return v

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, env_prefix="SVG_MCP_"
    )


# Global settings instance - will be initialized when needed
settings = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
