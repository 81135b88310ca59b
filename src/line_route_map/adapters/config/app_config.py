"""12-factor configuration adapter using environment variables and TOML config."""

import re
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from line_route_map.adapters.osrm_api.constants import (
    OSRM_DEFAULT_PROFILE,
    OSRM_MIN_DELAY_SECONDS,
    OSRM_PROFILES,
    OSRM_PUBLIC_BASE_URL,
)
from line_route_map.domain.models.line_style import DEFAULT_LINE_COLOR

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _check_profile(v: str) -> str:
    if v not in OSRM_PROFILES:
        raise ValueError(f"osrm_profile must be one of {', '.join(OSRM_PROFILES)}")
    return v


def _check_line_color(v: str) -> str:
    if not _HEX_COLOR.match(v):
        raise ValueError("line_color must be a hex color code like '#2563eb'")
    return v


def _check_segment_delay(v: int) -> int:
    if v < 0:
        raise ValueError("segment_delay_ms must not be negative")
    return v


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    reload: bool = Field(default=False, description="Enable auto-reload for development")

    # Routing service configuration
    osrm_base_url: str = Field(
        default=OSRM_PUBLIC_BASE_URL, description="Root URL of the OSRM routing server"
    )
    osrm_profile: str = Field(
        default=OSRM_DEFAULT_PROFILE, description="OSRM routing profile, e.g. 'driving'"
    )
    osrm_timeout_seconds: int = Field(
        default=10, description="Timeout for OSRM requests in seconds"
    )
    osrm_min_delay_seconds: float = Field(
        default=OSRM_MIN_DELAY_SECONDS,
        description="Minimum delay between any two requests to the OSRM server",
    )
    segment_delay_ms: int = Field(
        default=300,
        description="Delay in milliseconds before each segment request after the first",
    )

    # Display configuration
    line_color: str = Field(
        default=DEFAULT_LINE_COLOR, description="Default polyline color (hex color code)"
    )
    fit_padding_px: int = Field(
        default=50, description="Padding in pixels when fitting the map to a line"
    )

    # Rate limiting configuration
    rate_limit_per_minute: int = Field(
        default=100,
        description="Maximum number of requests allowed per IP address per minute",
    )

    # TOML config file path
    config_file: str | None = Field(
        default="config.example.toml",
        description="Path to TOML configuration file with line definitions",
    )

    @field_validator("osrm_profile")
    @classmethod
    def validate_osrm_profile(cls, v: str) -> str:
        """Validate the routing profile is one OSRM serves."""
        return _check_profile(v)

    @field_validator("line_color")
    @classmethod
    def validate_line_color(cls, v: str) -> str:
        """Validate line color is a hex color code."""
        return _check_line_color(v)

    @field_validator("segment_delay_ms")
    @classmethod
    def validate_segment_delay(cls, v: int) -> int:
        """Validate the segment delay is not negative."""
        return _check_segment_delay(v)

    @property
    def segment_delay_seconds(self) -> float:
        """Segment delay in seconds."""
        return self.segment_delay_ms / 1000

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file, applying [routing] and [display] overrides."""
        if not self.config_file:
            raise ValueError("config_file must be set to load line configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        routing = toml_data.get("routing", {})
        if "segment_delay_ms" in routing:
            self.segment_delay_ms = _check_segment_delay(int(routing["segment_delay_ms"]))
        if "osrm_profile" in routing:
            self.osrm_profile = _check_profile(routing["osrm_profile"])
        if "osrm_base_url" in routing:
            self.osrm_base_url = routing["osrm_base_url"]

        display = toml_data.get("display", {})
        if "line_color" in display:
            self.line_color = _check_line_color(display["line_color"])
        if "fit_padding_px" in display:
            self.fit_padding_px = int(display["fit_padding_px"])

        return toml_data

    def apply_file_overrides(self, required: bool = False) -> bool:
        """Apply [routing] and [display] from the config file when it exists.

        Args:
            required: Raise FileNotFoundError instead of skipping a missing file.

        Returns:
            True if a config file was read.
        """
        if not self.config_file:
            return False
        if not required and not Path(self.config_file).exists():
            return False
        self._load_toml_data()
        return True

    def get_lines_config(self) -> list[dict[str, Any]]:
        """Parse and return line definitions as a list of dicts from the TOML file.

        Raises:
            ValueError: If 'lines' is not a list or line names are not unique.
        """
        toml_data = self._load_toml_data()

        lines = toml_data.get("lines", [])
        if not isinstance(lines, list):
            raise ValueError("TOML config 'lines' must be a list")

        names = [line.get("name") for line in lines if isinstance(line, dict)]
        if len(names) != len(set(names)):
            duplicates = {n for n in names if names.count(n) > 1}
            raise ValueError(f"Line names must be unique. Duplicate names found: {duplicates}")

        return [line for line in lines if isinstance(line, dict)]
