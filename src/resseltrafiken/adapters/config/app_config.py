"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from resseltrafiken.domain.models.display_settings import DisplaySettings

_DISPLAY_KEYS = (
    "max_visible_departures",
    "update_interval_seconds",
    "highlight_stop",
    "return_stop",
    "show_both_directions",
)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Timetable data
    data_path: str = Field(
        default="data/timetable.example.json",
        description="Path to the JSON timetable document",
    )

    # Display configuration
    max_visible_departures: int = Field(
        default=9, description="Maximum number of departures shown per stop"
    )
    update_interval_seconds: int = Field(
        default=60, description="Interval between timetable recomputations in seconds"
    )
    highlight_stop: str | None = Field(
        default="Lumabryggan",
        description="Stop whose next departure is highlighted",
    )
    return_stop: str | None = Field(
        default="Nybroplan",
        description="Highlighted stop on return-direction timetables",
    )
    show_both_directions: bool = Field(
        default=True,
        description="Show both outbound and return timetables of the city line",
    )
    timezone: str = Field(
        default="Europe/Stockholm",
        description="Timezone of the published timetable (IANA timezone name)",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level name, e.g. 'DEBUG'")

    # Optional TOML file whose [display] table overrides display settings
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with display settings",
    )

    @field_validator("max_visible_departures")
    @classmethod
    def validate_max_visible_departures(cls, v: int) -> int:
        """Validate max_visible_departures is positive."""
        if v < 1:
            raise ValueError("max_visible_departures must be a positive integer")
        return v

    @field_validator("update_interval_seconds")
    @classmethod
    def validate_update_interval(cls, v: int) -> int:
        """Validate update_interval_seconds is positive."""
        if v < 1:
            raise ValueError("update_interval_seconds must be a positive integer")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log_level names a standard logging level."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level

    def load_toml_display_settings(self) -> dict[str, Any]:
        """Load the TOML file and apply its [display] table.

        Returns:
            The parsed TOML data, or an empty dict if no config file is set.

        Raises:
            FileNotFoundError: If config_file is set but does not exist.
            ValueError: If the [display] table holds invalid values.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        display = toml_data.get("display", {})
        if not isinstance(display, dict):
            raise ValueError("TOML config 'display' must be a table")

        overrides = {key: display[key] for key in _DISPLAY_KEYS if key in display}
        if overrides:
            # Re-validate through the model so TOML values get the same checks as env vars
            validated = type(self)(_env_file=None, **{**self.model_dump(), **overrides})
            for key in overrides:
                setattr(self, key, getattr(validated, key))

        if "data_path" in toml_data:
            self.data_path = str(toml_data["data_path"])

        return toml_data

    def to_display_settings(self) -> DisplaySettings:
        """Build the display settings consumed by the timetable service."""
        return DisplaySettings(
            max_visible_departures=self.max_visible_departures,
            highlight_stop=self.highlight_stop,
            return_stop=self.return_stop,
            show_both_directions=self.show_both_directions,
        )
