"""
Configuration models for prattcalc.

Configuration is loaded from an optional prattcalc.toml file.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "prattcalc.toml"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ReplConfig(BaseModel):
    """Interactive prompt settings."""

    prompt: str = "> "
    precision: int | None = Field(
        default=None,
        ge=1,
        le=17,
        description="Significant digits when printing results; None for shortest repr",
    )


class LoggingConfig(BaseModel):
    """Logging settings applied by the CLI."""

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in _LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(_LOG_LEVELS)}")
        return upper


class CalcConfig(BaseModel):
    """Complete prattcalc configuration."""

    repl: ReplConfig = Field(default_factory=ReplConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================


def load_config(toml_path: Path) -> CalcConfig:
    """
    Load configuration from a prattcalc.toml file.

    Args:
        toml_path: Path to the TOML file

    Returns:
        CalcConfig with values from file or defaults

    Raises:
        pydantic.ValidationError: If a section holds invalid values
    """
    if not toml_path.exists():
        return CalcConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        logger.warning("Ignoring malformed config %s: %s", toml_path, e)
        return CalcConfig()

    return _parse_config(data)


def _parse_config(data: dict[str, Any]) -> CalcConfig:
    """Parse config dict into CalcConfig, ignoring unrelated sections."""
    config_data: dict[str, Any] = {}
    for section in ("repl", "logging"):
        if section in data:
            config_data[section] = data[section]

    return CalcConfig.model_validate(config_data)
