"""
prattcalc CLI utilities.

Shared helpers used by the CLI commands.
"""

import logging
import platform
from pathlib import Path

import typer
from pydantic import ValidationError

from prattcalc._version import get_version
from prattcalc.core.config import DEFAULT_CONFIG_FILE, CalcConfig, load_config


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"prattcalc version {get_version()}")
        typer.echo(f"Python {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()


def configure_logging(level: str, verbose: bool = False) -> None:
    """Configure logging for a CLI run; ``verbose`` forces DEBUG.

    The root handler is only installed when none exists yet; the package
    logger level is always applied.
    """
    resolved = logging.DEBUG if verbose else getattr(logging, level)
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    logging.getLogger("prattcalc").setLevel(resolved)


def load_cli_config(config_path: Path | None, verbose: bool) -> CalcConfig:
    """Load configuration and apply its logging settings.

    Exits with code 1 if the configuration holds invalid values.
    """
    path = config_path or Path.cwd() / DEFAULT_CONFIG_FILE
    try:
        config = load_config(path)
    except ValidationError as e:
        typer.echo(f"Invalid configuration in {path}:\n{e}", err=True)
        raise typer.Exit(code=1)
    configure_logging(config.logging.level, verbose)
    return config
