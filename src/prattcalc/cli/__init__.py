"""
prattcalc CLI package.

- main.py: typer application and commands
- utils.py: version display, logging and config helpers
"""

from prattcalc.cli.main import app, main
from prattcalc.cli.utils import version_callback

__all__ = [
    "app",
    "main",
    "version_callback",
]
