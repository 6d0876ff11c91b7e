"""Shared pytest fixtures for prattcalc tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes prattcalc.toml into a temp dir."""

    def _write(content: str) -> Path:
        path = tmp_path / "prattcalc.toml"
        path.write_text(content)
        return path

    return _write


@pytest.fixture(autouse=True)
def restore_package_log_level() -> Iterator[None]:
    """Undo the package log level set by CLI commands."""
    logger = logging.getLogger("prattcalc")
    level = logger.level
    yield
    logger.setLevel(level)
