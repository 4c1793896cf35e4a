"""Test fixtures for the CLI."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
import structlog
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def isolated_cli(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep user config out and reset logging the CLI configures."""
    for key in list(os.environ):
        if key.upper().startswith("SPECSCOPE__"):
            monkeypatch.delenv(key)
    for key in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(key, raising=False)
    with patch("specscope.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "no-global.yaml"):
        yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
